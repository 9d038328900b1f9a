import logging
from typing import Any

import httpx

from .config import Settings
from .errors import HttpError
from .proxy import create_proxy_transport

logger = logging.getLogger(__name__)


class JiraContext:
    """Settings plus the one HTTP client every tool call shares.

    Nothing here changes after construction. Tests hand in a fake transport
    (e.g. httpx.MockTransport) instead of building one from the settings.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.transport = transport
        if not settings.verify_ssl:
            logger.warning("SSL certificate verification disabled (JIRA_VERIFY_SSL)")
        # No timeout: a slow tracker is waited on until it answers or fails.
        self.http = httpx.AsyncClient(
            transport=transport,
            verify=settings.verify_ssl,
            timeout=None,
            headers={
                "Authorization": settings.get_auth_header(),
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "JiraContext":
        transport = create_proxy_transport(settings.proxy_url, verify=settings.verify_ssl)
        return cls(settings, transport)

    def url(self, path: str) -> str:
        return f"{self.settings.api_root}/{path}"

    async def get_json(self, path: str) -> Any:
        """GET a path below /rest/api/<version>/ and decode the JSON body.

        Raises HttpError for any status outside 2xx. Network failures surface
        as httpx errors and undecodable bodies as ValueError.
        """
        url = self.url(path)
        logger.debug("GET %s", url)
        response = await self.http.get(url)
        logger.debug("GET %s -> %s", url, response.status_code)
        if not response.is_success:
            raise HttpError(response.status_code, response.reason_phrase, url)
        return response.json()

    async def aclose(self) -> None:
        await self.http.aclose()
