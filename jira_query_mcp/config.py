import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_VERSION = "2"
DEFAULT_LOG_LEVEL = "INFO"

_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSY


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    jira_host: str
    api_token: str
    api_version: str = DEFAULT_API_VERSION
    proxy_url: str = ""
    verify_ssl: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()
        return cls(
            jira_host=os.getenv("JIRA_HOST", "").rstrip("/"),
            api_token=os.getenv("JIRA_API_TOKEN", ""),
            api_version=os.getenv("JIRA_API_VERSION") or DEFAULT_API_VERSION,
            proxy_url=os.getenv("PROXY_AGENT", "").strip(),
            verify_ssl=_env_flag("JIRA_VERIFY_SSL"),
            log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def api_root(self) -> str:
        return f"{self.jira_host}/rest/api/{self.api_version}"

    def get_auth_header(self) -> str:
        return f"Bearer {self.api_token}"
