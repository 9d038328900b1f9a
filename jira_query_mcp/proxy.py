"""Outbound transport selection for PROXY_AGENT."""

import logging
from urllib.parse import SplitResult, unquote, urlsplit, urlunsplit

import httpx
from httpx_socks import AsyncProxyTransport
from python_socks import ProxyType

from .errors import InvalidProxyUrl, UnsupportedProxyProtocol

logger = logging.getLogger(__name__)

DEFAULT_SOCKS_PORT = 1080

HTTP_SCHEMES = ("http", "https")

# scheme -> (proxy type, resolve hostnames on the proxy)
SOCKS_SCHEMES = {
    "socks": (ProxyType.SOCKS5, True),
    "socks4": (ProxyType.SOCKS4, False),
    "socks4a": (ProxyType.SOCKS4, True),
    "socks5": (ProxyType.SOCKS5, False),
    "socks5h": (ProxyType.SOCKS5, True),
}


def _redact(proxy_url: str) -> str:
    scheme, sep, rest = proxy_url.partition("://")
    if "@" in rest:
        rest = "***@" + rest.rsplit("@", 1)[1]
    return f"{scheme}{sep}{rest}"


def _split(proxy_url: str) -> tuple[SplitResult, int | None]:
    try:
        parts = urlsplit(proxy_url)
        port = parts.port
    except ValueError as e:
        raise InvalidProxyUrl(_redact(proxy_url), str(e)) from e
    if not parts.hostname:
        raise InvalidProxyUrl(_redact(proxy_url), "missing host")
    return parts, port


def _socks_transport(parts: SplitResult, port: int | None, verify: bool) -> AsyncProxyTransport:
    if parts.scheme not in SOCKS_SCHEMES:
        raise UnsupportedProxyProtocol(parts.scheme)
    proxy_type, rdns = SOCKS_SCHEMES[parts.scheme]
    return AsyncProxyTransport(
        proxy_type=proxy_type,
        proxy_host=parts.hostname,
        proxy_port=port or DEFAULT_SOCKS_PORT,
        username=unquote(parts.username) if parts.username else None,
        password=unquote(parts.password) if parts.password else None,
        rdns=rdns,
        verify=verify,
    )


def _http_transport(parts: SplitResult, verify: bool) -> httpx.AsyncHTTPTransport:
    if parts.scheme not in HTTP_SCHEMES:
        raise UnsupportedProxyProtocol(parts.scheme)
    # urlsplit lowercases the scheme, httpx only accepts lowercase ones
    return httpx.AsyncHTTPTransport(proxy=urlunsplit(parts), verify=verify)


def create_proxy_transport(
    proxy_url: str | None, verify: bool = True
) -> httpx.AsyncBaseTransport | None:
    """Build the transport every Jira request goes through.

    Returns None when no proxy is configured so httpx connects directly.
    SOCKS URLs (socks, socks4, socks4a, socks5, socks5h) get a SOCKS
    transport, http/https URLs an HTTP proxy transport. Credentials embedded
    in the URL are passed on to the proxy. Any other scheme raises
    UnsupportedProxyProtocol, and a URL without a usable host or port raises
    InvalidProxyUrl. No connection is opened here.
    """
    if not proxy_url:
        return None

    scheme = proxy_url.partition(":")[0].lower()
    if not scheme.startswith(("socks", "http")):
        raise UnsupportedProxyProtocol(scheme)

    parts, port = _split(proxy_url)
    if parts.scheme.startswith("socks"):
        transport = _socks_transport(parts, port, verify)
    else:
        transport = _http_transport(parts, verify)

    logger.info("Routing Jira requests through %s proxy %s", parts.scheme, parts.hostname)
    return transport
