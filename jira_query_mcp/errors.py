"""Exception classes raised by the Jira query server."""


class JiraQueryError(Exception):
    """Base exception for the Jira query server."""


class ConfigurationError(JiraQueryError):
    """Raised when the server cannot be configured at startup."""


class UnsupportedProxyProtocol(ConfigurationError):
    """Raised when the proxy URL uses a scheme we cannot route through."""

    def __init__(self, protocol: str):
        self.protocol = protocol
        super().__init__(f"Unsupported proxy protocol: {protocol}")


class RegistryError(ConfigurationError):
    """Raised when the advertised tools and their handlers do not match."""


class ToolArgumentError(JiraQueryError, ValueError):
    """Raised when a tool is invoked without a required argument."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} is required")


class HttpError(JiraQueryError):
    """Raised when Jira answers with a non-success status code."""

    def __init__(self, status: int, status_text: str, url: str = ""):
        self.status = status
        self.status_text = status_text
        self.url = url
        super().__init__(f"HTTP {status}: {status_text}")


class InvalidProxyUrl(ConfigurationError):
    """Raised when PROXY_AGENT cannot be parsed into a host and port."""

    def __init__(self, proxy_url: str, reason: str):
        self.proxy_url = proxy_url
        self.reason = reason
        super().__init__(f"Invalid proxy URL {proxy_url!r}: {reason}")
