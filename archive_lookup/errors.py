"""Typed failures raised by providers.

Every failure that makes a whole upstream response unusable is raised as a
``ProviderError`` subclass with a stable ``code``. Callers can switch on the
code without parsing messages.
"""


class ProviderError(Exception):
    """Base class for provider failures."""

    code: str = "PROVIDER_ERROR"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)


class NetworkOrTimeoutError(ProviderError):
    """Network failure, timeout or aborted request."""

    code = "NETWORK_OR_TIMEOUT"


class UpstreamHTTPError(ProviderError):
    """Transport succeeded but the status was outside 2xx."""

    def __init__(self, status: int):
        self.status = status
        self.code = f"UPSTREAM_HTTP_{status}"
        super().__init__(self.code)


class BadJSONError(ProviderError):
    """Status was ok but the body could not be decoded."""

    code = "BAD_JSON"


class BadPayloadError(ProviderError):
    """Decoded body did not have a recognizable item list."""

    code = "BAD_PAYLOAD"

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(f"{self.code}: {reason}" if reason else self.code)
