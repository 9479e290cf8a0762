"""Exception hierarchy for mmhook.

All errors raised by the library inherit from MMHookError, so callers can
catch everything with a single except clause when they don't care about
the exact failure.
"""


class MMHookError(Exception):
    """Base exception for all mmhook errors."""


class SerializationError(MMHookError):
    """Message body could not be encoded as JSON."""


class TransportError(MMHookError):
    """HTTP request could not be completed.

    Covers DNS failures, refused connections, TLS errors, timeouts and
    malformed URLs. A non-2xx response is NOT a TransportError: the status
    code is returned to the caller instead.

    Attributes:
        url: Destination URL of the failed request
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ConfigurationError(MMHookError):
    """Invalid or unreadable webhook configuration.

    Attributes:
        config_path: Config file or dotted location of the problem
        field: Offending field or placeholder, if known
    """

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.config_path = config_path
        self.field = field
