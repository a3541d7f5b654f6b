"""Custom exceptions for the Shipit API client."""

from typing import Any


class ShipitError(Exception):
    """Base exception for all shipit_client errors."""

    pass


class TransportError(ShipitError):
    """Raised when the HTTP request itself fails (connection, DNS, timeout)."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method} {url} failed: {cause}")


class HTTPError(ShipitError):
    """Raised for any response with a status code of 400 or above.

    The error envelope (``{code, message, errordata?, messages?}``) is
    decoded when the body carries one; ``error`` is None otherwise.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | int | None = None,
        errordata: Any = None,
        messages: Any = None,
        error: Any = None,
    ):
        self.status_code = status_code
        self.code = code if code is not None else status_code
        self.message = message
        self.errordata = errordata
        self.messages = messages
        self.error = error
        super().__init__(f"HTTP {status_code}: {message}")


class DecodingError(ShipitError):
    """Raised when a payload does not match the expected model shape."""

    def __init__(self, model: str, key: str | None, reason: str):
        self.model = model
        self.key = key
        self.reason = reason
        where = f"{model}.{key}" if key else model
        super().__init__(f"Cannot decode {where}: {reason}")
