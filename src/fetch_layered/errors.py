"""
Error types for fetch_layered.

Setter misuse (locale, token, header keys) raises synchronously. Transport
outcomes (status, timeout, abort, failure) are raised from the awaited call.
"""
from typing import Optional


class FetchLayeredError(Exception):
    """Base class for all fetch_layered errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WrongLocaleError(FetchLayeredError):
    """Raised when an empty locale is passed to the locale setter."""

    def __init__(self) -> None:
        super().__init__("Wrong locale format!")


class NoKeyProvidedError(FetchLayeredError):
    """Raised when a header key or auth token is empty."""

    def __init__(self) -> None:
        super().__init__("No key provided!")


class KeyNotFoundError(FetchLayeredError, KeyError):
    """Raised when removing a header that is not present."""

    def __init__(self, key: Optional[str] = None) -> None:
        FetchLayeredError.__init__(self, "key not found!" if key is None else f"key not found: {key}")
        self.key = key

    def __str__(self) -> str:
        return self.message


class HttpStatusError(FetchLayeredError):
    """The exchange succeeded but the response status is not 2xx."""

    def __init__(self, status_code: int, status_text: str = "") -> None:
        super().__init__(status_text or f"HTTP {status_code}")
        self.status_code = status_code
        self.status_text = status_text

    def __repr__(self) -> str:
        return f"HttpStatusError(status_code={self.status_code!r}, status_text={self.status_text!r})"


class RequestTimeoutError(FetchLayeredError, TimeoutError):
    """The timeout fired before the transport settled."""

    def __init__(self, timeout: float) -> None:
        FetchLayeredError.__init__(self, f"Request timed out after {timeout}s")
        self.timeout = timeout


class RequestAbortError(FetchLayeredError):
    """The request was cancelled with ``cancel()`` before it settled."""

    def __init__(self) -> None:
        super().__init__("Request aborted!")


class RequestInitializationError(FetchLayeredError):
    """The transport failed for a reason other than abort or timeout."""

    def __init__(self, message: str = "Request initialization failed!") -> None:
        super().__init__(message)
