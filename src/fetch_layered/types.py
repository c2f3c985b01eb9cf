"""
Type definitions for fetch_layered.
"""
import asyncio
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    TypedDict,
    Union,
)

from .errors import HttpStatusError


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Credentials mode. Only "include" is ever emitted; unset means transport default.
CredentialsMode = Literal["include"]

# Query parameter values accepted by the querystring serializer
QueryScalar = Union[str, int, float, bool, None]
QueryValue = Union[QueryScalar, Sequence[Any], Mapping[str, Any]]
UrlParameters = Mapping[str, QueryValue]


class CancellationToken:
    """Per-call cancellation signal.

    Fires once and stays cancelled. The first reason wins; later calls to
    ``cancel()`` are ignored.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: str) -> None:
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    async def wait(self) -> str:
        await self._event.wait()
        return self._reason or ""

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


class RequestOptions(TypedDict, total=False):
    """Call-level options, highest precedence layer."""

    method: HttpMethod
    headers: Dict[str, str]
    data: Any
    include_credentials: bool
    base_url: str
    timeout: float
    locale: str
    auth_token: str


@dataclass
class ResolvedRequest:
    """Final, fully merged transport input."""

    url: str
    method: HttpMethod
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    credentials: Optional[CredentialsMode] = None
    signal: CancellationToken = field(default_factory=CancellationToken)


class TransportResponse(Protocol):
    """Response returned by a transport."""

    ok: bool
    status: int
    status_text: str

    async def json(self) -> Any:
        """Parse the body as JSON."""
        ...


class Transport(Protocol):
    """Anything that can dispatch a resolved request."""

    async def send(self, url: str, request: ResolvedRequest) -> TransportResponse:
        """Send the request, honouring ``request.signal``."""
        ...


# Interceptors may be sync or async
ErrorCallback = Callable[[HttpStatusError], Any]
RequestCallback = Callable[[ResolvedRequest], Union[Optional[ResolvedRequest], Awaitable[Optional[ResolvedRequest]]]]
RespondCallback = Callable[[Any], Any]
