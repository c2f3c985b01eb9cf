"""
Request executor: timeout race, cancellation and interceptors.
"""
import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Optional, Set

from ..constants import ABORT_ERROR, TIMEOUT_ERROR
from ..errors import (
    FetchLayeredError,
    HttpStatusError,
    RequestAbortError,
    RequestInitializationError,
    RequestTimeoutError,
)
from ..types import (
    CancellationToken,
    ErrorCallback,
    RequestCallback,
    ResolvedRequest,
    RespondCallback,
    Transport,
    TransportResponse,
)
from .. import console

logger = logging.getLogger("fetch_layered.executor")


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass
class Interceptors:
    """Interceptors active for one call."""

    on_request: Optional[RequestCallback] = None
    on_respond: Optional[RespondCallback] = None
    on_error: Optional[ErrorCallback] = None


class RequestExecutor:
    """
    Request Executor

    Runs one resolved request against the transport:
    - request interceptor before dispatch
    - transport call raced against a timeout
    - error interceptor for non-2xx statuses
    - response interceptor for parsed payloads

    Every call gets its own CancellationToken. ``cancel()`` fires the tokens
    of all calls in flight.
    """

    def __init__(self, transport: Transport, trace: bool = False):
        self._transport = transport
        self._active: Set[CancellationToken] = set()
        self.trace = trace

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def in_flight(self) -> int:
        return len(self._active)

    def cancel(self) -> None:
        """Abort every request in flight. Repeated calls have no extra effect."""
        for token in list(self._active):
            token.cancel(ABORT_ERROR)

    async def execute(
        self,
        request: ResolvedRequest,
        timeout: float,
        interceptors: Optional[Interceptors] = None,
    ) -> Any:
        """Execute a resolved request and return the (intercepted) payload."""
        interceptors = interceptors or Interceptors()

        if interceptors.on_request:
            replaced = await _maybe_await(interceptors.on_request(request))
            if isinstance(replaced, ResolvedRequest):
                request = replaced

        if self.trace:
            console.print_request(request)

        response = await self._send_with_timeout(request, timeout)

        if not response.ok:
            error = HttpStatusError(response.status, response.status_text)
            logger.debug(f"RequestExecutor.execute: {request.method} {request.url} -> {response.status}")
            if self.trace:
                console.print_response(request.url, response.status, response.status_text)
            if interceptors.on_error:
                await _maybe_await(interceptors.on_error(error))
            raise error

        data = None
        try:
            data = await response.json()
        except Exception:
            logger.debug(f"RequestExecutor.execute: body of {request.url} is not JSON, payload is None")

        if self.trace:
            console.print_response(request.url, response.status, response.status_text, data)

        if interceptors.on_respond:
            return await _maybe_await(interceptors.on_respond(data))
        return data

    async def _send_with_timeout(self, request: ResolvedRequest, timeout: float) -> TransportResponse:
        token = request.signal
        loop = asyncio.get_running_loop()
        self._active.add(token)
        timer = loop.call_later(timeout, token.cancel, TIMEOUT_ERROR)

        send_task = asyncio.ensure_future(self._transport.send(request.url, request))
        abort_task = asyncio.ensure_future(token.wait())
        try:
            await asyncio.wait({send_task, abort_task}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            send_task.cancel()
            raise
        finally:
            timer.cancel()
            abort_task.cancel()
            self._active.discard(token)

        if send_task.done() and not send_task.cancelled() and send_task.exception() is None:
            return send_task.result()

        if token.cancelled:
            if not send_task.done():
                send_task.cancel()
            await asyncio.gather(send_task, return_exceptions=True)
            if token.reason == TIMEOUT_ERROR:
                logger.warning(f"RequestExecutor: {request.method} {request.url} timed out after {timeout}s")
                raise RequestTimeoutError(timeout)
            logger.warning(f"RequestExecutor: {request.method} {request.url} aborted")
            raise RequestAbortError()

        if send_task.cancelled():
            raise RequestAbortError()

        error = send_task.exception()
        if isinstance(error, FetchLayeredError):
            raise error
        logger.debug(f"RequestExecutor: transport failed for {request.url}: {error!r}")
        raise RequestInitializationError(str(error) or type(error).__name__) from error
