"""
Default transport backed by httpx.
"""
import asyncio
import logging
import os
from typing import Any, Dict, Optional

import httpx

from .constants import CREDENTIALS_INCLUDE
from .types import ResolvedRequest

logger = logging.getLogger("fetch_layered.transport")

# Timeouts are enforced by the executor, per call.
_NO_TIMEOUT = httpx.Timeout(None)


def _is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


class HttpxResponse:
    """Adapts an httpx.Response to the transport response protocol."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def ok(self) -> bool:
        return 200 <= self._response.status_code < 300

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase or ""

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._response.headers)

    @property
    def raw(self) -> httpx.Response:
        return self._response

    async def json(self) -> Any:
        return self._response.json()


class HttpxTransport:
    """Sends resolved requests with an httpx.AsyncClient.

    Requests are built directly, so the client's own cookie jar is never
    attached. With credentials "include", the transport's ``cookies`` jar is
    sent and updated from the response.
    """

    def __init__(
        self,
        httpx_client: Optional[httpx.AsyncClient] = None,
        cookies: Optional[httpx.Cookies] = None,
    ):
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            # NODE_TLS_REJECT_UNAUTHORIZED=0 or SSL_CERT_VERIFY=0 disables SSL verification
            verify_ssl = not _is_ssl_verify_disabled_by_env()
            self._client = httpx.AsyncClient(verify=verify_ssl, timeout=None)
            self._owns_client = True
        self.cookies = cookies if cookies is not None else httpx.Cookies()
        self._closed = False

    async def send(self, url: str, request: ResolvedRequest) -> HttpxResponse:
        if self._closed:
            raise RuntimeError("Transport has been closed")
        if request.signal.cancelled:
            raise asyncio.CancelledError(request.signal.reason)

        outbound = httpx.Request(
            method=request.method,
            url=url,
            headers=request.headers,
            content=request.body,
            extensions={"timeout": _NO_TIMEOUT.as_dict()},
        )
        include = request.credentials == CREDENTIALS_INCLUDE
        if include:
            self.cookies.set_cookie_header(outbound)

        logger.debug(f"HttpxTransport.send: method={request.method}, url={url}, credentials={request.credentials}")
        response = await self._client.send(outbound)

        if include:
            self.cookies.extract_cookies(response)

        return HttpxResponse(response)

    async def close(self) -> None:
        """Close the underlying client if this transport created it."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()
