"""
FetchClient: layered-settings HTTP client.
"""
import logging
from typing import Any, Optional

from ..config import GlobalSettings, InstanceSettings, get_global_settings
from ..constants import ACCEPT_LANGUAGE, AUTHORIZATION
from ..errors import KeyNotFoundError, NoKeyProvidedError
from ..transport import HttpxTransport
from ..types import (
    ErrorCallback,
    HttpMethod,
    RequestCallback,
    RequestOptions,
    RespondCallback,
    Transport,
    UrlParameters,
)
from .executor import Interceptors, RequestExecutor
from .request_builder import add_params, build_headers, resolve_request, resolve_timeout

logger = logging.getLogger("fetch_layered.client")


class FetchClient:
    """Asynchronous HTTP client with global, instance and call-level settings.

    Global settings are read at request time, so changing them affects every
    client built on the same GlobalSettings object, including existing ones.
    """

    def __init__(
        self,
        global_settings: Optional[GlobalSettings] = None,
        transport: Optional[Transport] = None,
    ):
        self._global = global_settings if global_settings is not None else get_global_settings()
        self._settings = InstanceSettings()
        self._owns_transport = transport is None
        self._executor = RequestExecutor(transport if transport is not None else HttpxTransport())
        self._closed = False

        self.on_error: Optional[ErrorCallback] = None
        self.on_request: Optional[RequestCallback] = None
        self.on_respond: Optional[RespondCallback] = None

    @property
    def global_settings(self) -> GlobalSettings:
        return self._global

    @property
    def settings(self) -> InstanceSettings:
        return self._settings

    @property
    def transport(self) -> Transport:
        return self._executor.transport

    async def request(self, url: str, options: RequestOptions) -> Any:
        """Resolve all settings layers and run the request."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        method: HttpMethod = options.get("method", "GET")
        resolved = resolve_request(self._global, self._settings, url, method, options)
        timeout = resolve_timeout(self._global, self._settings, options)

        self._executor.trace = self._global.trace
        interceptors = Interceptors(
            on_request=self.on_request or self._global.on_request,
            on_respond=self.on_respond or self._global.on_respond,
            on_error=self.on_error or self._global.on_error,
        )
        logger.debug(f"FetchClient.request: method={method}, url={resolved.url}, timeout={timeout}")
        return await self._executor.execute(resolved, timeout, interceptors)

    async def get(
        self,
        url: str,
        params: Optional[UrlParameters] = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """GET request; ``params`` are serialized into the query string."""
        return await self.request(add_params(url, params), {**(options or {}), "method": "GET"})

    async def post(self, url: str, data: Any = None, options: Optional[RequestOptions] = None) -> Any:
        """POST request with a JSON body."""
        return await self.request(url, {**(options or {}), "data": data, "method": "POST"})

    async def put(self, url: str, data: Any = None, options: Optional[RequestOptions] = None) -> Any:
        """PUT request with a JSON body."""
        return await self.request(url, {**(options or {}), "data": data, "method": "PUT"})

    async def delete(self, url: str, data: Any = None, options: Optional[RequestOptions] = None) -> Any:
        """DELETE request with an optional JSON body."""
        return await self.request(url, {**(options or {}), "data": data, "method": "DELETE"})

    def cancel(self) -> None:
        """Abort every request of this client that is still in flight."""
        self._executor.cancel()

    # Headers

    def get_header(self, key: str) -> Optional[str]:
        """Return the effective value of a header, or None if absent."""
        return build_headers(self._global, self._settings).get(key)

    def set_header(self, key: str, value: str) -> "FetchClient":
        if not key:
            raise NoKeyProvidedError()
        self._settings.headers.set(key, value)
        self._settings.removed_headers.discard(key.lower())
        return self

    def remove_header(self, key: str) -> "FetchClient":
        """Remove a header whatever layer it comes from."""
        if not key:
            raise NoKeyProvidedError()
        if self.get_header(key) is None:
            raise KeyNotFoundError(key)

        self._settings.headers.discard(key)
        self._settings.removed_headers.add(key.lower())
        if key.lower() == ACCEPT_LANGUAGE.lower():
            self._settings.locale = None
        elif key.lower() == AUTHORIZATION.lower():
            self._settings.auth_token = None
        return self

    # Fluent setters

    def set_locale(self, locale: Optional[str]) -> "FetchClient":
        """Set the Accept-Language header for this client."""
        self._settings.set_locale(locale)
        self._settings.headers.discard(ACCEPT_LANGUAGE)
        self._settings.removed_headers.discard(ACCEPT_LANGUAGE.lower())
        return self

    def set_auth_token(self, token: Optional[str]) -> "FetchClient":
        """Set the Authorization header for this client."""
        self._settings.set_auth_token(token)
        self._settings.headers.discard(AUTHORIZATION)
        self._settings.removed_headers.discard(AUTHORIZATION.lower())
        return self

    def include_credentials(self) -> "FetchClient":
        """Send credentials and cookies with requests."""
        self._settings.include_credentials = True
        return self

    def exclude_credentials(self) -> "FetchClient":
        """Do not send credentials, even if global settings include them."""
        self._settings.include_credentials = False
        return self

    def set_base_url(self, base_url: str) -> "FetchClient":
        self._settings.base_url = base_url
        return self

    def set_timeout(self, timeout: float) -> "FetchClient":
        """Set the request timeout in seconds."""
        self._settings.timeout = timeout
        return self

    async def close(self) -> None:
        """Close the client and a transport it created itself."""
        self._closed = True
        self.cancel()
        if self._owns_transport:
            await self._executor.transport.close()

    async def __aenter__(self) -> "FetchClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()
