"""
Factory functions for creating fetch clients.
"""
import logging
from typing import Dict, Optional

import httpx

from .config import GlobalSettings
from .core.client import FetchClient
from .errors import HttpStatusError
from .transport import HttpxTransport
from .types import ErrorCallback, RequestCallback, RespondCallback, Transport

logger = logging.getLogger("fetch_layered.factory")


def log_http_error(error: HttpStatusError) -> None:
    """Error interceptor that logs client errors as warnings and server errors as errors."""
    if 400 <= error.status_code < 500:
        logger.warning(f"HTTP {error.status_code}: {error.status_text}")
    elif error.status_code >= 500:
        logger.error(f"HTTP {error.status_code}: {error.status_text}")


def create_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    locale: Optional[str] = None,
    auth_token: Optional[str] = None,
    include_credentials: Optional[bool] = None,
    on_error: Optional[ErrorCallback] = None,
    on_request: Optional[RequestCallback] = None,
    on_respond: Optional[RespondCallback] = None,
    global_settings: Optional[GlobalSettings] = None,
    transport: Optional[Transport] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> FetchClient:
    """
    Create a FetchClient with instance settings already applied.

    Args:
        base_url: Instance base URL
        timeout: Instance timeout in seconds
        headers: Extra instance headers
        locale: Accept-Language value
        auth_token: Authorization value
        include_credentials: True to include, False to exclude credentials
        on_error: Instance error interceptor
        on_request: Instance request interceptor
        on_respond: Instance response interceptor
        global_settings: Shared settings; the process-wide ones if omitted
        transport: Transport to use; built from ``httpx_client`` if omitted
        httpx_client: httpx.AsyncClient for the default transport

    Returns:
        Configured FetchClient

    Example:
        client = create_client(base_url="https://api.example.com", locale="fr-FR")
        users = await client.get("users")
    """
    if transport is None and httpx_client is not None:
        transport = HttpxTransport(httpx_client=httpx_client)

    client = FetchClient(global_settings=global_settings, transport=transport)

    if base_url:
        client.set_base_url(base_url)
    if timeout is not None:
        client.set_timeout(timeout)
    if locale is not None:
        client.set_locale(locale)
    if auth_token is not None:
        client.set_auth_token(auth_token)
    if include_credentials is True:
        client.include_credentials()
    elif include_credentials is False:
        client.exclude_credentials()
    for key, value in (headers or {}).items():
        client.set_header(key, value)

    client.on_error = on_error
    client.on_request = on_request
    client.on_respond = on_respond
    return client
