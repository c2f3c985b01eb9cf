"""
Request builder utilities for fetch_layered.

Merges global settings, instance settings and call options into a
ResolvedRequest. Precedence for every field is call > instance > global >
hard-coded default.
"""
import json
import logging
from typing import Any, Optional

from ..config import GlobalSettings, InstanceSettings
from ..constants import (
    ACCEPT_LANGUAGE,
    AUTHORIZATION,
    CONTENT_TYPE,
    CREDENTIALS_INCLUDE,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_TIMEOUT,
    SENSITIVE_HEADERS,
)
from ..headers import HeaderStore
from ..qs import serialize
from ..types import (
    CancellationToken,
    CredentialsMode,
    HttpMethod,
    RequestOptions,
    ResolvedRequest,
    UrlParameters,
)
from ..url import append_query, combine_urls

logger = logging.getLogger("fetch_layered.request_builder")


def mask_headers(headers: dict) -> dict:
    """Mask authorization-like headers for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            value = masked[key]
            masked[key] = value[:15] + "***" if len(value) > 15 else "***"
    return masked


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_timeout(
    global_settings: GlobalSettings,
    instance: InstanceSettings,
    options: Optional[RequestOptions] = None,
) -> float:
    """Resolve the request timeout in seconds."""
    call_timeout = (options or {}).get("timeout")
    timeout = _first_set(call_timeout, instance.timeout, global_settings.timeout)
    return DEFAULT_TIMEOUT if timeout is None else timeout


def resolve_base_url(
    global_settings: GlobalSettings,
    instance: InstanceSettings,
    options: Optional[RequestOptions] = None,
) -> str:
    """Resolve the base URL; empty layers fall through."""
    call_base = (options or {}).get("base_url")
    return call_base or instance.base_url or global_settings.base_url or ""


def resolve_credentials(
    global_settings: GlobalSettings,
    instance: InstanceSettings,
    options: Optional[RequestOptions] = None,
) -> Optional[CredentialsMode]:
    """Return "include" when the nearest layer that sets it says True."""
    include = _first_set(
        (options or {}).get("include_credentials"),
        instance.include_credentials,
        global_settings.include_credentials,
    )
    return CREDENTIALS_INCLUDE if include else None


def build_headers(
    global_settings: GlobalSettings,
    instance: InstanceSettings,
    options: Optional[RequestOptions] = None,
) -> HeaderStore:
    """Build request headers.

    Each layer applies its locale and auth token before its own explicit
    headers, so within a layer an explicit ``Accept-Language`` or
    ``Authorization`` header wins. Any instance value wins over any global
    one. Instance-level removals hide keys coming from the global layer.
    """
    result = HeaderStore({CONTENT_TYPE: DEFAULT_CONTENT_TYPE})

    if global_settings.locale:
        result.set(ACCEPT_LANGUAGE, global_settings.locale)
    if global_settings.auth_token:
        result.set(AUTHORIZATION, global_settings.auth_token)
    result.merge(global_settings.headers)

    if instance.locale:
        result.set(ACCEPT_LANGUAGE, instance.locale)
    if instance.auth_token:
        result.set(AUTHORIZATION, instance.auth_token)
    result.merge(instance.headers.to_dict())

    for key in instance.removed_headers:
        result.discard(key)

    if options:
        if options.get("locale"):
            result.set(ACCEPT_LANGUAGE, options["locale"])
        if options.get("auth_token"):
            result.set(AUTHORIZATION, options["auth_token"])
        result.merge(options.get("headers"))

    return result


def build_body(data: Any = None) -> Optional[str]:
    """Serialize call-level data as a JSON body."""
    if data is None:
        return None
    return json.dumps(data)


def add_params(url: str, params: Optional[UrlParameters] = None) -> str:
    """Append serialized params to ``url`` with "?" or "&"."""
    if not params:
        return url
    return append_query(url, serialize(params))


def resolve_request(
    global_settings: GlobalSettings,
    instance: InstanceSettings,
    url: str,
    method: HttpMethod,
    options: Optional[RequestOptions] = None,
    signal: Optional[CancellationToken] = None,
) -> ResolvedRequest:
    """Resolve every layer into the final transport input."""
    options = options or {}
    full_url = combine_urls(url, resolve_base_url(global_settings, instance, options))
    headers = build_headers(global_settings, instance, options).to_dict()

    request = ResolvedRequest(
        url=full_url,
        method=method,
        headers=headers,
        body=build_body(options.get("data")),
        credentials=resolve_credentials(global_settings, instance, options),
        signal=signal if signal is not None else CancellationToken(),
    )

    logger.debug(f"resolve_request: method={method}, url={full_url}")
    logger.debug(f"resolve_request: headers={mask_headers(headers)}, credentials={request.credentials}")
    return request
