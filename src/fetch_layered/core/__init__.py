"""
Core modules for fetch_layered.
"""
from .client import FetchClient
from .executor import Interceptors, RequestExecutor
from .request_builder import (
    add_params,
    build_body,
    build_headers,
    resolve_base_url,
    resolve_credentials,
    resolve_request,
    resolve_timeout,
)

__all__ = [
    "FetchClient",
    "Interceptors",
    "RequestExecutor",
    "add_params",
    "build_body",
    "build_headers",
    "resolve_base_url",
    "resolve_credentials",
    "resolve_request",
    "resolve_timeout",
]
