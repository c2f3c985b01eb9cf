"""
Async HTTP client with layered settings.

Global settings, instance settings and call options are merged into one
request (call > instance > global > default), raced against a timeout and
passed through request/response/error interceptors.
"""
from .constants import (
    ACCEPT_LANGUAGE,
    AUTHORIZATION,
    CONTENT_TYPE,
    DEFAULT_TIMEOUT,
)
from .errors import (
    FetchLayeredError,
    WrongLocaleError,
    NoKeyProvidedError,
    KeyNotFoundError,
    HttpStatusError,
    RequestTimeoutError,
    RequestAbortError,
    RequestInitializationError,
)
from .types import (
    HttpMethod,
    RequestOptions,
    ResolvedRequest,
    CancellationToken,
    Transport,
    TransportResponse,
)
from .config import (
    GlobalSettings,
    InstanceSettings,
    get_global_settings,
    reset_global_settings,
)
from .headers import HeaderStore
from .qs import serialize
from .url import combine_urls, append_query
from .transport import HttpxTransport, HttpxResponse
from .core.client import FetchClient
from .core.executor import RequestExecutor, Interceptors
from .factory import create_client, log_http_error

__all__ = [
    # Constants
    "ACCEPT_LANGUAGE",
    "AUTHORIZATION",
    "CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
    # Errors
    "FetchLayeredError",
    "WrongLocaleError",
    "NoKeyProvidedError",
    "KeyNotFoundError",
    "HttpStatusError",
    "RequestTimeoutError",
    "RequestAbortError",
    "RequestInitializationError",
    # Types
    "HttpMethod",
    "RequestOptions",
    "ResolvedRequest",
    "CancellationToken",
    "Transport",
    "TransportResponse",
    # Config
    "GlobalSettings",
    "InstanceSettings",
    "get_global_settings",
    "reset_global_settings",
    # Helpers
    "HeaderStore",
    "serialize",
    "combine_urls",
    "append_query",
    # Transport
    "HttpxTransport",
    "HttpxResponse",
    # Client
    "FetchClient",
    "RequestExecutor",
    "Interceptors",
    # Factory
    "create_client",
    "log_http_error",
]

__version__ = "0.1.0"
