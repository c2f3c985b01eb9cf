"""
Constants for fetch_layered.
"""

# Header names
CONTENT_TYPE = "Content-Type"
ACCEPT_LANGUAGE = "Accept-Language"
AUTHORIZATION = "Authorization"

DEFAULT_CONTENT_TYPE = "application/json"

# Default request timeout (seconds)
DEFAULT_TIMEOUT = 5.0

# Cancellation reasons, used to classify a fired CancellationToken
ABORT_ERROR = "AbortError"
TIMEOUT_ERROR = "TimeoutError"

# Credentials mode sent to the transport
CREDENTIALS_INCLUDE = "include"

# Headers masked before logging or tracing
SENSITIVE_HEADERS = ("authorization", "x-api-key")

# Environment switches
TRACE_ENV_VAR = "FETCH_LAYERED_TRACE"
