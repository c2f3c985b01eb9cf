"""
URL helpers for fetch_layered.
"""
from typing import Optional
from urllib.parse import urlsplit


def is_absolute_url(url: str) -> bool:
    """Return True when ``url`` parses as an absolute URL (scheme and host)."""
    try:
        parsed = urlsplit(url)
    except ValueError:
        return False
    # "localhost:8080/x" and "mailto:x" have no netloc and count as relative.
    return bool(parsed.scheme) and bool(parsed.netloc)


def combine_urls(url: str, base_url: Optional[str] = None) -> str:
    """Combine ``url`` with ``base_url`` using exactly one slash at the join.

    Absolute URLs are returned unchanged and the base is ignored.
    """
    if not base_url or is_absolute_url(url):
        return url

    if base_url.endswith("/") and url.startswith("/"):
        url = url[1:]
    elif not base_url.endswith("/") and not url.startswith("/"):
        url = "/" + url

    return base_url + url


def append_query(url: str, query_string: str) -> str:
    """Append a serialized query string, merging with an existing query."""
    if not query_string:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query_string}"
