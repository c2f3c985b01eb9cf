"""
Querystring serializer.

Nested mappings and sequences are flattened into bracket paths::

    serialize({"foo": "hi there", "bar": {"quux": [1, 2]}})
    # "foo=hi%20there&bar%5Bquux%5D%5B0%5D=1&bar%5Bquux%5D%5B1%5D=2"
"""
from typing import Any, Iterator, List, Mapping, Tuple
from urllib.parse import quote

# Characters left untouched by JavaScript's encodeURI, besides alphanumerics
_ENCODE_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def encode_uri(value: str) -> str:
    """Percent-encode a string using the encodeURI reserved-character rules."""
    return quote(value, safe=_ENCODE_URI_SAFE)


def _format_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _walk(path: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _walk(f"{path}[{key}]", item)
    elif _is_sequence(value):
        for index, item in enumerate(value):
            yield from _walk(f"{path}[{index}]", item)
    else:
        yield path, _format_scalar(value)


def serialize(value: Mapping[str, Any]) -> str:
    """Serialize a nested mapping into a URI-encoded query string.

    Keys keep the insertion order of the input. An empty mapping (or one
    whose sequences are all empty) gives an empty string.
    """
    entries: List[str] = []
    for key, item in value.items():
        for path, leaf in _walk(str(key), item):
            entries.append(f"{path}={leaf}")
    return encode_uri("&".join(entries))
