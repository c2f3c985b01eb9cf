"""
Case-insensitive header store.
"""
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import KeyNotFoundError, NoKeyProvidedError


class HeaderStore:
    """Header mapping keyed case-insensitively.

    The spelling used by the most recent ``set`` is kept for output. A header
    set to an empty string is present; use ``remove`` to drop it.
    """

    def __init__(self, headers: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._headers: Dict[str, Tuple[str, str]] = {}
        if headers:
            self.merge(headers)
        for k, v in kwargs.items():
            self.set(k, v)

    def set(self, key: str, value: Any) -> None:
        """Set a header key-value pair. Converts value to string."""
        if not key:
            raise NoKeyProvidedError()
        self._headers[key.lower()] = (key, str(value))

    def get(self, key: str) -> Optional[str]:
        if not key:
            return None
        entry = self._headers.get(key.lower())
        return entry[1] if entry is not None else None

    def has(self, key: str) -> bool:
        return bool(key) and key.lower() in self._headers

    def remove(self, key: str) -> None:
        if not key:
            raise NoKeyProvidedError()
        if key.lower() not in self._headers:
            raise KeyNotFoundError(key)
        del self._headers[key.lower()]

    def discard(self, key: str) -> None:
        """Remove a header if present."""
        if key:
            self._headers.pop(key.lower(), None)

    def merge(self, other: Optional[Mapping[str, Any]]) -> None:
        """Merge another mapping into headers, overwriting same-name keys."""
        if not other:
            return
        for k, v in other.items():
            self.set(k, v)

    def to_dict(self) -> Dict[str, str]:
        """Return the final header dictionary."""
        return {name: value for name, value in self._headers.values()}

    def __repr__(self) -> str:
        return f"HeaderStore({self.to_dict()!r})"
