"""
Configuration for fetch_layered.

Three layers feed every request: GlobalSettings (shared), InstanceSettings
(one per client) and call-level RequestOptions. GlobalSettings is read live
at request time, so changes reach clients that already exist.
"""
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Set

from .constants import CONTENT_TYPE, DEFAULT_CONTENT_TYPE, DEFAULT_TIMEOUT, TRACE_ENV_VAR
from .errors import NoKeyProvidedError, WrongLocaleError
from .headers import HeaderStore
from .types import ErrorCallback, RequestCallback, RespondCallback

logger = logging.getLogger("fetch_layered.config")


def _trace_enabled_by_env() -> bool:
    """Check FETCH_LAYERED_TRACE=1 (or true/yes)."""
    return os.environ.get(TRACE_ENV_VAR, "").lower() in ("1", "true", "yes")


@dataclass
class GlobalSettings:
    """Settings shared by every client built with this object."""

    base_url: str = ""
    timeout: Optional[float] = DEFAULT_TIMEOUT
    headers: Dict[str, str] = field(default_factory=dict)
    auth_token: Optional[str] = None
    locale: Optional[str] = None
    include_credentials: Optional[bool] = None
    on_error: Optional[ErrorCallback] = None
    on_request: Optional[RequestCallback] = None
    on_respond: Optional[RespondCallback] = None
    trace: bool = field(default_factory=_trace_enabled_by_env)

    def set_defaults(self, defaults: "GlobalSettings") -> None:
        """Replace every field with the values of ``defaults``."""
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        logger.debug(f"GlobalSettings.set_defaults: base_url={self.base_url!r}, timeout={self.timeout}")


def default_headers() -> Dict[str, str]:
    return {CONTENT_TYPE: DEFAULT_CONTENT_TYPE}


@dataclass
class InstanceSettings:
    """Settings owned by one client; unset fields fall through to global."""

    base_url: Optional[str] = None
    timeout: Optional[float] = None
    headers: HeaderStore = field(default_factory=lambda: HeaderStore(default_headers()))
    auth_token: Optional[str] = None
    locale: Optional[str] = None
    include_credentials: Optional[bool] = None
    removed_headers: Set[str] = field(default_factory=set)

    def set_locale(self, locale: Optional[str]) -> None:
        if not locale:
            raise WrongLocaleError()
        self.locale = locale

    def set_auth_token(self, token: Optional[str]) -> None:
        if not token:
            raise NoKeyProvidedError()
        self.auth_token = token


_global_settings: Optional[GlobalSettings] = None


def get_global_settings() -> GlobalSettings:
    """Return the process-wide settings, creating them on first access."""
    global _global_settings
    if _global_settings is None:
        _global_settings = GlobalSettings()
        logger.debug("get_global_settings: created process-wide settings")
    return _global_settings


def reset_global_settings() -> None:
    """Drop the process-wide settings; the next access creates fresh ones."""
    global _global_settings
    _global_settings = None
