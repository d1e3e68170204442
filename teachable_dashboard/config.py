"""
Application-wide configuration: settings resolved once at startup plus a few
display constants.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from teachable_dashboard.errors import ConfigurationError

DEFAULT_BASE_URL = "https://developers.teachable.com/v1"
CACHE_TTL_SECONDS = 600

PAGE_TITLE = "Teachable Courses"
COURSE_GRID_COLUMNS = 2
COMPLETED_PERCENT = 100


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    log_level: str = "INFO"


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        pass
    return default


def _available_secret_keys() -> list[str]:
    keys: list[str] = []
    try:
        sec = getattr(st, "secrets", None)
        if isinstance(sec, dict):
            keys = list(sec.keys())
        elif sec is not None:
            keys = list(sec.to_dict().keys())  # type: ignore[attr-defined]
    except Exception:
        pass
    return sorted(set(str(k) for k in keys))


def _parse_float(name: str, raw: str | None) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def load_settings() -> Settings:
    """Resolve settings from env / st.secrets.

    Raises ConfigurationError when TEACHABLE_API_KEY is missing: nothing can be
    fetched without it, so the app refuses to start.
    """
    api_key = (_get_secret("TEACHABLE_API_KEY") or "").strip()
    if not api_key:
        keys = _available_secret_keys()
        env_flag = "TEACHABLE_API_KEY" in os.environ
        raise ConfigurationError(
            "Teachable API key is not configured (TEACHABLE_API_KEY in env or secrets). "
            f"Env present? {env_flag}. Secrets keys: {keys}"
        )

    base_url = (_get_secret("TEACHABLE_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
    timeout = _parse_float("TEACHABLE_API_TIMEOUT", _get_secret("TEACHABLE_API_TIMEOUT"))

    return Settings(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        log_level=(_get_secret("LOG_LEVEL") or "INFO").upper(),
    )
