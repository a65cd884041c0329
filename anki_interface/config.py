"""Конфигурация подключения к AnkiConnect из окружения."""

from __future__ import annotations

import os
from typing import Optional


_TRUTHY = {"1", "true", "yes", "on"}


def _env_default(name: str, fallback: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return fallback
    trimmed = value.strip()
    return trimmed or fallback


def _env_optional(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _env_int(name: str, fallback: int) -> int:
    value = _env_optional(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(name: str) -> bool:
    value = _env_optional(name)
    return value is not None and value.lower() in _TRUTHY


def reload_from_env() -> None:
    global ANKI_HOST, ANKI_PORT, ANKI_API_VERSION, ANKI_AUTOCONNECT, ANKI_URL

    ANKI_HOST = _env_default("ANKI_HOST", "localhost")
    ANKI_PORT = _env_int("ANKI_PORT", 8765)
    ANKI_API_VERSION = _env_int("ANKI_API_VERSION", 6)
    ANKI_AUTOCONNECT = _env_flag("ANKI_AUTOCONNECT")
    ANKI_URL = f"http://{ANKI_HOST}:{ANKI_PORT}"


reload_from_env()


__all__ = [
    "ANKI_API_VERSION",
    "ANKI_AUTOCONNECT",
    "ANKI_HOST",
    "ANKI_PORT",
    "ANKI_URL",
    "reload_from_env",
    "_env_default",
    "_env_flag",
    "_env_int",
    "_env_optional",
]
