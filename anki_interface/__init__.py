"""Типизированный клиент AnkiConnect."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import config as _config
from .config import _env_default, _env_optional
from .connection import (
    ConnectionState,
    autoconnect,
    connect,
    get_connection,
    invoke,
    is_connected,
    resolve_connection,
    set_connection,
    try_connect,
    use_connection,
)
from .errors import (
    AnkiError,
    AnkiInterfaceError,
    CodecError,
    ConnectError,
    NotConnectedError,
    TransportError,
    TransportHTTPStatus,
    TransportMalformed,
    TransportUnreachable,
)
from .operations import *  # noqa: F401,F403 - операции реэкспортируются целиком
from .operations import __all__ as _operations_all
from .schemas import (
    AnkiConnect,
    DeckConfig,
    DeckInfo,
    DeckStats,
    ModelConfig,
    ModelField,
    ModelTemplate,
    NoteData,
    NoteField,
    NoteInfo,
)
from .services.client import call

if TYPE_CHECKING:  # pragma: no cover - подсказки типов при статическом анализе
    from .config import ANKI_API_VERSION, ANKI_AUTOCONNECT, ANKI_HOST, ANKI_PORT, ANKI_URL


__all__ = [
    "ANKI_API_VERSION",
    "ANKI_AUTOCONNECT",
    "ANKI_HOST",
    "ANKI_PORT",
    "ANKI_URL",
    "AnkiConnect",
    "AnkiError",
    "AnkiInterfaceError",
    "CodecError",
    "ConnectError",
    "ConnectionState",
    "DeckConfig",
    "DeckInfo",
    "DeckStats",
    "ModelConfig",
    "ModelField",
    "ModelTemplate",
    "NotConnectedError",
    "NoteData",
    "NoteField",
    "NoteInfo",
    "TransportError",
    "TransportHTTPStatus",
    "TransportMalformed",
    "TransportUnreachable",
    "_env_default",
    "_env_optional",
    "autoconnect",
    "call",
    "connect",
    "get_connection",
    "invoke",
    "is_connected",
    "resolve_connection",
    "set_connection",
    "try_connect",
    "use_connection",
    *_operations_all,
]


_CONFIG_EXPORTS = {
    "ANKI_API_VERSION",
    "ANKI_AUTOCONNECT",
    "ANKI_HOST",
    "ANKI_PORT",
    "ANKI_URL",
}


def __getattr__(name: str):
    if name in _CONFIG_EXPORTS:
        return getattr(_config, name)
    raise AttributeError(f"module 'anki_interface' has no attribute {name!r}")


def __dir__():
    return sorted(set(globals()) | _CONFIG_EXPORTS)


if _config.ANKI_AUTOCONNECT:
    autoconnect()
