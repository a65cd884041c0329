"""Глобальное подключение к AnkiConnect и неявная привязка операций к нему.

Процесс хранит не более одного дескриптора `AnkiConnect`. Доступ к нему
сериализован блокировкой, при этом проверочный запрос `version` выполняется
вне блокировки: под ней только фиксируется результат.

Операции не принимают подключение обязательным аргументом. Порядок выбора:
явный `connection=...`, затем `use_connection(...)` текущего контекста,
затем глобальное подключение.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Mapping, Optional

from loguru import logger

from . import config
from .compat import ValidationError
from .errors import AnkiError, ConnectError, NotConnectedError
from .schemas.connection import AnkiConnect
from .services import client as anki_client


_context_connection: ContextVar[Optional[AnkiConnect]] = ContextVar(
    "anki_connection", default=None
)


def _build_descriptor(
    host: Optional[str], port: Optional[int], version: Optional[int]
) -> AnkiConnect:
    return AnkiConnect(
        host=config.ANKI_HOST if host is None else host,
        port=config.ANKI_PORT if port is None else port,
        version=config.ANKI_API_VERSION if version is None else version,
    )


class ConnectionState:
    """Хранилище единственного активного подключения."""

    def __init__(self) -> None:
        self._connection: Optional[AnkiConnect] = None
        self._lock = threading.Lock()

    def current(self) -> AnkiConnect:
        with self._lock:
            if self._connection is None:
                raise NotConnectedError()
            return self._connection

    def is_connected(self) -> bool:
        with self._lock:
            return self._connection is not None

    def set(self, connection: AnkiConnect) -> None:
        if not isinstance(connection, AnkiConnect):
            raise TypeError("connection must be an AnkiConnect instance")
        with self._lock:
            self._connection = connection

    def reset(self) -> None:
        with self._lock:
            self._connection = None

    def connect(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        version: Optional[int] = None,
    ) -> AnkiConnect:
        try:
            candidate = _build_descriptor(host, port, version)
        except (TypeError, ValueError, ValidationError) as exc:
            raise ConnectError(f"Invalid connection parameters: {exc}", cause=exc) from exc

        try:
            server_version = anki_client.call(candidate, "version")
        except AnkiError as exc:
            raise ConnectError(
                f"Failed to connect to Anki at {candidate.url}: {exc.message}",
                cause=exc,
            ) from exc

        with self._lock:
            self._connection = candidate

        logger.info(
            f"Connected to AnkiConnect at {candidate.url} (server version {server_version})"
        )
        return candidate

    def try_connect(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        version: Optional[int] = None,
    ) -> bool:
        try:
            self.connect(host=host, port=port, version=version)
        except Exception as exc:
            logger.warning(f"Failed to connect to Anki: {exc}")
            return False
        return True


GLOBAL_CONNECTION = ConnectionState()


def connect(
    host: Optional[str] = None,
    port: Optional[int] = None,
    version: Optional[int] = None,
) -> AnkiConnect:
    """Подключиться к Anki или поднять `ConnectError`."""

    return GLOBAL_CONNECTION.connect(host=host, port=port, version=version)


def try_connect(
    host: Optional[str] = None,
    port: Optional[int] = None,
    version: Optional[int] = None,
) -> bool:
    """Попытаться подключиться; никогда не поднимает исключений."""

    return GLOBAL_CONNECTION.try_connect(host=host, port=port, version=version)


def get_connection() -> AnkiConnect:
    return GLOBAL_CONNECTION.current()


def set_connection(connection: AnkiConnect) -> None:
    GLOBAL_CONNECTION.set(connection)


def is_connected() -> bool:
    return GLOBAL_CONNECTION.is_connected()


def reset() -> None:
    GLOBAL_CONNECTION.reset()


@contextmanager
def use_connection(connection: AnkiConnect) -> Iterator[AnkiConnect]:
    """Временно направить операции текущего потока/задачи на `connection`."""

    if not isinstance(connection, AnkiConnect):
        raise TypeError("connection must be an AnkiConnect instance")
    token = _context_connection.set(connection)
    try:
        yield connection
    finally:
        _context_connection.reset(token)


def resolve_connection(connection: Optional[AnkiConnect] = None) -> AnkiConnect:
    if connection is not None:
        return connection
    scoped = _context_connection.get()
    if scoped is not None:
        return scoped
    return GLOBAL_CONNECTION.current()


def invoke(
    action: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    connection: Optional[AnkiConnect] = None,
) -> Any:
    """Выполнить действие через явное, контекстное или глобальное подключение."""

    return anki_client.call(resolve_connection(connection), action, params)


def autoconnect() -> bool:
    if try_connect():
        logger.info("Successfully connected to Anki")
        return True
    logger.warning(
        "Could not connect to Anki automatically. "
        "Call connect() manually when Anki is running."
    )
    return False


__all__ = [
    "ConnectionState",
    "GLOBAL_CONNECTION",
    "autoconnect",
    "connect",
    "get_connection",
    "invoke",
    "is_connected",
    "reset",
    "resolve_connection",
    "set_connection",
    "try_connect",
    "use_connection",
]
