"""Иерархия исключений клиента AnkiConnect.

Ошибки транспорта и кодека живут только внутри диспетчера запросов:
наружу из `services.client.call` выходит исключительно `AnkiError`
с именем действия. `NotConnectedError` и `ConnectError` поднимаются
напрямую функциями управления подключением.
"""

from __future__ import annotations

from typing import Optional


class AnkiInterfaceError(Exception):
    """Базовый класс всех ошибок пакета."""


class TransportError(AnkiInterfaceError):
    """Сбой сетевого или HTTP-уровня."""

    kind = "transport"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class TransportUnreachable(TransportError):
    kind = "unreachable"


class TransportHTTPStatus(TransportError):
    kind = "http_status"

    def __init__(self, status_code: int):
        super().__init__(f"HTTP status {status_code}")
        self.status_code = status_code


class TransportMalformed(TransportError):
    kind = "malformed"


class CodecError(AnkiInterfaceError):
    """Не удалось сериализовать запрос или разобрать ответ."""

    MALFORMED = "malformed"
    UNSERIALIZABLE = "unserializable"

    def __init__(self, detail: str, *, kind: str = MALFORMED):
        super().__init__(detail)
        self.detail = detail
        self.kind = kind


class NotConnectedError(AnkiInterfaceError, RuntimeError):
    """Нет активного подключения к AnkiConnect."""

    def __init__(self, message: str = "Not connected to Anki. Call connect() first."):
        super().__init__(message)


class ConnectError(AnkiInterfaceError, RuntimeError):
    """Явная попытка подключения завершилась неудачей."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class AnkiError(AnkiInterfaceError, RuntimeError):
    """Единая ошибка вызова AnkiConnect: какое действие упало и почему."""

    def __init__(
        self, action: str, message: str, *, cause: Optional[BaseException] = None
    ):
        super().__init__(f"{action}: {message}")
        self.action = action
        self.message = message
        self.cause = cause

    def __repr__(self) -> str:
        return f"AnkiError(action={self.action!r}, message={self.message!r})"


__all__ = [
    "AnkiError",
    "AnkiInterfaceError",
    "CodecError",
    "ConnectError",
    "NotConnectedError",
    "TransportError",
    "TransportHTTPStatus",
    "TransportMalformed",
    "TransportUnreachable",
]
