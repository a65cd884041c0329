"""Диспетчер запросов к AnkiConnect.

`call` - единственная точка, через которую проходят все действия: здесь
кодируется конверт, выполняется HTTP-запрос и любая неудача приводится к
`AnkiError` с именем действия.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from loguru import logger

from ..errors import AnkiError, CodecError, TransportError
from ..schemas.connection import AnkiConnect
from . import envelope, transport


def _normalize_action(action: Any) -> str:
    if not isinstance(action, str):
        raise TypeError("action must be a string")
    trimmed_action = action.strip()
    if not trimmed_action:
        raise ValueError("action must be a non-empty string")
    return trimmed_action


def _normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    raise TypeError("params must be a mapping of argument names to values")


def call(
    connection: AnkiConnect,
    action: str,
    params: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Выполнить действие AnkiConnect и вернуть поле `result` как есть."""

    trimmed_action = _normalize_action(action)
    normalized_params = _normalize_params(params)

    try:
        body = envelope.encode(trimmed_action, normalized_params, connection.version)
    except CodecError as exc:
        raise AnkiError(trimmed_action, f"encode failure: {exc.detail}", cause=exc) from exc

    logger.debug(f"AnkiConnect {trimmed_action} -> {connection.url}")
    try:
        text = transport.send(connection.url, body)
    except TransportError as exc:
        raise AnkiError(
            trimmed_action, f"transport failure: {exc.detail}", cause=exc
        ) from exc

    try:
        response = envelope.decode(text)
    except CodecError as exc:
        raise AnkiError(trimmed_action, f"decode failure: {exc.detail}", cause=exc) from exc

    if response.failed:
        raise AnkiError(trimmed_action, response.error)
    return response.result


__all__ = ["call"]
