"""Кодирование запросов и разбор ответов AnkiConnect."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from ..compat import ValidationError, model_validate
from ..errors import CodecError
from ..schemas.connection import DEFAULT_VERSION
from ..schemas.envelope import RequestEnvelope, ResponseEnvelope


def build_request(
    action: str,
    params: Optional[Mapping[str, Any]] = None,
    version: int = DEFAULT_VERSION,
) -> RequestEnvelope:
    try:
        return RequestEnvelope(
            action=action,
            version=version,
            params=dict(params) if params is not None else {},
        )
    except ValidationError as exc:
        raise CodecError(
            f"invalid request envelope: {exc}", kind=CodecError.UNSERIALIZABLE
        ) from exc


def encode(
    action: str,
    params: Optional[Mapping[str, Any]] = None,
    version: int = DEFAULT_VERSION,
) -> bytes:
    envelope = build_request(action, params, version)
    payload = {
        "action": envelope.action,
        "version": envelope.version,
        "params": envelope.params,
    }
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise CodecError(
            f"params are not JSON serializable: {exc}", kind=CodecError.UNSERIALIZABLE
        ) from exc


def decode(text: str) -> ResponseEnvelope:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise CodecError(f"JSON nesting is too deep: {exc}") from exc

    if not isinstance(data, dict):
        raise CodecError(
            f"response must be a JSON object, got {type(data).__name__}"
        )

    return model_validate(
        ResponseEnvelope, {"result": data.get("result"), "error": data.get("error")}
    )


__all__ = ["build_request", "decode", "encode"]
