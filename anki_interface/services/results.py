"""Проверка формы поля `result` в ответах AnkiConnect."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


def coerce_int(action: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{action} returned non-integer value: {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{action} returned non-integer value: {raw!r}") from None


def coerce_bool(action: str, raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"{action} returned non-boolean value: {raw!r}")
    return raw


def _expect_list(action: str, raw: Any) -> List[Any]:
    if not isinstance(raw, list):
        raise ValueError(f"{action} response must be a list, got {type(raw).__name__}")
    return raw


def _expect_mapping(action: str, raw: Any) -> Mapping[Any, Any]:
    if not isinstance(raw, Mapping):
        raise ValueError(
            f"{action} response must be a mapping, got {type(raw).__name__}"
        )
    return raw


def coerce_int_list(action: str, raw: Any) -> List[int]:
    normalized: List[int] = []
    for index, raw_id in enumerate(_expect_list(action, raw)):
        if isinstance(raw_id, bool):
            raise ValueError(
                f"{action} returned non-integer value at index {index}: {raw_id!r}"
            )
        try:
            normalized.append(int(raw_id))
        except (TypeError, ValueError):
            raise ValueError(
                f"{action} returned non-integer value at index {index}: {raw_id!r}"
            ) from None
    return normalized


def coerce_optional_int_list(action: str, raw: Any) -> List[Optional[int]]:
    normalized: List[Optional[int]] = []
    for index, raw_id in enumerate(_expect_list(action, raw)):
        if raw_id is None:
            normalized.append(None)
            continue
        if isinstance(raw_id, bool):
            raise ValueError(
                f"{action} returned non-integer value at index {index}: {raw_id!r}"
            )
        try:
            normalized.append(int(raw_id))
        except (TypeError, ValueError):
            raise ValueError(
                f"{action} returned non-integer value at index {index}: {raw_id!r}"
            ) from None
    return normalized


def coerce_str_list(action: str, raw: Any) -> List[str]:
    values = _expect_list(action, raw)
    for index, value in enumerate(values):
        if not isinstance(value, str):
            raise ValueError(
                f"{action} returned non-string value at index {index}: {value!r}"
            )
    return list(values)


def coerce_mapping(action: str, raw: Any) -> Dict[str, Any]:
    mapping = _expect_mapping(action, raw)
    normalized: Dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise ValueError(f"{action} returned invalid key: {key!r}")
        normalized[key] = value
    return normalized


def coerce_name_to_ids(action: str, raw: Any) -> Dict[str, List[int]]:
    return {
        name: coerce_int_list(f"{action}[{name!r}]", ids)
        for name, ids in coerce_mapping(action, raw).items()
    }


__all__ = [
    "coerce_bool",
    "coerce_int",
    "coerce_int_list",
    "coerce_mapping",
    "coerce_name_to_ids",
    "coerce_optional_int_list",
    "coerce_str_list",
]
