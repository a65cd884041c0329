"""Совместимость с различными версиями Pydantic."""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar


try:  # pragma: no cover - поддержка Pydantic v2
    from pydantic import BaseModel, ConfigDict, Field, ValidationError, constr
except ImportError:  # pragma: no cover - Pydantic v1 без ConfigDict
    from pydantic import BaseModel, Field, ValidationError, constr  # type: ignore

    ConfigDict = None  # type: ignore[assignment]


try:  # pragma: no cover - валидаторы доступны не во всех версиях
    from pydantic import field_validator, model_validator, root_validator, validator  # type: ignore
except ImportError:  # pragma: no cover - Pydantic v1
    from pydantic import root_validator, validator  # type: ignore

    field_validator = None  # type: ignore[assignment]
    model_validator = None  # type: ignore[assignment]


T_Model = TypeVar("T_Model", bound=BaseModel)


def model_validate(model: Type[T_Model], data: Any) -> T_Model:
    """Совместимая обёртка вокруг `model_validate`/`parse_obj`."""

    if hasattr(model, "model_validate"):
        return model.model_validate(data)  # type: ignore[attr-defined]
    return model.parse_obj(data)  # type: ignore[attr-defined]


def model_dump(
    instance: Any, *, by_alias: bool = False, exclude_none: bool = False
) -> Dict[str, Any]:
    if hasattr(instance, "model_dump"):
        return instance.model_dump(by_alias=by_alias, exclude_none=exclude_none)
    if hasattr(instance, "dict"):
        return instance.dict(by_alias=by_alias, exclude_none=exclude_none)
    raise TypeError("instance must be a Pydantic model")


__all__ = [
    "BaseModel",
    "ConfigDict",
    "Field",
    "ValidationError",
    "constr",
    "field_validator",
    "model_dump",
    "model_validate",
    "model_validator",
    "root_validator",
    "validator",
]
