"""Pydantic-схемы для работы с моделями (типами заметок) Anki."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

from ..compat import (
    BaseModel,
    ConfigDict,
    Field,
    constr,
    field_validator,
    model_validator,
    root_validator,
    validator,
)


def _normalize_case_insensitive(values: Mapping[str, Any]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = dict(values)
    lower_map = {key.lower(): key for key in values.keys()}
    for target, aliases in (
        ("name", ["Name"]),
        ("front", ["Front", "qfmt"]),
        ("back", ["Back", "afmt"]),
        ("styling", ["css"]),
    ):
        if target in normalized:
            continue
        for alias in aliases:
            lookup = lower_map.get(alias.lower())
            if lookup and lookup in values:
                normalized[target] = values[lookup]
                break
    return normalized


def _ensure_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class ModelField(BaseModel):
    """Поле типа заметки."""

    name: constr(strip_whitespace=True, min_length=1)
    order: int
    font: str = "Arial"
    size: int = 20
    description: str = ""
    sticky: bool = False
    rtl: bool = False


class ModelTemplate(BaseModel):
    """Шаблон карточки модели вместе с общими стилями модели."""

    name: constr(strip_whitespace=True, min_length=1)
    front: str
    back: str
    styling: str = ""

    if model_validator is not None:  # pragma: no branch

        @model_validator(mode="before")
        @classmethod
        def _normalize_input(cls, values: Any) -> Any:
            if isinstance(values, Mapping):
                return _normalize_case_insensitive(values)
            return values

    elif root_validator is not None:  # pragma: no cover - Pydantic v1

        @root_validator(pre=True)
        def _normalize_input(cls, values: Any) -> Any:  # type: ignore[override]
            if isinstance(values, Mapping):
                return _normalize_case_insensitive(values)
            return values

    if field_validator is not None:  # pragma: no branch

        @field_validator("front", "back", "styling", mode="before")  # type: ignore[misc]
        @classmethod
        def _coerce_text(cls, value: Any) -> str:
            return _ensure_string(value)

    elif validator is not None:  # pragma: no cover

        @validator("front", "back", "styling", pre=True)  # type: ignore[misc]
        def _coerce_text(cls, value: Any) -> str:  # type: ignore[override]
            return _ensure_string(value)


class ModelConfig(BaseModel):
    """Описание новой модели для `createModel`."""

    name: constr(strip_whitespace=True, min_length=1)
    fields: List[ModelField] = Field(min_length=1)
    templates: List[ModelTemplate] = Field(min_length=1)
    css: str = ""
    is_cloze: bool = False

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True)
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True

    def ordered_field_names(self) -> List[str]:
        return [field.name for field in sorted(self.fields, key=lambda f: f.order)]


__all__ = ["ModelConfig", "ModelField", "ModelTemplate"]
