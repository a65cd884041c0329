"""Pydantic-схемы для заметок Anki."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List

from ..compat import (
    BaseModel,
    ConfigDict,
    Field,
    constr,
    field_validator,
    validator,
)


DUPLICATE_SCOPES = {"deck", "collection"}


def _normalize_note_input_tags(raw_tags: Any) -> List[str]:
    if raw_tags is None:
        return []

    normalized: List[str] = []

    def _consume(value: Any) -> None:
        if value is None:
            return

        if isinstance(value, str):
            for part in re.split(r"[,\s]+", value.strip()):
                if part:
                    normalized.append(part)
            return

        if isinstance(value, Mapping):
            for sub_value in value.values():
                _consume(sub_value)
            return

        if isinstance(value, Iterable):
            for item in value:
                _consume(item)
            return

        text = str(value).strip()
        if text:
            normalized.append(text)

    _consume(raw_tags)
    return normalized


def _check_duplicate_scope(value: str) -> str:
    if value not in DUPLICATE_SCOPES:
        raise ValueError(
            f"duplicate_scope must be one of {sorted(DUPLICATE_SCOPES)}, got {value!r}"
        )
    return value


class NoteData(BaseModel):
    """Заметка для добавления: колода, модель, поля, теги и опции дубликатов."""

    deck_name: constr(strip_whitespace=True, min_length=1) = Field(alias="deckName")
    model_name: constr(strip_whitespace=True, min_length=1) = Field(alias="modelName")
    fields: Dict[str, str] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    allow_duplicate: bool = Field(default=False, alias="allowDuplicate")
    duplicate_scope: str = Field(default="deck", alias="duplicateScope")
    duplicate_scope_options: Dict[str, Any] = Field(
        default_factory=dict, alias="duplicateScopeOptions"
    )

    if ConfigDict is not None:  # pragma: no branch - для Pydantic v2
        model_config = ConfigDict(populate_by_name=True)
    else:  # pragma: no cover - используется в Pydantic v1

        class Config:
            allow_population_by_field_name = True

    if field_validator is not None:  # pragma: no branch - зависит от версии Pydantic

        @field_validator("tags", mode="before")  # type: ignore[misc]
        @classmethod
        def _normalize_tags(cls, value):
            return _normalize_note_input_tags(value)

        @field_validator("duplicate_scope")  # type: ignore[misc]
        @classmethod
        def _validate_scope(cls, value):
            return _check_duplicate_scope(value)

    elif validator is not None:  # pragma: no cover - для Pydantic v1

        @validator("tags", pre=True)  # type: ignore[misc]
        def _normalize_tags(cls, value):  # type: ignore[override]
            return _normalize_note_input_tags(value)

        @validator("duplicate_scope")  # type: ignore[misc]
        def _validate_scope(cls, value):  # type: ignore[override]
            return _check_duplicate_scope(value)

    @property
    def options(self) -> Dict[str, Any]:
        return {
            "allowDuplicate": self.allow_duplicate,
            "duplicateScope": self.duplicate_scope,
            "duplicateScopeOptions": dict(self.duplicate_scope_options),
        }

    def to_payload(self) -> Dict[str, Any]:
        """Объект `note` в формате AnkiConnect."""

        return {
            "deckName": self.deck_name,
            "modelName": self.model_name,
            "fields": dict(self.fields),
            "options": self.options,
            "tags": list(self.tags),
        }


class NoteField(BaseModel):
    value: str = ""
    order: int = 0


class NoteInfo(BaseModel):
    note_id: int = Field(alias="noteId")
    model_name: str = Field(alias="modelName")
    tags: List[str] = Field(default_factory=list)
    fields: Dict[str, NoteField] = Field(default_factory=dict)
    modified: int = Field(default=0, alias="mod")
    cards: List[int] = Field(default_factory=list)

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True)
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True

    def field_values(self) -> Dict[str, str]:
        ordered = sorted(self.fields.items(), key=lambda item: item[1].order)
        return {name: field.value for name, field in ordered}


__all__ = [
    "DUPLICATE_SCOPES",
    "NoteData",
    "NoteField",
    "NoteInfo",
]
