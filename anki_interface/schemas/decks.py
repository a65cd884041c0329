"""Pydantic-схемы для управления колодами Anki."""

from __future__ import annotations

from typing import List, Optional

from ..compat import BaseModel, ConfigDict, Field, constr


class DeckInfo(BaseModel):
    """Краткая информация о колоде."""

    id: int
    name: constr(strip_whitespace=True, min_length=1)


class DeckStats(BaseModel):
    """Счётчики карточек колоды из `getDeckStats`."""

    deck_id: int
    name: str
    new_count: int = 0
    learn_count: int = 0
    review_count: int = 0
    total_in_deck: int = 0

    if ConfigDict is not None:  # pragma: no branch - зависит от версии Pydantic
        model_config = ConfigDict(extra="allow")
    else:  # pragma: no cover - fallback для Pydantic v1

        class Config:
            extra = "allow"


class DeckNewOptions(BaseModel):
    """Настройки для новых карточек (раздел `new`)."""

    per_day: int = Field(alias="perDay")
    delays: List[float] = Field(default_factory=list)
    ints: List[int] = Field(default_factory=list)
    initial_factor: int = Field(alias="initialFactor")
    order: int
    bury: bool = Field(default=False)
    separate: Optional[bool] = None

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True, extra="allow")
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True
            extra = "allow"


class DeckRevOptions(BaseModel):
    """Настройки для повторений (раздел `rev`)."""

    per_day: int = Field(alias="perDay")
    ease4: float
    hard_factor: float = Field(default=1.2, alias="hardFactor")
    interval_factor: float = Field(alias="ivlFct")
    max_interval: int = Field(alias="maxIvl")
    min_space: int = Field(default=1, alias="minSpace")
    bury: bool = Field(default=False)

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True, extra="allow")
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True
            extra = "allow"


class DeckLapseOptions(BaseModel):
    """Настройки для забытых карточек (раздел `lapse`)."""

    delays: List[float] = Field(default_factory=list)
    leech_action: int = Field(alias="leechAction")
    leech_fails: int = Field(alias="leechFails")
    min_interval: int = Field(alias="minInt")
    multiplier: float = Field(alias="mult")

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True, extra="allow")
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True
            extra = "allow"


class DeckConfig(BaseModel):
    """Группа настроек колоды, как её возвращает `getDeckConfig`."""

    id: Optional[int] = None
    name: constr(strip_whitespace=True, min_length=1)
    autoplay: Optional[bool] = None
    dyn: Optional[bool] = None
    lapse: DeckLapseOptions
    max_taken: Optional[int] = Field(default=None, alias="maxTaken")
    mod: Optional[int] = None
    new: DeckNewOptions
    replayq: Optional[bool] = None
    rev: DeckRevOptions
    timer: Optional[int] = None
    usn: Optional[int] = None

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(populate_by_name=True, extra="allow")
    else:  # pragma: no cover

        class Config:
            allow_population_by_field_name = True
            extra = "allow"


__all__ = [
    "DeckConfig",
    "DeckInfo",
    "DeckLapseOptions",
    "DeckNewOptions",
    "DeckRevOptions",
    "DeckStats",
]
