"""Конверты запроса и ответа AnkiConnect."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..compat import BaseModel, ConfigDict, Field, constr, field_validator, validator


def _stringify_error(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class RequestEnvelope(BaseModel):
    """Тело запроса `{action, version, params}`."""

    action: constr(min_length=1)
    version: int
    params: Dict[str, Any] = Field(default_factory=dict)

    if ConfigDict is not None:  # pragma: no branch - зависит от версии Pydantic
        model_config = ConfigDict(frozen=True)
    else:  # pragma: no cover - fallback для Pydantic v1

        class Config:
            frozen = True


class ResponseEnvelope(BaseModel):
    """Тело ответа `{result, error}`.

    Сервер обещает, что осмысленно только одно из полей, но это не
    проверяется транспортом: непустой `error` считается решающим.
    """

    result: Any = None
    error: Optional[str] = None

    if ConfigDict is not None:  # pragma: no branch
        model_config = ConfigDict(frozen=True, extra="ignore")
    else:  # pragma: no cover - Pydantic v1

        class Config:
            frozen = True
            extra = "ignore"

    if field_validator is not None:  # pragma: no branch

        @field_validator("error", mode="before")  # type: ignore[misc]
        @classmethod
        def _normalize_error(cls, value: Any) -> Optional[str]:
            return _stringify_error(value)

    elif validator is not None:  # pragma: no cover

        @validator("error", pre=True)  # type: ignore[misc]
        def _normalize_error(cls, value: Any) -> Optional[str]:
            return _stringify_error(value)

    @property
    def failed(self) -> bool:
        return self.error is not None


__all__ = ["RequestEnvelope", "ResponseEnvelope"]
