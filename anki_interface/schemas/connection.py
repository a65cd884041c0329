"""Pydantic-схема дескриптора подключения к AnkiConnect."""

from __future__ import annotations

from typing import Any

from ..compat import BaseModel, ConfigDict, Field, constr, field_validator, validator


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8765
DEFAULT_VERSION = 6


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise TypeError("value must be an integer")
    return value


class AnkiConnect(BaseModel):
    """Неизменяемый адрес конечной точки AnkiConnect и версия протокола."""

    host: constr(strip_whitespace=True, min_length=1) = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    version: int = Field(default=DEFAULT_VERSION, ge=1)

    if ConfigDict is not None:  # pragma: no branch - зависит от версии Pydantic
        model_config = ConfigDict(frozen=True)
    else:  # pragma: no cover - fallback для Pydantic v1

        class Config:
            frozen = True

    if field_validator is not None:  # pragma: no branch - Pydantic v2

        @field_validator("port", "version", mode="before")  # type: ignore[misc]
        @classmethod
        def _validate_integers(cls, value: Any) -> Any:
            return _reject_bool(value)

    elif validator is not None:  # pragma: no cover - Pydantic v1

        @validator("port", "version", pre=True)  # type: ignore[misc]
        def _validate_integers(cls, value: Any) -> Any:
            return _reject_bool(value)

    @property
    def url(self) -> str:
        host = self.host
        # IPv6-литерал в URL записывается в квадратных скобках
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"http://{host}:{self.port}"


__all__ = ["AnkiConnect", "DEFAULT_HOST", "DEFAULT_PORT", "DEFAULT_VERSION"]
