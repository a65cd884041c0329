"""Публичный интерфейс схем клиента AnkiConnect."""

from .connection import AnkiConnect, DEFAULT_HOST, DEFAULT_PORT, DEFAULT_VERSION
from .decks import (
    DeckConfig,
    DeckInfo,
    DeckLapseOptions,
    DeckNewOptions,
    DeckRevOptions,
    DeckStats,
)
from .envelope import RequestEnvelope, ResponseEnvelope
from .models import ModelConfig, ModelField, ModelTemplate
from .notes import DUPLICATE_SCOPES, NoteData, NoteField, NoteInfo


__all__ = [
    "AnkiConnect",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_VERSION",
    "DUPLICATE_SCOPES",
    "DeckConfig",
    "DeckInfo",
    "DeckLapseOptions",
    "DeckNewOptions",
    "DeckRevOptions",
    "DeckStats",
    "ModelConfig",
    "ModelField",
    "ModelTemplate",
    "NoteData",
    "NoteField",
    "NoteInfo",
    "RequestEnvelope",
    "ResponseEnvelope",
]
