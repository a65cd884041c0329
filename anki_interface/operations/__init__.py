"""Типизированные операции над колодами, заметками и моделями."""

from .decks import (
    change_deck,
    create_deck,
    delete_decks,
    get_deck_config,
    get_deck_names,
    get_deck_names_and_ids,
    get_deck_stats,
    get_decks,
    save_deck_config,
    set_deck_config_id,
)
from .models import (
    create_model,
    find_and_replace_in_model,
    get_model_fields,
    get_model_names,
    get_model_templates,
    set_model_field_descriptions,
    update_model_styling,
    update_model_templates,
)
from .notes import (
    add_note,
    add_notes,
    add_tags,
    can_add_note,
    delete_notes,
    find_notes,
    get_note_tags,
    get_notes_info,
    remove_tags,
    update_note,
)


__all__ = [
    "add_note",
    "add_notes",
    "add_tags",
    "can_add_note",
    "change_deck",
    "create_deck",
    "create_model",
    "delete_decks",
    "delete_notes",
    "find_and_replace_in_model",
    "find_notes",
    "get_deck_config",
    "get_deck_names",
    "get_deck_names_and_ids",
    "get_deck_stats",
    "get_decks",
    "get_model_fields",
    "get_model_names",
    "get_model_templates",
    "get_note_tags",
    "get_notes_info",
    "remove_tags",
    "save_deck_config",
    "set_deck_config_id",
    "set_model_field_descriptions",
    "update_model_styling",
    "update_model_templates",
    "update_note",
]
