"""Операции AnkiConnect, связанные с заметками."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .. import connection as anki_connection
from ..compat import model_validate
from ..schemas import AnkiConnect, NoteData, NoteInfo
from ..services import results


def _ensure_note(note: Union[NoteData, Mapping[str, Any]]) -> NoteData:
    if isinstance(note, NoteData):
        return note
    try:
        return model_validate(NoteData, note)
    except Exception as exc:
        raise ValueError(f"Invalid note data: {exc}") from exc


def add_note(
    note: Union[NoteData, Mapping[str, Any]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> int:
    """Создать заметку и вернуть её идентификатор."""

    payload = {"note": _ensure_note(note).to_payload()}
    raw = anki_connection.invoke("addNote", payload, connection=connection)
    return results.coerce_int("addNote", raw)


def add_notes(
    notes: Iterable[Union[NoteData, Mapping[str, Any]]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> List[Optional[int]]:
    """Добавить несколько заметок; `None` на месте не добавленных."""

    payload = {"notes": [_ensure_note(note).to_payload() for note in notes]}
    raw = anki_connection.invoke("addNotes", payload, connection=connection)
    return results.coerce_optional_int_list("addNotes", raw)


def can_add_note(
    note: Union[NoteData, Mapping[str, Any]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> Tuple[bool, str]:
    """Проверить, можно ли добавить заметку, и вернуть причину отказа."""

    payload = {"notes": [_ensure_note(note).to_payload()]}
    raw = anki_connection.invoke(
        "canAddNotesWithErrorDetail", payload, connection=connection
    )

    if not isinstance(raw, list) or not raw:
        raise ValueError("canAddNotesWithErrorDetail response must be a non-empty list")
    detail = raw[0]
    if not isinstance(detail, Mapping) or "canAdd" not in detail:
        raise ValueError(
            f"canAddNotesWithErrorDetail returned invalid entry: {detail!r}"
        )

    error = detail.get("error")
    return bool(detail["canAdd"]), "" if error is None else str(error)


def update_note(
    note_id: int,
    *,
    fields: Optional[Mapping[str, str]] = None,
    tags: Optional[Iterable[str]] = None,
    connection: Optional[AnkiConnect] = None,
) -> None:
    if fields is None and tags is None:
        raise ValueError("Either fields or tags must be specified for update")

    note: Dict[str, Any] = {"id": note_id}
    if fields is not None:
        note["fields"] = dict(fields)
    if tags is not None:
        note["tags"] = list(tags)

    anki_connection.invoke("updateNote", {"note": note}, connection=connection)


def get_note_tags(
    note_id: int, *, connection: Optional[AnkiConnect] = None
) -> List[str]:
    raw = anki_connection.invoke("getNoteTags", {"note": note_id}, connection=connection)
    return results.coerce_str_list("getNoteTags", raw)


def add_tags(
    note_ids: Iterable[int], tags: str, *, connection: Optional[AnkiConnect] = None
) -> None:
    """Добавить теги (через пробел) к заметкам."""

    payload = {"notes": list(note_ids), "tags": tags}
    anki_connection.invoke("addTags", payload, connection=connection)


def remove_tags(
    note_ids: Iterable[int], tags: str, *, connection: Optional[AnkiConnect] = None
) -> None:
    payload = {"notes": list(note_ids), "tags": tags}
    anki_connection.invoke("removeTags", payload, connection=connection)


def find_notes(query: str, *, connection: Optional[AnkiConnect] = None) -> List[int]:
    """Поиск заметок в синтаксисе запросов Anki."""

    raw = anki_connection.invoke("findNotes", {"query": query}, connection=connection)
    return results.coerce_int_list("findNotes", raw)


def get_notes_info(
    note_ids: Iterable[int], *, connection: Optional[AnkiConnect] = None
) -> List[NoteInfo]:
    raw_notes = anki_connection.invoke(
        "notesInfo", {"notes": list(note_ids)}, connection=connection
    )
    if not isinstance(raw_notes, list):
        raise ValueError("notesInfo response must be a list")

    notes: List[NoteInfo] = []
    for index, raw_note in enumerate(raw_notes):
        if not isinstance(raw_note, Mapping):
            raise ValueError(f"notesInfo[{index}] must be an object")
        try:
            notes.append(model_validate(NoteInfo, raw_note))
        except Exception as exc:
            raise ValueError(f"notesInfo[{index}] is invalid: {exc}") from exc
    return notes


def delete_notes(
    note_ids: Iterable[int], *, connection: Optional[AnkiConnect] = None
) -> None:
    """Удалить заметки вместе с их карточками."""

    anki_connection.invoke(
        "deleteNotes", {"notes": list(note_ids)}, connection=connection
    )


__all__ = [
    "add_note",
    "add_notes",
    "add_tags",
    "can_add_note",
    "delete_notes",
    "find_notes",
    "get_note_tags",
    "get_notes_info",
    "remove_tags",
    "update_note",
]
