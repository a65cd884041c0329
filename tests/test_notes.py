import pytest

from anki_interface import connection as anki_connection
from anki_interface.operations import notes
from anki_interface.schemas import AnkiConnect, NoteData, NoteInfo


CONN = AnkiConnect()


def _note(**overrides):
    data = {
        "deck_name": "Default",
        "model_name": "Basic",
        "fields": {"Front": "Question", "Back": "Answer"},
        "tags": ["geo"],
    }
    data.update(overrides)
    return NoteData(**data)


def _fake_call(responses, calls):
    def fake_call(connection, action, params=None):
        calls.append((action, params))
        return responses[action]

    return fake_call


EXPECTED_NOTE_PAYLOAD = {
    "deckName": "Default",
    "modelName": "Basic",
    "fields": {"Front": "Question", "Back": "Answer"},
    "options": {
        "allowDuplicate": False,
        "duplicateScope": "deck",
        "duplicateScopeOptions": {},
    },
    "tags": ["geo"],
}


def test_note_data_options_and_tags():
    note = NoteData(
        deckName="Default",
        modelName="Basic",
        tags="one, two three",
        allow_duplicate=True,
        duplicate_scope="collection",
        duplicate_scope_options={"checkChildren": True},
    )

    assert note.tags == ["one", "two", "three"]
    assert note.options == {
        "allowDuplicate": True,
        "duplicateScope": "collection",
        "duplicateScopeOptions": {"checkChildren": True},
    }


def test_note_data_rejects_unknown_duplicate_scope():
    with pytest.raises(ValueError):
        _note(duplicate_scope="everywhere")


def test_add_note_payload(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call",
        _fake_call({"addNote": 1496198395707}, calls),
    )

    assert notes.add_note(_note(), connection=CONN) == 1496198395707
    assert calls == [("addNote", {"note": EXPECTED_NOTE_PAYLOAD})]


def test_add_note_accepts_mapping(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call", _fake_call({"addNote": 7}, calls)
    )
    anki_connection.set_connection(CONN)

    note_id = notes.add_note(
        {
            "deckName": "Default",
            "modelName": "Basic",
            "fields": {"Front": "Question", "Back": "Answer"},
            "tags": ["geo"],
        }
    )

    assert note_id == 7
    assert calls == [("addNote", {"note": EXPECTED_NOTE_PAYLOAD})]


def test_add_note_rejects_invalid_mapping(monkeypatch):
    def forbidden_call(connection, action, params=None):
        raise AssertionError("invalid notes must not reach AnkiConnect")

    monkeypatch.setattr("anki_interface.services.client.call", forbidden_call)

    with pytest.raises(ValueError, match="Invalid note data"):
        notes.add_note({"deckName": "Default"}, connection=CONN)


def test_add_notes_keeps_failed_entries(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call",
        _fake_call({"addNotes": [101, None, "103"]}, calls),
    )

    result = notes.add_notes([_note(), _note(), _note()], connection=CONN)

    assert result == [101, None, 103]
    assert calls == [("addNotes", {"notes": [EXPECTED_NOTE_PAYLOAD] * 3})]


def test_can_add_note_returns_detail(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call",
        _fake_call(
            {
                "canAddNotesWithErrorDetail": [
                    {"canAdd": False, "error": "cannot create note because it is a duplicate"}
                ]
            },
            calls,
        ),
    )

    assert notes.can_add_note(_note(), connection=CONN) == (
        False,
        "cannot create note because it is a duplicate",
    )
    assert calls == [("canAddNotesWithErrorDetail", {"notes": [EXPECTED_NOTE_PAYLOAD]})]


def test_can_add_note_without_error(monkeypatch):
    monkeypatch.setattr(
        "anki_interface.services.client.call", lambda *a, **k: [{"canAdd": True}]
    )

    assert notes.can_add_note(_note(), connection=CONN) == (True, "")


def test_can_add_note_rejects_empty_response(monkeypatch):
    monkeypatch.setattr("anki_interface.services.client.call", lambda *a, **k: [])

    with pytest.raises(ValueError):
        notes.can_add_note(_note(), connection=CONN)


def test_update_note_requires_fields_or_tags():
    with pytest.raises(ValueError, match="Either fields or tags"):
        notes.update_note(1, connection=CONN)


def test_update_note_payloads(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call", _fake_call({"updateNote": None}, calls)
    )

    notes.update_note(5, fields={"Front": "New"}, connection=CONN)
    notes.update_note(5, tags=("a", "b"), connection=CONN)
    notes.update_note(5, fields={"Back": "B"}, tags=[], connection=CONN)

    assert calls == [
        ("updateNote", {"note": {"id": 5, "fields": {"Front": "New"}}}),
        ("updateNote", {"note": {"id": 5, "tags": ["a", "b"]}}),
        ("updateNote", {"note": {"id": 5, "fields": {"Back": "B"}, "tags": []}}),
    ]


def test_tag_operations(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call",
        _fake_call({"getNoteTags": ["geo", "eu"], "addTags": None, "removeTags": None}, calls),
    )

    assert notes.get_note_tags(5, connection=CONN) == ["geo", "eu"]
    notes.add_tags([5, 6], "europe capital", connection=CONN)
    notes.remove_tags([5], "eu", connection=CONN)

    assert calls == [
        ("getNoteTags", {"note": 5}),
        ("addTags", {"notes": [5, 6], "tags": "europe capital"}),
        ("removeTags", {"notes": [5], "tags": "eu"}),
    ]


def test_find_notes_normalizes_ids(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call",
        _fake_call({"findNotes": [1, "2"]}, calls),
    )

    assert notes.find_notes("deck:Default", connection=CONN) == [1, 2]
    assert calls == [("findNotes", {"query": "deck:Default"})]


def test_find_notes_rejects_non_list(monkeypatch):
    monkeypatch.setattr("anki_interface.services.client.call", lambda *a, **k: {"ids": []})

    with pytest.raises(ValueError, match="must be a list"):
        notes.find_notes("deck:Default", connection=CONN)


def test_get_notes_info_parses_entries(monkeypatch):
    calls = []
    raw = [
        {
            "noteId": 1502298033753,
            "modelName": "Basic",
            "tags": ["tag", "another_tag"],
            "fields": {
                "Back": {"value": "back content", "order": 1},
                "Front": {"value": "front content", "order": 0},
            },
            "mod": 1718377864,
            "cards": [1498938915662],
        }
    ]
    monkeypatch.setattr(
        "anki_interface.services.client.call", _fake_call({"notesInfo": raw}, calls)
    )

    result = notes.get_notes_info([1502298033753], connection=CONN)

    assert len(result) == 1
    info = result[0]
    assert isinstance(info, NoteInfo)
    assert info.note_id == 1502298033753
    assert info.model_name == "Basic"
    assert info.modified == 1718377864
    assert info.cards == [1498938915662]
    assert info.fields["Front"].value == "front content"
    assert list(info.field_values()) == ["Front", "Back"]
    assert calls == [("notesInfo", {"notes": [1502298033753]})]


def test_get_notes_info_rejects_empty_entries(monkeypatch):
    monkeypatch.setattr("anki_interface.services.client.call", lambda *a, **k: [{}])

    with pytest.raises(ValueError, match=r"notesInfo\[0\]"):
        notes.get_notes_info([1], connection=CONN)


def test_delete_notes_payload(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "anki_interface.services.client.call", _fake_call({"deleteNotes": None}, calls)
    )

    assert notes.delete_notes({3}, connection=CONN) is None
    assert calls == [("deleteNotes", {"notes": [3]})]
