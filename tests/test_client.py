import json

import pytest

from anki_interface.errors import (
    AnkiError,
    TransportHTTPStatus,
    TransportMalformed,
    TransportUnreachable,
)
from anki_interface.schemas import AnkiConnect
from anki_interface.services import client


CONN = AnkiConnect(host="localhost", port=8765, version=6)


def _reply(payload, sent=None):
    def fake_send(url, body, **kwargs):
        if sent is not None:
            sent.append((url, json.loads(body)))
        return json.dumps(payload)

    return fake_send


def _failing(exc):
    def fake_send(url, body, **kwargs):
        raise exc

    return fake_send


def test_call_returns_result(monkeypatch):
    sent = []
    monkeypatch.setattr(
        "anki_interface.services.transport.send",
        _reply({"result": ["Default"], "error": None}, sent),
    )

    assert client.call(CONN, "deckNames", {}) == ["Default"]
    assert sent == [
        ("http://localhost:8765", {"action": "deckNames", "version": 6, "params": {}})
    ]


def test_call_uses_connection_version_and_url(monkeypatch):
    sent = []
    monkeypatch.setattr(
        "anki_interface.services.transport.send",
        _reply({"result": None, "error": None}, sent),
    )

    other = AnkiConnect(host="10.0.0.5", port=9000, version=5)
    client.call(other, "  sync  ")

    assert sent == [
        ("http://10.0.0.5:9000", {"action": "sync", "version": 5, "params": {}})
    ]


def test_call_raises_service_error(monkeypatch):
    monkeypatch.setattr(
        "anki_interface.services.transport.send",
        _reply({"result": None, "error": "deck already exists"}),
    )

    with pytest.raises(AnkiError) as excinfo:
        client.call(CONN, "createDeck", {"deck": "X"})

    assert excinfo.value.action == "createDeck"
    assert excinfo.value.message == "deck already exists"
    assert isinstance(excinfo.value, RuntimeError)


def test_call_treats_error_as_authoritative(monkeypatch):
    monkeypatch.setattr(
        "anki_interface.services.transport.send",
        _reply({"result": 1234, "error": "partial failure"}),
    )

    with pytest.raises(AnkiError, match="partial failure"):
        client.call(CONN, "addNote", {"note": {}})


@pytest.mark.parametrize(
    "exc, fragment",
    [
        (TransportHTTPStatus(404), "HTTP status 404"),
        (TransportHTTPStatus(500), "HTTP status 500"),
        (TransportUnreachable("localhost:8765 is unreachable"), "unreachable"),
        (TransportMalformed("response body is not valid UTF-8"), "UTF-8"),
    ],
)
def test_call_wraps_transport_failures(monkeypatch, exc, fragment):
    monkeypatch.setattr("anki_interface.services.transport.send", _failing(exc))

    with pytest.raises(AnkiError) as excinfo:
        client.call(CONN, "findNotes", {"query": "deck:Default"})

    assert excinfo.value.action == "findNotes"
    assert excinfo.value.message.startswith("transport failure: ")
    assert fragment in excinfo.value.message
    assert excinfo.value.cause is exc
    assert excinfo.value.__cause__ is exc


@pytest.mark.parametrize(
    "body",
    ["not json", "[]", "", "[" * 200000 + "]" * 200000],
    ids=["garbage", "array", "empty", "deep-nesting"],
)
def test_call_wraps_decode_failures(monkeypatch, body):
    monkeypatch.setattr(
        "anki_interface.services.transport.send", lambda url, payload, **kw: body
    )

    with pytest.raises(AnkiError) as excinfo:
        client.call(CONN, "modelNames")

    assert excinfo.value.action == "modelNames"
    assert excinfo.value.message.startswith("decode failure: ")


def test_call_wraps_encode_failures(monkeypatch):
    def forbidden_send(url, body, **kwargs):
        raise AssertionError("transport should not be reached")

    monkeypatch.setattr("anki_interface.services.transport.send", forbidden_send)

    with pytest.raises(AnkiError) as excinfo:
        client.call(CONN, "addNote", {"note": {1, 2}})

    assert excinfo.value.action == "addNote"
    assert excinfo.value.message.startswith("encode failure: ")


def test_call_rejects_non_string_action():
    with pytest.raises(TypeError):
        client.call(CONN, 123)  # type: ignore[arg-type]


def test_call_rejects_blank_action():
    with pytest.raises(ValueError):
        client.call(CONN, "   ")


def test_call_rejects_non_mapping_params():
    with pytest.raises(TypeError, match="params must be a mapping"):
        client.call(CONN, "deckNames", ["not", "a", "mapping"])  # type: ignore[arg-type]


def test_call_wraps_invalid_endpoint():
    broken = AnkiConnect(host="a\x00b")

    with pytest.raises(AnkiError) as excinfo:
        client.call(broken, "version")

    assert excinfo.value.action == "version"
    assert excinfo.value.message.startswith("transport failure: ")
    assert isinstance(excinfo.value.cause, TransportUnreachable)


def test_call_wraps_undecodable_body(monkeypatch):
    import httpx

    from anki_interface.services import transport

    real_client = httpx.Client

    def handler(request):
        return httpx.Response(200, content=b"notgzip", headers={"Content-Encoding": "gzip"})

    monkeypatch.setattr(
        transport.httpx,
        "Client",
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(AnkiError) as excinfo:
        client.call(CONN, "deckNames")

    assert excinfo.value.action == "deckNames"
    assert isinstance(excinfo.value.cause, TransportMalformed)
