"""HTTP-транспорт до AnkiConnect."""

from __future__ import annotations

from typing import Optional

import httpx

from ..errors import TransportHTTPStatus, TransportMalformed, TransportUnreachable


DEFAULT_TIMEOUT = 25
JSON_HEADERS = {"Content-Type": "application/json"}


def _post(client: httpx.Client, url: str, body: bytes) -> httpx.Response:
    try:
        response = client.post(url, content=body, headers=JSON_HEADERS)
    except httpx.InvalidURL as exc:
        raise TransportUnreachable(f"{url!r} is not a valid endpoint: {exc}") from exc
    except httpx.DecodingError as exc:
        raise TransportMalformed(f"response body could not be decoded: {exc}") from exc
    except httpx.RequestError as exc:
        raise TransportUnreachable(f"{url} is unreachable: {exc}") from exc

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportHTTPStatus(response.status_code) from exc
    return response


def send(url: str, body: bytes, *, client: Optional[httpx.Client] = None) -> str:
    """Отправить JSON-тело POST-запросом и вернуть текст ответа.

    Повторов нет: любая ошибка сразу превращается в подкласс
    `TransportError`. Переданный `client` не закрывается.
    """

    if client is not None:
        response = _post(client, url, body)
    else:
        with httpx.Client(timeout=DEFAULT_TIMEOUT) as owned:
            response = _post(owned, url, body)

    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TransportMalformed(f"response body is not valid UTF-8: {exc}") from exc


__all__ = ["DEFAULT_TIMEOUT", "JSON_HEADERS", "send", "httpx"]
