"""Операции AnkiConnect, связанные с колодами."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .. import connection as anki_connection
from ..compat import model_dump, model_validate
from ..schemas import AnkiConnect, DeckConfig, DeckInfo, DeckStats
from ..services import results


def get_deck_names(*, connection: Optional[AnkiConnect] = None) -> List[str]:
    """Полный список имён колод."""

    raw = anki_connection.invoke("deckNames", connection=connection)
    return results.coerce_str_list("deckNames", raw)


def get_deck_names_and_ids(
    *, connection: Optional[AnkiConnect] = None
) -> List[DeckInfo]:
    raw_decks = anki_connection.invoke("deckNamesAndIds", connection=connection)

    if raw_decks is None:
        return []

    deck_infos: List[DeckInfo] = []
    for name, deck_id in results.coerce_mapping("deckNamesAndIds", raw_decks).items():
        normalized_id = results.coerce_int(f"deckNamesAndIds[{name!r}]", deck_id)
        deck_infos.append(DeckInfo(id=normalized_id, name=name))
    return deck_infos


def get_decks(
    cards: Iterable[int], *, connection: Optional[AnkiConnect] = None
) -> Dict[str, List[int]]:
    """Сопоставление имён колод и переданных идентификаторов карточек."""

    raw = anki_connection.invoke(
        "getDecks", {"cards": list(cards)}, connection=connection
    )
    return results.coerce_name_to_ids("getDecks", raw)


def create_deck(name: str, *, connection: Optional[AnkiConnect] = None) -> int:
    """Создать колоду и вернуть её идентификатор."""

    raw = anki_connection.invoke("createDeck", {"deck": name}, connection=connection)
    return results.coerce_int("createDeck", raw)


def delete_decks(
    names: Iterable[str],
    *,
    cards_too: bool = True,
    connection: Optional[AnkiConnect] = None,
) -> None:
    payload = {"decks": list(names), "cardsToo": bool(cards_too)}
    anki_connection.invoke("deleteDecks", payload, connection=connection)


def change_deck(
    cards: Iterable[int], deck: str, *, connection: Optional[AnkiConnect] = None
) -> None:
    """Перенести карточки в другую колоду (создаётся при отсутствии)."""

    payload = {"cards": list(cards), "deck": deck}
    anki_connection.invoke("changeDeck", payload, connection=connection)


def get_deck_config(
    deck: str, *, connection: Optional[AnkiConnect] = None
) -> DeckConfig:
    raw_config = anki_connection.invoke(
        "getDeckConfig", {"deck": deck}, connection=connection
    )

    if raw_config is False:
        raise ValueError(f"getDeckConfig found no deck named {deck!r}")

    try:
        return model_validate(DeckConfig, raw_config)
    except Exception as exc:
        raise ValueError(f"Invalid getDeckConfig response: {exc}") from exc


def save_deck_config(
    config: Union[DeckConfig, Mapping[str, Any]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> bool:
    """Сохранить группу настроек; `False`, если AnkiConnect её не нашёл."""

    if isinstance(config, DeckConfig):
        normalized = config
    else:
        try:
            normalized = model_validate(DeckConfig, config)
        except Exception as exc:
            raise ValueError(f"Invalid deck config: {exc}") from exc

    if normalized.id is None:
        raise ValueError("Deck config must include id to be saved")

    payload = {"config": model_dump(normalized, by_alias=True, exclude_none=True)}
    raw = anki_connection.invoke("saveDeckConfig", payload, connection=connection)
    return results.coerce_bool("saveDeckConfig", raw)


def set_deck_config_id(
    decks: Iterable[str],
    config_id: int,
    *,
    connection: Optional[AnkiConnect] = None,
) -> bool:
    payload = {"decks": list(decks), "configId": config_id}
    raw = anki_connection.invoke("setDeckConfigId", payload, connection=connection)
    return results.coerce_bool("setDeckConfigId", raw)


def get_deck_stats(
    decks: Iterable[str], *, connection: Optional[AnkiConnect] = None
) -> Dict[str, DeckStats]:
    """Статистика колод, ключ - имя колоды."""

    raw = anki_connection.invoke(
        "getDeckStats", {"decks": list(decks)}, connection=connection
    )

    stats: Dict[str, DeckStats] = {}
    for key, entry in results.coerce_mapping("getDeckStats", raw).items():
        try:
            deck_stats = model_validate(DeckStats, entry)
        except Exception as exc:
            raise ValueError(
                f"getDeckStats returned invalid entry for {key!r}: {exc}"
            ) from exc
        stats[deck_stats.name] = deck_stats
    return stats


__all__ = [
    "change_deck",
    "create_deck",
    "delete_decks",
    "get_deck_config",
    "get_deck_names",
    "get_deck_names_and_ids",
    "get_deck_stats",
    "get_decks",
    "save_deck_config",
    "set_deck_config_id",
]
