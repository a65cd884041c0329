"""Операции AnkiConnect, связанные с моделями (типами заметок)."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .. import connection as anki_connection
from ..compat import model_validate
from ..schemas import AnkiConnect, ModelConfig, ModelTemplate
from ..services import results


def _normalize_template(template: ModelTemplate) -> Dict[str, str]:
    return {
        "Name": template.name,
        "Front": template.front,
        "Back": template.back,
    }


def get_model_names(*, connection: Optional[AnkiConnect] = None) -> List[str]:
    raw = anki_connection.invoke("modelNames", connection=connection)
    return results.coerce_str_list("modelNames", raw)


def get_model_fields(model: str, *, connection: Optional[AnkiConnect] = None) -> List[str]:
    """Имена полей модели в порядке их следования."""

    raw = anki_connection.invoke(
        "modelFieldNames", {"modelName": model}, connection=connection
    )
    return results.coerce_str_list("modelFieldNames", raw)


def create_model(
    config: Union[ModelConfig, Mapping[str, Any]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> None:
    if isinstance(config, ModelConfig):
        normalized = config
    else:
        try:
            normalized = model_validate(ModelConfig, config)
        except Exception as exc:
            raise ValueError(f"Invalid create_model arguments: {exc}") from exc

    payload = {
        "modelName": normalized.name,
        "inOrderFields": normalized.ordered_field_names(),
        "css": normalized.css,
        "isCloze": normalized.is_cloze,
        "cardTemplates": [
            _normalize_template(template) for template in normalized.templates
        ],
    }
    anki_connection.invoke("createModel", payload, connection=connection)


def get_model_templates(
    model: str, *, connection: Optional[AnkiConnect] = None
) -> List[ModelTemplate]:
    """Шаблоны карточек модели; у каждого заполнен общий CSS модели."""

    raw_templates = anki_connection.invoke(
        "modelTemplates", {"modelName": model}, connection=connection
    )
    raw_styling = anki_connection.invoke(
        "modelStyling", {"modelName": model}, connection=connection
    )

    templates = results.coerce_mapping("modelTemplates", raw_templates)
    styling = results.coerce_mapping("modelStyling", raw_styling)
    css = styling.get("css") or ""

    parsed: List[ModelTemplate] = []
    for name, content in templates.items():
        if not isinstance(content, Mapping):
            raise ValueError(f"modelTemplates returned invalid template {name!r}")
        parsed.append(
            ModelTemplate(
                name=name,
                front=content.get("Front", ""),
                back=content.get("Back", ""),
                styling=css,
            )
        )
    return parsed


def update_model_templates(
    model: str,
    templates: Iterable[Union[ModelTemplate, Mapping[str, Any]]],
    *,
    connection: Optional[AnkiConnect] = None,
) -> None:
    templates_payload: Dict[str, Dict[str, str]] = {}
    for raw_template in templates:
        template = (
            raw_template
            if isinstance(raw_template, ModelTemplate)
            else model_validate(ModelTemplate, raw_template)
        )
        if template.name in templates_payload:
            raise ValueError(f"Duplicate template definition for {template.name!r}")
        templates_payload[template.name] = {
            "Front": template.front,
            "Back": template.back,
        }

    payload = {"model": {"name": model, "templates": templates_payload}}
    anki_connection.invoke("updateModelTemplates", payload, connection=connection)


def update_model_styling(
    model: str, css: str, *, connection: Optional[AnkiConnect] = None
) -> None:
    payload = {"model": {"name": model, "css": css}}
    anki_connection.invoke("updateModelStyling", payload, connection=connection)


def find_and_replace_in_model(
    model: str,
    find: str,
    replace: str,
    *,
    front: bool = True,
    back: bool = True,
    css: bool = False,
    connection: Optional[AnkiConnect] = None,
) -> int:
    """Найти и заменить текст в шаблонах/стилях; вернуть число замен."""

    payload = {
        "model": {
            "modelName": model,
            "findText": find,
            "replaceText": replace,
            "front": front,
            "back": back,
            "css": css,
        }
    }
    raw = anki_connection.invoke("findAndReplaceInModels", payload, connection=connection)
    return results.coerce_int("findAndReplaceInModels", raw)


def set_model_field_descriptions(
    model: str,
    descriptions: Mapping[str, str],
    *,
    connection: Optional[AnkiConnect] = None,
) -> None:
    """Задать подсказки пустых полей в редакторе, по одному вызову на поле."""

    for field, description in descriptions.items():
        payload = {
            "modelName": model,
            "fieldName": field,
            "description": description,
        }
        anki_connection.invoke(
            "modelFieldSetDescription", payload, connection=connection
        )


__all__ = [
    "create_model",
    "find_and_replace_in_model",
    "get_model_fields",
    "get_model_names",
    "get_model_templates",
    "set_model_field_descriptions",
    "update_model_styling",
    "update_model_templates",
]
