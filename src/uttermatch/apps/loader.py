"""Interaction model loading from the vendor language-model JSON format.

Accepts either the full export::

    {"interactionModel": {"languageModel": {"intents": [...], "types": [...]}}}

or just the ``languageModel`` object.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from uttermatch.core.constants import LOGGER_NAME
from uttermatch.core.errors import ModelFormatError
from uttermatch.core.model import InteractionModel, ModelBuilder
from uttermatch.core.schema import Intent
from uttermatch.core.types import SlotValue

_log = logging.getLogger(LOGGER_NAME)


# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _require_list(raw: dict[str, Any], key: str, where: str) -> list[Any]:
    value = raw.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise ModelFormatError(f"{where}.{key} must be a list")
    return value


def _parse_intent(raw: Any, index: int) -> tuple[Intent, list[str]]:
    """Parse one ``intents[]`` entry into an intent and its sample templates."""
    where = f"intents[{index}]"
    if not isinstance(raw, dict) or not raw.get("name"):
        raise ModelFormatError(f"{where} must be an object with a 'name'")

    slots: list[tuple[str, str]] = []
    for j, slot in enumerate(_require_list(raw, "slots", where)):
        if not isinstance(slot, dict) or "name" not in slot or "type" not in slot:
            raise ModelFormatError(f"{where}.slots[{j}] needs 'name' and 'type'")
        slots.append((str(slot["name"]), str(slot["type"])))

    samples = [str(s) for s in _require_list(raw, "samples", where)]
    return Intent.create(str(raw["name"]), slots), samples


def _parse_slot_value(raw: Any, where: str) -> SlotValue:
    if not isinstance(raw, dict) or not isinstance(raw.get("name"), dict):
        raise ModelFormatError(f"{where} must be an object with a 'name' object")
    name = raw["name"]
    if "value" not in name:
        raise ModelFormatError(f"{where}.name needs a 'value'")
    return SlotValue(
        value=str(name["value"]),
        synonyms=tuple(str(s) for s in name.get("synonyms") or ()),
        id=str(raw["id"]) if raw.get("id") is not None else None,
        builtin=bool(raw.get("builtin", False)),
    )


def _language_model(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ModelFormatError("Interaction model must be a JSON object")
    interaction = data.get("interactionModel", data)
    language = interaction.get("languageModel", interaction) if isinstance(interaction, dict) else None
    if not isinstance(language, dict) or "intents" not in language:
        raise ModelFormatError("No 'languageModel.intents' found in interaction model")
    return language


# ---------------------------------------------------------------------------
# Public loaders
# ---------------------------------------------------------------------------


def parse_interaction_model(
    data: Any, *, include_builtins: bool = True
) -> InteractionModel:
    """Build an :class:`InteractionModel` from decoded JSON *data*.

    Raises:
        ModelFormatError: The document does not have the expected shape.
        SchemaError: The document is well-formed but inconsistent.
    """
    language = _language_model(data)
    builder = ModelBuilder(include_builtins=include_builtins)

    samples: list[tuple[str, list[str]]] = []
    for i, raw in enumerate(_require_list(language, "intents", "languageModel")):
        intent, templates = _parse_intent(raw, i)
        builder.add_intent(intent)
        samples.append((intent.name, templates))

    for i, raw in enumerate(_require_list(language, "types", "languageModel")):
        where = f"types[{i}]"
        if not isinstance(raw, dict) or not raw.get("name"):
            raise ModelFormatError(f"{where} must be an object with a 'name'")
        values = [
            _parse_slot_value(v, f"{where}.values[{j}]")
            for j, v in enumerate(_require_list(raw, "values", where))
        ]
        builder.add_slot_type(str(raw["name"]), values)

    for intent_name, templates in samples:
        builder.add_samples(intent_name, templates)

    return builder.build()


def load_interaction_model(
    path: str | Path, *, include_builtins: bool = True
) -> InteractionModel:
    """Load and build an interaction model from a JSON file."""
    model_path = Path(path).expanduser()
    _log.debug("Loading interaction model from %s", model_path)
    try:
        with open(model_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ModelFormatError(f"{model_path}: invalid JSON ({exc})") from exc
    return parse_interaction_model(data, include_builtins=include_builtins)
