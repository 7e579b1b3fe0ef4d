"""Shared test fixtures: a small reference interaction model."""

from __future__ import annotations

from typing import Any

import pytest

from uttermatch.core.model import InteractionModel, ModelBuilder
from uttermatch.core.schema import Intent
from uttermatch.core.types import SlotValue

INTENTS: list[tuple[str, list[tuple[str, str]]]] = [
    ("Play", []),
    ("Hello", []),
    ("NoSampleUtterances", []),
    ("SlottedIntent", [("SlotName", "SLOT_TYPE")]),
    ("MultipleSlots", [("SlotA", "SLOT_TYPE"), ("SlotB", "SLOT_TYPE")]),
    ("CustomSlot", [("country", "COUNTRY_CODE")]),
    ("NumberSlot", [("number", "AMAZON.NUMBER")]),
    ("StringSlot", [("stringSlot", "StringSlotType")]),
    ("AMAZON.HelpIntent", []),
]

SAMPLES: dict[str, list[str]] = {
    "CustomSlot": ["{country}"],
    "Hello": ["hi", "hello", "hi there", "good morning"],
    "MultipleSlots": ["multiple {SlotA} and {SlotB}", "reversed {SlotB} then {SlotA}", "{SlotA}"],
    "NumberSlot": ["{number}", "{number} test"],
    "Play": ["play", "play next", "play now"],
    "SlottedIntent": ["slot {SlotName}"],
    "StringSlot": ["{stringSlot}"],
}

COUNTRY_CODES: list[SlotValue] = [
    SlotValue("US", synonyms=("USA", "America", "US"), id="US"),
    SlotValue("DE", synonyms=("Germany", "DE"), id="DE"),
    SlotValue(
        "UK",
        synonyms=("England", "Britain", "UK", "United Kingdom", "Great Britain"),
        id="UK",
    ),
]


def build_reference_model(*, include_builtins: bool = True) -> InteractionModel:
    builder = ModelBuilder(include_builtins=include_builtins)
    for name, slots in INTENTS:
        builder.add_intent(Intent.create(name, slots))
    builder.add_slot_type("COUNTRY_CODE", COUNTRY_CODES)
    for intent, templates in SAMPLES.items():
        builder.add_samples(intent, templates)
    return builder.build()


def reference_model_json() -> dict[str, Any]:
    """The reference model in the vendor language-model JSON layout."""
    return {
        "interactionModel": {
            "languageModel": {
                "invocationName": "reference",
                "intents": [
                    {
                        "name": name,
                        "slots": [{"name": s, "type": t} for s, t in slots],
                        "samples": SAMPLES.get(name, []),
                    }
                    for name, slots in INTENTS
                ],
                "types": [
                    {
                        "name": "COUNTRY_CODE",
                        "values": [
                            {
                                "id": v.id,
                                "name": {"value": v.value, "synonyms": list(v.synonyms)},
                            }
                            for v in COUNTRY_CODES
                        ],
                    }
                ],
            }
        }
    }


@pytest.fixture
def model() -> InteractionModel:
    return build_reference_model()
