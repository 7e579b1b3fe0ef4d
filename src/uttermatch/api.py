"""Public API for offline utterance resolution.

Typical usage::

    from uttermatch.api import load_interaction_model, resolve

    model = load_interaction_model("models/en-US.json")
    result = resolve(model, "play the next song")
    print(result.intent_name, result.slots())
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from uttermatch.apps.loader import load_interaction_model
from uttermatch.core.model import InteractionModel, ModelBuilder
from uttermatch.core.resolve import Resolution, resolve
from uttermatch.core.schema import Intent
from uttermatch.core.slot_types import SlotTypeMatcher

__all__ = [
    "InteractionModel",
    "ModelBuilder",
    "Resolution",
    "build_model",
    "load_interaction_model",
    "resolve",
    "resolve_all",
]


def build_model(
    intents: Iterable[Intent],
    samples: Mapping[str, Iterable[str]],
    slot_types: Iterable[SlotTypeMatcher] = (),
    *,
    include_builtins: bool = True,
) -> InteractionModel:
    """Build a model from already-parsed pieces.

    Args:
        intents: Declared intents, in resolution priority order.
        samples: Sample templates keyed by intent name.
        slot_types: Custom slot types; builtins are added automatically
            unless *include_builtins* is False.

    Raises:
        SchemaError: A sample names an intent missing from *intents*.
    """
    builder = ModelBuilder(include_builtins=include_builtins)
    for intent in intents:
        builder.add_intent(intent)
    builder.add_types(slot_types)
    for intent_name, templates in samples.items():
        builder.add_samples(intent_name, templates)
    return builder.build()


def resolve_all(model: InteractionModel, utterances: Iterable[str]) -> list[Resolution]:
    """Resolve each utterance in order."""
    return [resolve(model, utterance) for utterance in utterances]
