"""Interaction model construction.

Models are assembled with a :class:`ModelBuilder` and frozen into an
:class:`InteractionModel` by :meth:`ModelBuilder.build`. Only the built
model is accepted by the resolver.

Typical usage::

    builder = ModelBuilder()
    builder.add_intent("PlayIntent", slots=[("song", "SONG")])
    builder.add_slot_type("SONG", [SlotValue("yesterday")])
    builder.add_sample("PlayIntent", "play {song}")
    model = builder.build()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from uttermatch.core.builtins import builtin_slot_types, builtin_utterances
from uttermatch.core.constants import LOGGER_NAME
from uttermatch.core.errors import RegistryFrozenError, SchemaError
from uttermatch.core.phrases import SamplePhrase
from uttermatch.core.registry import SampleRegistry
from uttermatch.core.schema import Intent, IntentSchema
from uttermatch.core.slot_types import SlotTypeCatalog, SlotTypeMatcher, make_slot_type
from uttermatch.core.types import SlotValue

if TYPE_CHECKING:
    from uttermatch.core.resolve import Resolution

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True, slots=True)
class InteractionModel:
    """Immutable snapshot of intents, slot types and sample phrases."""

    schema: IntentSchema
    slot_types: SlotTypeCatalog
    samples: SampleRegistry

    def has_intent(self, name: str) -> bool:
        return self.schema.has_intent(name)

    def resolve(self, utterance: str) -> Resolution:
        from uttermatch.core.resolve import resolve

        return resolve(self, utterance)


class ModelBuilder:
    """Mutable accumulator for an :class:`InteractionModel`.

    Intents must be added before their samples. A builder can be built
    once; further mutation raises :class:`RegistryFrozenError`.
    """

    def __init__(self, *, include_builtins: bool = True) -> None:
        self._intents: dict[str, Intent] = {}
        self._slot_types: list[SlotTypeMatcher] = []
        self._samples: dict[str, list[SamplePhrase]] = {}
        self._include_builtins = include_builtins
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise RegistryFrozenError("Model already built; create a new ModelBuilder")

    def add_intent(
        self,
        intent: Intent | str,
        slots: Iterable[tuple[str, str]] = (),
        builtin: bool | None = None,
    ) -> Intent:
        """Declare an intent, either prebuilt or from a name and slot pairs."""
        self._check_open()
        if isinstance(intent, str):
            intent = Intent.create(intent, slots, builtin)
        if intent.name in self._intents:
            raise SchemaError(f"Duplicate intent: {intent.name}")
        self._intents[intent.name] = intent
        return intent

    def add_types(self, slot_types: Iterable[SlotTypeMatcher]) -> None:
        self._check_open()
        self._slot_types.extend(slot_types)

    def add_slot_type(self, name: str, values: Iterable[SlotValue] = ()) -> SlotTypeMatcher:
        slot_type = make_slot_type(name, values)
        self.add_types([slot_type])
        return slot_type

    def add_sample(self, intent: str, template: str) -> SamplePhrase:
        """Compile *template* and append it to *intent*'s samples."""
        self._check_open()
        if intent not in self._intents:
            raise SchemaError(f"Sample for undeclared intent: {intent}")
        phrase = SamplePhrase.create(intent, template)
        self._samples.setdefault(intent, []).append(phrase)
        return phrase

    def add_samples(self, intent: str, templates: Iterable[str]) -> None:
        for template in templates:
            self.add_sample(intent, template)

    def build(self) -> InteractionModel:
        """Freeze everything added so far into an :class:`InteractionModel`.

        With builtins enabled, vendor slot types are appended after the
        user's (so user definitions of the same name take precedence) and
        each declared builtin intent gets its default utterances.
        """
        self._check_open()
        if self._include_builtins:
            self._slot_types.extend(builtin_slot_types())
            for intent in self._intents.values():
                if intent.builtin:
                    self.add_samples(intent.name, builtin_utterances(intent.name))
        self._built = True

        model = InteractionModel(
            schema=IntentSchema(self._intents.values()),
            slot_types=SlotTypeCatalog(self._slot_types),
            samples=SampleRegistry(self._samples),
        )
        _log.debug(
            "Built model: %d intents, %d slot types, %d samples",
            len(model.schema),
            len(model.slot_types),
            len(model.samples),
        )
        return model
