"""Utterance resolution across every sample phrase of a model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from uttermatch.core.constants import LOGGER_NAME
from uttermatch.core.evaluate import Evaluation, evaluate

if TYPE_CHECKING:
    from uttermatch.core.model import InteractionModel

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Immutable result of resolving one utterance.

    Attributes:
        utterance: The raw input text.
        matched: Whether any sample phrase matched.
        intent_name: Name of the winning intent, or None.
        slot_names: Slot names of the winning phrase, in template order.
        slot_values: Slot values, parallel to *slot_names*.
        evaluation: The winning evaluation, for scoring details.
    """

    utterance: str
    matched: bool = False
    intent_name: str | None = None
    slot_names: tuple[str, ...] = ()
    slot_values: tuple[str, ...] = ()
    evaluation: Evaluation | None = None

    def slot(self, index: int) -> str | None:
        if 0 <= index < len(self.slot_values):
            return self.slot_values[index]
        return None

    def slot_by_name(self, name: str) -> str | None:
        folded = name.lower()
        for slot_name, value in zip(self.slot_names, self.slot_values):
            if slot_name.lower() == folded:
                return value
        return None

    def slots(self) -> dict[str, str]:
        return dict(zip(self.slot_names, self.slot_values))


def _outranks(candidate: Evaluation, best: Evaluation | None) -> bool:
    # Earlier candidates win ties, so a strict comparison keeps them.
    if best is None:
        return True
    return (candidate.score, candidate.typed_score) > (best.score, best.typed_score)


def best_evaluation(model: InteractionModel, utterance: str) -> Evaluation | None:
    """Highest-ranked successful evaluation, or None.

    Ranking: specificity score, then typed-slot score, then declaration
    order of intents and their phrases.
    """
    best: Evaluation | None = None
    for intent in model.schema.intents():
        for phrase in model.samples.samples_for(intent.name):
            candidate = evaluate(phrase, utterance, model.schema, model.slot_types)
            if candidate.matched and _outranks(candidate, best):
                best = candidate
    return best


def resolve(model: InteractionModel, utterance: str) -> Resolution:
    """Resolve *utterance* to an intent and its slot values.

    A non-matching utterance yields ``matched=False``; a malformed model
    raises :class:`uttermatch.core.errors.SchemaError`.
    """
    best = best_evaluation(model, utterance)
    if best is None:
        _log.debug("No match for %r", utterance)
        return Resolution(utterance=utterance)

    _log.debug(
        "Matched %r to %s via %r (score=%d, typed=%d)",
        utterance,
        best.phrase.intent,
        best.phrase.template,
        best.score,
        best.typed_score,
    )
    return Resolution(
        utterance=utterance,
        matched=True,
        intent_name=best.phrase.intent,
        slot_names=best.phrase.slot_names,
        slot_values=best.slot_values,
        evaluation=best,
    )
