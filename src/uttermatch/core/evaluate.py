"""Evaluation of one sample phrase against one utterance."""

from __future__ import annotations

from dataclasses import dataclass

from uttermatch.core.errors import SchemaError
from uttermatch.core.phrases import CaptureToken, SamplePhrase
from uttermatch.core.schema import IntentSchema, IntentSlot
from uttermatch.core.slot_types import SlotTypeCatalog
from uttermatch.core.text import is_whitespace_bounded, normalize_utterance
from uttermatch.core.types import SlotMatch


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Immutable outcome of matching one sample phrase.

    Attributes:
        phrase: The phrase that was evaluated.
        matched: Whether the pattern matched and every slot validated.
        slot_matches: One result per slot, in template order.
        score: Matched length minus captured slot text length. Higher
            means more literal (non-slot) text matched.
        typed_score: Number of captured slots validated against a known
            slot type.
    """

    phrase: SamplePhrase
    matched: bool
    slot_matches: tuple[SlotMatch, ...] = ()
    score: int = 0
    typed_score: int = 0

    @property
    def slot_values(self) -> tuple[str, ...]:
        return tuple(match.value.strip() for match in self.slot_matches)


def declared_slots(phrase: SamplePhrase, schema: IntentSchema) -> tuple[IntentSlot, ...]:
    """Resolve each slot name of *phrase* against its intent's declaration.

    Raises:
        SchemaError: The intent or one of its referenced slots is not
            declared. This is a malformed model, not a failed match.
    """
    intent = schema.intent(phrase.intent)
    if intent is None:
        raise SchemaError(f"Invalid schema - no intent: {phrase.intent}")
    slots: list[IntentSlot] = []
    for slot_name in phrase.slot_names:
        slot = intent.slot_for_name(slot_name)
        if slot is None:
            raise SchemaError(
                f"Invalid schema - no slot: {slot_name} for intent: {phrase.intent}"
            )
        slots.append(slot)
    return tuple(slots)


def evaluate(
    phrase: SamplePhrase,
    utterance: str,
    schema: IntentSchema,
    catalog: SlotTypeCatalog,
) -> Evaluation:
    """Match *utterance* against *phrase* and validate its slot values.

    Slot declarations are checked before the pattern is applied, so a
    phrase naming an undeclared slot raises :class:`SchemaError` for any
    utterance.
    """
    slots = declared_slots(phrase, schema)
    clean = normalize_utterance(utterance)
    found = phrase.pattern.fullmatch(clean)
    if found is None:
        return Evaluation(phrase=phrase, matched=False)

    whole = found.group(0)
    captures = found.groups()
    slot_matches: list[SlotMatch] = []
    captured_length = 0
    typed = 0
    group = 0
    for token, slot in zip(phrase.compiled.slot_tokens, slots):
        if isinstance(token, CaptureToken):
            text = captures[group]
            group += 1
            # A capture glued to literal text ("sampleslot") is not a match.
            if text != clean and not is_whitespace_bounded(text):
                return Evaluation(phrase=phrase, matched=False)
            slot_match = catalog.match_type(slot.type, text)
            if not slot_match.matches:
                return Evaluation(phrase=phrase, matched=False)
            captured_length += len(text)
            if not slot_match.untyped:
                typed += 1
        else:
            # Alias literals label fixed text; they are never a reason to reject.
            slot_match = catalog.match_type(slot.type, token.text)
            if not slot_match.matches:
                slot_match = SlotMatch(True, token.text)
        slot_matches.append(slot_match)

    return Evaluation(
        phrase=phrase,
        matched=True,
        slot_matches=tuple(slot_matches),
        score=len(whole) - captured_length,
        typed_score=typed,
    )
