"""Core data types shared across uttermatch modules."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SlotValue:
    """One enumerated value of a slot type.

    Attributes:
        value: Canonical form.
        synonyms: Alternate surface forms resolving to *value*.
        id: Opaque identifier carried through from the model.
        builtin: True for values supplied by a vendor builtin type.
    """

    value: str
    synonyms: tuple[str, ...] = ()
    id: str | None = None
    builtin: bool = False

    def match(self, text: str) -> tuple[bool, str | None]:
        """Test *text* against the canonical value, then each synonym.

        Returns ``(matched, synonym)`` where *synonym* is the synonym that
        matched, or None when the canonical value matched.
        """
        folded = text.lower()
        if self.value.lower() == folded:
            return True, None
        for synonym in self.synonyms:
            if synonym.lower() == folded:
                return True, synonym
        return False, None


@dataclass(frozen=True, slots=True)
class SlotMatch:
    """Immutable result of testing slot text against a slot type.

    Attributes:
        matches: Whether the text satisfied the type.
        value: The matched text with its original case, or the canonical
            form produced by a normalizing builtin type.
        slot_value: The enumerated value that matched, if any.
        synonym: The synonym that matched, if not the canonical form.
        untyped: True when no type definition existed for the slot.
    """

    matches: bool
    value: str = ""
    slot_value: SlotValue | None = None
    synonym: str | None = None
    untyped: bool = False


NO_MATCH = SlotMatch(matches=False)
