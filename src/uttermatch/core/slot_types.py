"""Slot type catalog and slot value validation.

A slot type answers one question: does this captured text satisfy the
type, and which canonical value did it resolve to? Three behaviors exist:

* closed enumerated types (:class:`SlotType`) accept only their values
  and synonyms;
* open builtin types (:class:`OpenSlotType`) accept their values and
  fall back to accepting any text;
* a type name with no definition is an automatic pass, handled by
  :meth:`SlotTypeCatalog.match_type`.

Anything with a ``name`` and a ``match(text)`` method can be registered,
so normalizing builtins (see :mod:`uttermatch.core.builtins`) plug in
alongside the enumerated types.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from uttermatch.core.constants import BUILTIN_PREFIX
from uttermatch.core.types import NO_MATCH, SlotMatch, SlotValue


class SlotTypeMatcher(Protocol):
    """Structural type for anything the catalog can validate against."""

    @property
    def name(self) -> str: ...

    def match(self, text: str) -> SlotMatch: ...


@dataclass(frozen=True, slots=True)
class SlotType:
    """A slot type with a closed list of enumerated values."""

    name: str
    values: tuple[SlotValue, ...] = ()

    @property
    def is_builtin(self) -> bool:
        return self.name.startswith(BUILTIN_PREFIX)

    @property
    def is_enumerated(self) -> bool:
        return not self.is_builtin

    @property
    def is_custom(self) -> bool:
        """Non-builtin, or builtin but extended with non-builtin values."""
        if not self.is_builtin:
            return True
        return any(not value.builtin for value in self.values)

    def match_all(self, text: str) -> list[SlotMatch]:
        """All values matching *text*, in declaration order."""
        text = text.strip()
        matches: list[SlotMatch] = []
        for slot_value in self.values:
            matched, synonym = slot_value.match(text)
            if matched:
                matches.append(
                    SlotMatch(True, text, slot_value=slot_value, synonym=synonym)
                )
        return matches

    def match(self, text: str) -> SlotMatch:
        matches = self.match_all(text)
        if matches:
            return matches[0]
        return self._fallback(text)

    def _fallback(self, text: str) -> SlotMatch:
        return NO_MATCH


@dataclass(frozen=True, slots=True)
class OpenSlotType(SlotType):
    """A builtin slot type that treats unlisted text as free-form input."""

    def _fallback(self, text: str) -> SlotMatch:
        return SlotMatch(True, text.strip())


def make_slot_type(name: str, values: Iterable[SlotValue] = ()) -> SlotType:
    """Build the right slot type variant for *name* and *values*.

    Builtin types stay open unless they carry at least one non-builtin
    value, which restricts them to their enumerated list.
    """
    slot_type = SlotType(name, tuple(values))
    if slot_type.is_builtin and not slot_type.is_custom:
        return OpenSlotType(slot_type.name, slot_type.values)
    return slot_type


class SlotTypeCatalog:
    """Read-only lookup of slot types by name (case-insensitive).

    When two types share a name, the one registered first wins.
    """

    __slots__ = ("_types",)

    def __init__(self, slot_types: Iterable[SlotTypeMatcher] = ()) -> None:
        self._types: tuple[SlotTypeMatcher, ...] = tuple(slot_types)

    def types(self) -> tuple[SlotTypeMatcher, ...]:
        return self._types

    def slot_type(self, name: str) -> SlotTypeMatcher | None:
        folded = name.lower()
        for slot_type in self._types:
            if slot_type.name.lower() == folded:
                return slot_type
        return None

    def match_type(self, type_name: str, text: str) -> SlotMatch:
        """Validate *text* against the type called *type_name*.

        Unknown types never block a match: the result is a pass flagged
        as ``untyped``.
        """
        slot_type = self.slot_type(type_name)
        if slot_type is None:
            return SlotMatch(True, text, untyped=True)
        return slot_type.match(text)

    def __len__(self) -> int:
        return len(self._types)
