"""Intent schema: the declared intents and their slots."""

from collections.abc import Iterable
from dataclasses import dataclass

from uttermatch.core.constants import BUILTIN_PREFIX


@dataclass(frozen=True, slots=True)
class IntentSlot:
    """A named, typed slot declared on one intent."""

    name: str
    type: str


@dataclass(frozen=True, slots=True)
class Intent:
    """A declared intent.

    The intent name is case-sensitive; slot names are looked up
    case-insensitively.
    """

    name: str
    slots: tuple[IntentSlot, ...] = ()
    builtin: bool = False

    @classmethod
    def create(
        cls,
        name: str,
        slots: Iterable[tuple[str, str]] = (),
        builtin: bool | None = None,
    ) -> "Intent":
        """Build an intent from ``(slot_name, type_name)`` pairs.

        *builtin* defaults to whether *name* carries the vendor prefix.
        """
        if builtin is None:
            builtin = name.startswith(BUILTIN_PREFIX)
        return cls(
            name=name,
            slots=tuple(IntentSlot(slot_name, type_name) for slot_name, type_name in slots),
            builtin=builtin,
        )

    def slot_for_name(self, name: str) -> IntentSlot | None:
        folded = name.lower()
        for slot in self.slots:
            if slot.name.lower() == folded:
                return slot
        return None


class IntentSchema:
    """Ordered, read-only collection of intents."""

    __slots__ = ("_intents", "_by_name")

    def __init__(self, intents: Iterable[Intent] = ()) -> None:
        self._intents: tuple[Intent, ...] = tuple(intents)
        self._by_name: dict[str, Intent] = {}
        for intent in self._intents:
            self._by_name.setdefault(intent.name, intent)

    def intents(self) -> tuple[Intent, ...]:
        return self._intents

    def intent(self, name: str) -> Intent | None:
        return self._by_name.get(name)

    def has_intent(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._intents)
