"""Vendor builtin slot types and default utterances for builtin intents."""

import re
from dataclasses import dataclass
from typing import Final

from uttermatch.core.slot_types import SlotTypeMatcher, make_slot_type
from uttermatch.core.types import NO_MATCH, SlotMatch

NUMBER_TYPE: Final = "AMAZON.NUMBER"

# Builtin types that accept any text.
OPEN_SLOT_TYPES: Final = (
    "AMAZON.LITERAL",
    "AMAZON.SearchQuery",
    "AMAZON.FirstName",
    "AMAZON.US_FIRST_NAME",
    "AMAZON.Person",
    "AMAZON.City",
    "AMAZON.US_CITY",
    "AMAZON.Country",
    "AMAZON.Artist",
    "AMAZON.MusicAlbum",
    "AMAZON.MusicGroup",
    "AMAZON.MusicRecording",
)

BUILTIN_UTTERANCES: Final[dict[str, tuple[str, ...]]] = {
    "AMAZON.CancelIntent": ("cancel", "never mind", "forget it"),
    "AMAZON.FallbackIntent": (),
    "AMAZON.HelpIntent": ("help", "help me", "can you help me"),
    "AMAZON.LoopOffIntent": ("loop off",),
    "AMAZON.LoopOnIntent": ("loop", "loop on", "keep playing this"),
    "AMAZON.MoreIntent": ("more",),
    "AMAZON.NavigateHomeIntent": ("home", "go home"),
    "AMAZON.NavigateSettingsIntent": ("settings",),
    "AMAZON.NextIntent": ("next", "skip", "skip forward"),
    "AMAZON.NoIntent": ("no", "no thanks"),
    "AMAZON.PageDownIntent": ("page down",),
    "AMAZON.PageUpIntent": ("page up",),
    "AMAZON.PauseIntent": ("pause", "pause that"),
    "AMAZON.PreviousIntent": ("go back", "skip back", "back up"),
    "AMAZON.RepeatIntent": ("repeat", "say that again", "repeat that"),
    "AMAZON.ResumeIntent": ("resume", "continue", "keep going"),
    "AMAZON.ScrollDownIntent": ("scroll down",),
    "AMAZON.ScrollLeftIntent": ("scroll left",),
    "AMAZON.ScrollRightIntent": ("scroll right",),
    "AMAZON.ScrollUpIntent": ("scroll up",),
    "AMAZON.ShuffleOffIntent": ("stop shuffling", "shuffle off", "turn off shuffle"),
    "AMAZON.ShuffleOnIntent": ("shuffle", "shuffle on", "shuffle the music", "shuffle mode"),
    "AMAZON.StartOverIntent": ("start over", "restart", "start again"),
    "AMAZON.StopIntent": ("stop", "off", "shut up"),
    "AMAZON.YesIntent": ("yes", "yes please", "sure"),
}

_DIGITS_RE = re.compile(r"^-?\d+$")

_UNITS: Final = {
    word: i
    for i, word in enumerate(
        (
            "zero", "one", "two", "three", "four", "five", "six", "seven",
            "eight", "nine", "ten", "eleven", "twelve", "thirteen",
            "fourteen", "fifteen", "sixteen", "seventeen", "eighteen",
            "nineteen",
        )
    )
}
_TENS: Final = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}
_SCALES: Final = {"thousand": 1_000, "million": 1_000_000}


def words_to_number(text: str) -> int | None:
    """Parse an English number phrase such as ``"two hundred five"``.

    Returns None if any word is not part of a number, or if the words do
    not form one number (``"one two"``, ``"twenty twenty"``).
    """
    words = [w for w in text.lower().replace("-", " ").split() if w != "and"]
    if not words:
        return None

    total = 0
    current = 0
    last = ""
    for word in words:
        if word in _UNITS:
            value = _UNITS[word]
            # Only a single digit may follow a ten: "twenty one".
            if last == "unit" or (last == "ten" and not 0 < value < 10):
                return None
            current += value
            last = "unit"
        elif word in _TENS:
            if last in ("unit", "ten"):
                return None
            current += _TENS[word]
            last = "ten"
        elif word == "hundred":
            current = (current or 1) * 100
            last = "scale"
        elif word in _SCALES:
            total += (current or 1) * _SCALES[word]
            current = 0
            last = "scale"
        else:
            return None
    return total + current


@dataclass(frozen=True, slots=True)
class NumberSlotType:
    """Numbers given as digits or words; the value is always digits."""

    name: str = NUMBER_TYPE

    def match(self, text: str) -> SlotMatch:
        candidate = text.strip()
        if _DIGITS_RE.match(candidate):
            return SlotMatch(True, candidate)
        number = words_to_number(candidate)
        if number is None:
            return NO_MATCH
        return SlotMatch(True, str(number))


def builtin_slot_types() -> tuple[SlotTypeMatcher, ...]:
    """Fresh instances of every builtin slot type."""
    return (NumberSlotType(), *(make_slot_type(name) for name in OPEN_SLOT_TYPES))


def builtin_utterances(intent_name: str) -> tuple[str, ...]:
    return BUILTIN_UTTERANCES.get(intent_name, ())
