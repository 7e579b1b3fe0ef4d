"""Text normalization applied to utterances before pattern matching."""

import re

from uttermatch.core.constants import PUNCTUATION_DENYLIST

_PUNCTUATION_RE = re.compile(f"[{re.escape(PUNCTUATION_DENYLIST)}]")


def normalize_utterance(text: str) -> str:
    """Remove denylisted punctuation from *text*.

    Letters, digits, whitespace and apostrophes are kept as-is. Case is
    preserved; matching is case-insensitive instead.
    """
    return _PUNCTUATION_RE.sub("", text)


def is_whitespace_bounded(value: str) -> bool:
    """True if *value* is blank or starts or ends with whitespace."""
    if not value.strip():
        return True
    return value[0].isspace() or value[-1].isspace()
