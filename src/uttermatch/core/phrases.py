"""Sample phrase compilation.

A sample phrase is a template such as ``"play {song} by {artist}"``.
Two placeholder forms are recognized:

``{slotName}``
    Captures any text (possibly empty) as the value of *slotName*.
``{literal text|slotName}``
    Matches *literal text* as fixed text and reports it as the value of
    *slotName*, without capturing.

Templates are parsed into a token sequence and the matching regex is
rendered from the tokens, so literal text is always escaped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from uttermatch.core.errors import SchemaError
from uttermatch.core.text import normalize_utterance


@dataclass(frozen=True, slots=True)
class LiteralToken:
    text: str


@dataclass(frozen=True, slots=True)
class CaptureToken:
    slot_name: str


@dataclass(frozen=True, slots=True)
class AliasToken:
    text: str
    slot_name: str


Token = LiteralToken | CaptureToken | AliasToken
SlotToken = CaptureToken | AliasToken


def tokenize(template: str) -> tuple[Token, ...]:
    """Split *template* into literal and placeholder tokens, leftmost first."""

    def parse(rest: str) -> list[Token]:
        start = rest.find("{")
        if start == -1:
            return [LiteralToken(rest)] if rest else []
        end = rest.find("}", start)
        if end == -1:
            raise SchemaError(f"Unterminated placeholder in sample phrase: {template!r}")

        body = rest[start + 1 : end]
        if "|" in body:
            literal, _, slot_name = body.partition("|")
            token: Token = AliasToken(literal.strip(), slot_name.strip())
        else:
            slot_name = body.strip()
            token = CaptureToken(slot_name)
        if not slot_name:
            raise SchemaError(f"Empty slot name in sample phrase: {template!r}")

        head = rest[:start]
        tokens: list[Token] = [LiteralToken(head)] if head else []
        tokens.append(token)
        return tokens + parse(rest[end + 1 :])

    return tuple(parse(template))


def render_pattern(tokens: tuple[Token, ...]) -> str:
    """Render *tokens* as a regex source string, used with ``fullmatch``.

    Literal text gets the same punctuation stripping as utterances.
    Literal text touching a capture is trimmed on that side, so the
    capture group absorbs the separating whitespace.
    """
    parts: list[str] = []
    for i, token in enumerate(tokens):
        if isinstance(token, CaptureToken):
            parts.append("(.*)")
        elif isinstance(token, AliasToken):
            parts.append(re.escape(normalize_utterance(token.text)))
        else:
            text = normalize_utterance(token.text)
            if i > 0 and isinstance(tokens[i - 1], CaptureToken):
                text = text.lstrip()
            if i + 1 < len(tokens) and isinstance(tokens[i + 1], CaptureToken):
                text = text.rstrip()
            parts.append(re.escape(text))
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class CompiledPhrase:
    """Matcher derived from one template."""

    pattern: re.Pattern[str]
    slot_names: tuple[str, ...]
    tokens: tuple[Token, ...]

    @property
    def slot_tokens(self) -> tuple[SlotToken, ...]:
        return tuple(t for t in self.tokens if not isinstance(t, LiteralToken))


def compile_phrase(template: str) -> CompiledPhrase:
    """Compile *template* into a case-insensitive matcher.

    The pattern is meant for :meth:`re.Pattern.fullmatch`, which anchors
    both ends.
    """
    tokens = tokenize(template)
    slot_names = tuple(t.slot_name for t in tokens if not isinstance(t, LiteralToken))
    pattern = re.compile(render_pattern(tokens), re.IGNORECASE)
    return CompiledPhrase(pattern=pattern, slot_names=slot_names, tokens=tokens)


@dataclass(frozen=True, slots=True)
class SamplePhrase:
    """A compiled sample phrase owned by one intent."""

    intent: str
    template: str
    compiled: CompiledPhrase

    @classmethod
    def create(cls, intent: str, template: str) -> SamplePhrase:
        return cls(intent=intent, template=template, compiled=compile_phrase(template))

    @property
    def pattern(self) -> re.Pattern[str]:
        return self.compiled.pattern

    @property
    def slot_names(self) -> tuple[str, ...]:
        return self.compiled.slot_names

    def slot_name(self, index: int) -> str | None:
        if 0 <= index < len(self.slot_names):
            return self.slot_names[index]
        return None

    def slot_count(self) -> int:
        return len(self.slot_names)
