"""Read-only registry of sample phrases per intent."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from uttermatch.core.phrases import SamplePhrase


class SampleRegistry:
    """Sample phrases keyed by intent name, in registration order.

    Instances are produced by :class:`uttermatch.core.model.ModelBuilder`
    and never change afterwards.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: Mapping[str, Iterable[SamplePhrase]] | None = None) -> None:
        self._samples: Mapping[str, tuple[SamplePhrase, ...]] = MappingProxyType(
            {intent: tuple(phrases) for intent, phrases in (samples or {}).items()}
        )

    def samples_for(self, intent: str) -> tuple[SamplePhrase, ...]:
        return self._samples.get(intent, ())

    def intents(self) -> tuple[str, ...]:
        return tuple(self._samples)

    def default_sample(self) -> SamplePhrase | None:
        """Fallback phrase: the first phrase of the first registered intent."""
        for phrases in self._samples.values():
            if phrases:
                return phrases[0]
        return None

    def __iter__(self) -> Iterator[SamplePhrase]:
        for phrases in self._samples.values():
            yield from phrases

    def __len__(self) -> int:
        return sum(len(phrases) for phrases in self._samples.values())
