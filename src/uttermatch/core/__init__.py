"""Core matching package: no I/O, no UI dependencies.

Re-exports key symbols for convenience.
"""

from uttermatch.core.errors import (
    ModelFormatError,
    RegistryFrozenError,
    SchemaError,
    UttermatchError,
)
from uttermatch.core.evaluate import Evaluation, evaluate
from uttermatch.core.model import InteractionModel, ModelBuilder
from uttermatch.core.phrases import SamplePhrase, compile_phrase
from uttermatch.core.registry import SampleRegistry
from uttermatch.core.resolve import Resolution, resolve
from uttermatch.core.schema import Intent, IntentSchema, IntentSlot
from uttermatch.core.slot_types import (
    OpenSlotType,
    SlotType,
    SlotTypeCatalog,
    SlotTypeMatcher,
    make_slot_type,
)
from uttermatch.core.text import normalize_utterance
from uttermatch.core.types import SlotMatch, SlotValue

__all__ = [
    "Evaluation",
    "Intent",
    "IntentSchema",
    "IntentSlot",
    "InteractionModel",
    "ModelBuilder",
    "ModelFormatError",
    "OpenSlotType",
    "RegistryFrozenError",
    "Resolution",
    "SamplePhrase",
    "SampleRegistry",
    "SchemaError",
    "SlotMatch",
    "SlotType",
    "SlotTypeCatalog",
    "SlotTypeMatcher",
    "SlotValue",
    "UttermatchError",
    "compile_phrase",
    "evaluate",
    "make_slot_type",
    "normalize_utterance",
    "resolve",
]
