"""Default configuration values for uttermatch."""

from typing import Final

LOGGER_NAME: Final = "uttermatch"

# Slot types and intents whose names start with this are vendor builtins.
BUILTIN_PREFIX: Final = "AMAZON"

# Characters stripped from an utterance before matching.
PUNCTUATION_DENYLIST: Final = "!\"¿?|#$%/()=+-_<>*{}·¡[].,;:"

DEFAULT_MODEL_ENV: Final = "UTTERMATCH_MODEL"
DEFAULT_LOG_LEVEL_ENV: Final = "LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final = "WARNING"
