"""Exception types raised by uttermatch.

A non-matching utterance is never an error; these signal a malformed
interaction model or misuse of the build API.
"""


class UttermatchError(Exception):
    """Base class for all uttermatch errors."""


class SchemaError(UttermatchError):
    """The interaction model references something it never declared."""


class ModelFormatError(UttermatchError):
    """An interaction model document could not be parsed."""


class RegistryFrozenError(UttermatchError):
    """A built model was mutated."""
