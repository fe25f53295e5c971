"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

The reducer itself never raises these for well-typed input; they come from
the validation collaborator, lookups made on behalf of the CLI, and the
state codec.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class FormValidationError(ValidationError):
    """One or more input fields failed validation.

    ``errors`` maps the offending field name to its message, in the order
    the fields were checked.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StateFormatError(DomainException):
    """A stored state blob could not be decoded into a snapshot."""


class ImportFormatError(StateFormatError):
    """A user-supplied import document was rejected."""
