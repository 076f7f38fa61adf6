"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-facing responses.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or field failed validation."""


class EntityNotFoundError(DomainException):
    """The entity addressed by an operation does not exist."""


class InvalidArgumentError(DomainException):
    """A supplied id does not resolve to the expected related entity."""


class InvalidOperationError(DomainException):
    """The action violates a state invariant (locked or invoiced order)."""
