"""
Domain Exceptions
Error taxonomy shared by all fitness tracker entities and services.

Entities raise these eagerly, before any attribute is assigned, so a failed
constructor or setter never leaves a half-updated object behind.
Nothing in the package catches them: callers decide how to report them.
"""

from typing import Optional


class FitnessTrackerError(Exception):
    """Base class for every error raised by the fitness tracker."""


class ValidationError(FitnessTrackerError, ValueError):
    """
    An argument is outside its documented range or domain.

    Examples: non-positive weight, a date in the future, a gender string
    other than "male"/"female".
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NullReferenceError(FitnessTrackerError, TypeError):
    """A required reference argument is None."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidStateError(FitnessTrackerError):
    """
    The operation is undefined in the entity's current state.

    Raised for BMI with zero height and for reassigning fields that are
    fixed after construction.
    """


class DuplicateKeyError(FitnessTrackerError):
    """A uniqueness constraint was violated (e.g. a repeated set number)."""


class RestrictedDeleteError(InvalidStateError):
    """An entity cannot be deleted while other entities still reference it."""
