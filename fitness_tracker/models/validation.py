"""
Field Validation Helpers
Shared checks used by model constructors and attribute validators.

Every helper returns the (possibly normalized) value on success and raises
a domain exception on failure, so it can be used directly as the return
value of a SQLAlchemy @validates hook.
"""

import math
from datetime import date, datetime, time
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Optional

from fitness_tracker.core.exceptions import (
    InvalidStateError,
    NullReferenceError,
    ValidationError,
)


def today() -> date:
    """Current local calendar date."""
    return date.today()


def as_date(value: Any, field: str) -> date:
    """Return the local calendar date of a date or datetime value."""
    if isinstance(value, datetime):
        return as_datetime(value, field).date()
    if isinstance(value, date):
        return value
    raise ValidationError(f"{field} must be a date.", field)


def as_datetime(value: Any, field: str) -> datetime:
    """
    Return a naive local datetime.

    Aware values are converted to local time and lose their tzinfo, which
    is how SQLite hands them back. Plain dates become midnight.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise ValidationError(f"{field} must be a date or datetime.", field)


def require_not_future(value: Any, field: str) -> Any:
    """Reject dates after today. Today itself is accepted."""
    if as_date(value, field) > today():
        raise ValidationError(f"{field} cannot be in the future.", field)
    return value


def require_past(value: Any, field: str) -> Any:
    """Reject dates that are today or later."""
    if as_date(value, field) >= today():
        raise ValidationError(f"{field} must be in the past.", field)
    return value


def require_number(value: Any, field: str) -> Real:
    """Reject bools, non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(f"{field} must be a number.", field)
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise ValidationError(f"{field} must be a finite number.", field)
    return value


def require_integer(value: Any, field: str) -> int:
    """Reject anything but a whole number; 5.0 and True are refused too."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(f"{field} must be a whole number.", field)
    return value


def require_positive(value: Any, field: str) -> Real:
    """Reject anything that is not a number strictly greater than zero."""
    if not require_number(value, field) > 0:
        raise ValidationError(f"{field} must be greater than zero.", field)
    return value


def require_range(value: Any, low: Real, high: Real, field: str) -> Real:
    """Reject numbers outside [low, high]."""
    if not low <= require_number(value, field) <= high:
        raise ValidationError(f"{field} must be between {low} and {high}.", field)
    return value


def require_not_blank(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} cannot be empty.", field)
    return value


def require_present(value: Any, field: str) -> Any:
    if value is None:
        raise NullReferenceError(f"{field} cannot be None.", field)
    return value


def reject_reassignment(instance: Any, key: str, value: Any) -> Any:
    """
    Allow the first assignment of a field and refuse every later one.

    Used for attributes fixed at construction (birth date, entry dates,
    height). The ORM loader does not fire validators, so rows read back
    from the database populate these fields normally.
    """
    current: Optional[Any] = getattr(instance, key)
    if current is not None:
        raise InvalidStateError(
            f"{type(instance).__name__}.{key} cannot be changed after creation."
        )
    return value
