"""Argument checks shared by the model constructors."""
import math
from numbers import Real

from rental_agency.exceptions import InvalidArgumentError


def require_text(value, message: str) -> str:
    """Return `value` if it is a non-empty string, else raise InvalidArgumentError."""
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(message)
    return value


def require_positive_number(value, message: str) -> float:
    """Accept finite ints and floats > 0 (bools are rejected) and return them as float."""
    if isinstance(value, bool) or not isinstance(value, Real) or not value > 0 or not math.isfinite(value):
        raise InvalidArgumentError(message)
    return float(value)


def require_positive_int(value, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(message)
    return value


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"
