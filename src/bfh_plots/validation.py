"""Argument checks shared by the public helpers.

Each ``check_*`` function returns an :class:`Ok` holding the (possibly
normalised) value or an :class:`Err` holding the reason. Call sites decide
whether to ``unwrap()`` (raise :class:`InvalidInputError`) or fall back with
``unwrap_or()``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Real
from typing import Any, Generic, TypeVar, Union

from .exceptions import InvalidInputError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise InvalidInputError(self.reason)

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Err]


def check_numeric_range(
    value: Any,
    name: str,
    lo: float,
    hi: float,
    *,
    exclusive_min: bool = False,
    exclusive_max: bool = False,
    allow_none: bool = False,
) -> Result:
    """Check that ``value`` is a single finite number within ``[lo, hi]``."""
    if value is None:
        return Ok(None) if allow_none else Err(f"{name} must be numeric")
    # bool is a Real subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        return Err(f"{name} must be numeric")
    if math.isnan(value):
        return Err(f"{name} must be numeric")

    if exclusive_min and value <= lo:
        return Err(f"{name} must be greater than {lo:g}")
    if not exclusive_min and value < lo:
        return Err(f"{name} must be between {lo:g} and {hi:g}")
    if exclusive_max and value >= hi:
        return Err(f"{name} must be less than {hi:g}")
    if not exclusive_max and value > hi:
        return Err(f"{name} must be between {lo:g} and {hi:g}")
    return Ok(value)


def check_choice(
    value: Any,
    name: str,
    choices: Iterable[str],
    *,
    allow_none: bool = False,
) -> Result:
    """Check that ``value`` is one of ``choices``."""
    choices = list(choices)
    if value is None:
        if allow_none:
            return Ok(None)
        return Err(f"{name} must be one of: {', '.join(choices)}")
    if not isinstance(value, str):
        return Err(f"{name} must be a character string")
    if value not in choices:
        return Err(f"{name} must be one of: {', '.join(choices)}")
    return Ok(value)


def check_bool(value: Any, name: str) -> Result:
    if not isinstance(value, bool):
        return Err(f"{name} must be a single logical value (True or False)")
    return Ok(value)


def check_non_empty_str(value: Any, name: str) -> Result:
    if not isinstance(value, str) or not value:
        return Err(f"{name} must be a non-empty character string")
    return Ok(value)


def check_palette_name(value: Any) -> Result:
    if not isinstance(value, str) or not value:
        return Err("palette must be a single character string")
    return Ok(value)
