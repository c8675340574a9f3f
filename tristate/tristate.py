"""
The TriState type: true, false or undefined.
- - - - - -
Part of the tristate package.
"""
from __future__ import annotations

__all__ = [
    'FALSE', 'TRUE', 'UNDEFINED', 'TriState',
    'from_bool', 'to_bool', 'to_optional']

import enum
import logging
import typing as t

from .debug import get_debug_level
from .errors import UndefinedValueError

_logger = logging.getLogger(__package__)

# to_bool() called without a default
_NO_DEFAULT: t.Final[t.Any] = object()


def _check_bool(value: t.Any, msg_prefix: str) -> None:
    """Raise if *value* is not a bool."""
    if not isinstance(value, bool):
        raise TypeError(f"{msg_prefix} must be a bool, got {value!r}")


class _BoolLookupType(enum.EnumType):
    """Allow TriState(value) lookups by bool or None only."""
    # 1 == True and 0 == False, the default lookup would accept ints
    # pylint: disable=keyword-arg-before-vararg
    def __call__(cls, value=None, *args, **kwargs):
        if not args and not kwargs and not (
                value is None or isinstance(value, (bool, cls))):
            raise TypeError(f"{cls.__name__}() argument must be a bool or None, got {value!r}")
        return super().__call__(value, *args, **kwargs)


class TriState(enum.Enum, metaclass=_BoolLookupType):
    """
    Three-valued boolean.

    UNDEFINED means "not set" or "use the default". It is never equal
    to TRUE or FALSE and it cannot be used where a bool is required.
    """
    TRUE = True
    FALSE = False
    UNDEFINED = None

    @classmethod
    def from_bool(cls, b: bool) -> TriState:
        """Return TRUE or FALSE."""
        _check_bool(b, "Argument")
        return cls.TRUE if b else cls.FALSE

    def to_bool(self, default: t.Any = _NO_DEFAULT) -> bool:
        """
        Return the bool equivalent of TRUE or FALSE.

        UNDEFINED has no bool equivalent. Raise an UndefinedValueError
        unless a *default* was supplied, in that case return the default.
        """
        if self is not TriState.UNDEFINED:
            return self.value
        if default is _NO_DEFAULT:
            raise UndefinedValueError(f"{self} has no bool equivalent")
        _check_bool(default, "Default")
        if get_debug_level() >= 1:
            _logger.debug("%s -> default %r", self, default)
        return default

    def to_optional(self) -> bool|None:
        """Return True, False or None for UNDEFINED."""
        return self.value

    def is_defined(self) -> bool:
        return self is not TriState.UNDEFINED

    def __bool__(self) -> bool:
        return self.to_bool()

    def __invert__(self) -> TriState:
        if self is TriState.UNDEFINED:
            return self
        return TriState.FALSE if self.value else TriState.TRUE

    def __and__(self, other: t.Any) -> TriState:
        if (other := _operand(other)) is None:
            return NotImplemented
        if TriState.FALSE in (self, other):
            return TriState.FALSE
        if TriState.UNDEFINED in (self, other):
            return TriState.UNDEFINED
        return TriState.TRUE

    def __or__(self, other: t.Any) -> TriState:
        if (other := _operand(other)) is None:
            return NotImplemented
        if TriState.TRUE in (self, other):
            return TriState.TRUE
        if TriState.UNDEFINED in (self, other):
            return TriState.UNDEFINED
        return TriState.FALSE

    def __xor__(self, other: t.Any) -> TriState:
        if (other := _operand(other)) is None:
            return NotImplemented
        if TriState.UNDEFINED in (self, other):
            return TriState.UNDEFINED
        return TriState.TRUE if self is not other else TriState.FALSE

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name}>"

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def _operand(other: t.Any) -> TriState|None:
    """Convert the other operand of a logic operation."""
    if isinstance(other, TriState):
        return other
    if isinstance(other, bool):
        return TriState.from_bool(other)
    return None


TRUE: t.Final = TriState.TRUE
FALSE: t.Final = TriState.FALSE
UNDEFINED: t.Final = TriState.UNDEFINED

from_bool = TriState.from_bool


def to_bool(ts: TriState, default: t.Any = _NO_DEFAULT) -> bool:
    """Convert *ts* to bool. See TriState.to_bool."""
    if not isinstance(ts, TriState):
        raise TypeError(f"Expected a TriState, got {ts!r}")
    return ts.to_bool(default)


def to_optional(ts: TriState) -> bool|None:
    """Convert *ts* to bool or None."""
    if not isinstance(ts, TriState):
        raise TypeError(f"Expected a TriState, got {ts!r}")
    return ts.to_optional()
