"""
Microsoft Office compatible MsoTriState.

Office uses -1 for true and has three additional values,
none of them is supported by the conversions.
- - - - - -
Part of the tristate package.
"""
from __future__ import annotations

__all__ = ['MsoTriState']

import enum

from .errors import UnsupportedValueError
from .tristate import TriState


class _MsoLookupType(enum.EnumType):
    """Look up a bool with MsoTriState.from_bool."""
    # True == 1 would select msoCTrue
    def __call__(cls, value, *args, **kwargs):
        if not args and not kwargs and isinstance(value, bool):
            return cls.from_bool(value)
        return super().__call__(value, *args, **kwargs)


# pylint: disable=invalid-name
class MsoTriState(enum.IntEnum, metaclass=_MsoLookupType):
    """Specifies a tri-state Boolean value."""
    msoCTrue = 1                # not supported
    msoFalse = 0
    msoTriStateMixed = -2       # not supported
    msoTriStateToggle = -3      # not supported
    msoTrue = -1

    @classmethod
    def from_bool(cls, b: bool) -> MsoTriState:
        if not isinstance(b, bool):
            raise TypeError(f"Argument must be a bool, got {b!r}")
        return cls.msoTrue if b else cls.msoFalse

    def to_bool(self) -> bool:
        if self is MsoTriState.msoTrue:
            return True
        if self is MsoTriState.msoFalse:
            return False
        raise UnsupportedValueError(f"{self}: Not supported.")

    @classmethod
    def from_tristate(cls, ts: TriState) -> MsoTriState:
        """Convert a TriState, UNDEFINED becomes msoTriStateMixed."""
        if not isinstance(ts, TriState):
            raise TypeError(f"Expected a TriState, got {ts!r}")
        if ts is TriState.UNDEFINED:
            return cls.msoTriStateMixed
        return cls.from_bool(ts.value)

    def to_tristate(self) -> TriState:
        """
        Convert to a TriState.

        msoTriStateMixed becomes UNDEFINED. There is no TriState
        counterpart to msoCTrue and msoTriStateToggle.
        """
        if self is MsoTriState.msoTriStateMixed:
            return TriState.UNDEFINED
        if self not in (MsoTriState.msoTrue, MsoTriState.msoFalse):
            raise UnsupportedValueError(f"{self}: No TriState equivalent.")
        return TriState.from_bool(self.to_bool())

    def __bool__(self) -> bool:
        return self.to_bool()

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)
