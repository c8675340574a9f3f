"""
Exceptions.
- - - - - -
Part of the tristate package.
"""
from __future__ import annotations

__all__ = ['TriStateError', 'UndefinedValueError', 'UnsupportedValueError']


class TriStateError(ValueError):
    """Base class of tristate exceptions."""


class UndefinedValueError(TriStateError):
    """An undefined value has no boolean equivalent."""


class UnsupportedValueError(TriStateError):
    """Not supported."""
