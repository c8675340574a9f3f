"""
Conversion of configuration values.

Example: a setting "auto" means UNDEFINED, i.e. inherit the default.
"""
from __future__ import annotations

__all__ = ['parse_tristate', 'resolve', 'resolve_chain']

import logging
import typing as t

from ..debug import get_debug_level
from ..tristate import TriState

_logger = logging.getLogger(__package__)

_WORDS = {
    TriState.TRUE: ('true', 'yes', 'on', '1', 't', 'y'),
    TriState.FALSE: ('false', 'no', 'off', '0', 'f', 'n'),
    TriState.UNDEFINED: ('undefined', 'default', 'auto', 'inherit', 'none', ''),
    }
_STR_TO_TRISTATE = {word: ts for ts, words in _WORDS.items() for word in words}


def parse_tristate(value: t.Any) -> TriState:
    """
    Convert *value* to a TriState.

    Accepted values are: a TriState, a bool, None for UNDEFINED
    and strings, see _WORDS. Strings are case-insensitive.
    """
    if isinstance(value, TriState):
        return value
    if value is None:
        return TriState.UNDEFINED
    if isinstance(value, bool):
        return TriState.from_bool(value)
    if not isinstance(value, str):
        raise TypeError(f"Invalid type for a tri-state value: {value!r}")
    try:
        ts = _STR_TO_TRISTATE[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Invalid tri-state value: '{value}'") from None
    if get_debug_level() >= 2:
        _logger.debug("Parsed %r -> %s", value, ts)
    return ts


def resolve(override: t.Any, default: bool) -> bool:
    """
    Return the *override* value, or the *default* if it is undefined.

    The *override* is parsed with parse_tristate().
    """
    if not isinstance(default, bool):
        raise TypeError(f"Default must be a bool, got {default!r}")
    return parse_tristate(override).to_bool(default)


def resolve_chain(*values: t.Any, default: bool) -> bool:
    """
    Return the first defined value, or the *default* if all are undefined.

    Typical usage: resolve_chain(local_setting, global_setting, default=False)
    """
    if not isinstance(default, bool):
        raise TypeError(f"Default must be a bool, got {default!r}")
    for value in values:
        if (ts := parse_tristate(value)).is_defined():
            return ts.to_bool()
    return TriState.UNDEFINED.to_bool(default)
