"""
Debug level.

0 = disabled, 1 = log default substitutions, 2 = also log parsed values.
The initial level is taken from the environment variable TRISTATE_DEBUG.
- - - - - -
Part of the tristate package.
"""
from __future__ import annotations

__all__ = ['get_debug_level', 'set_debug_level']

import logging
import os

_logger = logging.getLogger(__package__)
_debug_handler: logging.StreamHandler|None = None

_ENVVAR = 'TRISTATE_DEBUG'
_ENV_LEVELS = {'': 0, '0': 0, '1': 1, '2': 2}
_MAX_LEVEL = max(_ENV_LEVELS.values())


def _level_from_env() -> int:
    value = os.environ.get(_ENVVAR, '').strip()
    try:
        return _ENV_LEVELS[value]
    except KeyError:
        pass
    _logger.warning(
        "Envvar '%s' should be: 0 (disabled), 1 (normal) or 2 (verbose)", _ENVVAR)
    _logger.warning("Ignoring %s='%s'. Please use a correct value.", _ENVVAR, value)
    return 0


def _configure_logger(level: int) -> None:
    """Attach or detach our own handler, unless logging is configured by the application."""
    global _debug_handler       # pylint: disable=global-statement

    if level == 0:
        if _debug_handler is not None:
            _logger.removeHandler(_debug_handler)
            _debug_handler = None
        _logger.setLevel(logging.WARNING)
        return
    if _debug_handler is None and not _logger.hasHandlers():
        _debug_handler = logging.StreamHandler()
        _debug_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
        _logger.addHandler(_debug_handler)
    _logger.setLevel(logging.DEBUG)


class _DebugLevel:
    """Global debug level."""

    def __init__(self) -> None:
        self._level = -1    # not set yet
        self.set_level(_level_from_env())

    def get_level(self) -> int:
        return self._level

    def set_level(self, level: int) -> None:
        """Set debug level."""
        # bool is an int subclass, but True/False are not levels
        if not isinstance(level, int) or isinstance(level, bool):
            raise TypeError(f"Expected an integer, got {level!r}")
        if not 0 <= level <= _MAX_LEVEL:
            raise ValueError(
                f"Debug level must be an integer 0 to {_MAX_LEVEL}, but got {level}")
        if level == self._level:
            return
        previous, self._level = self._level, level
        _configure_logger(level)
        if previous >= 0:
            _logger.debug("Debug level: %d -> %d", previous, level)
        elif level > 0:
            _logger.debug("Debug level: %d", level)


_global_debug_level = _DebugLevel()

get_debug_level = _global_debug_level.get_level
set_debug_level = _global_debug_level.set_level
