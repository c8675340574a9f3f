"""
A three-valued boolean: true, false or undefined.

The tristate package provides:
 - the TriState enumeration with conversions to and from bool
 - the Office compatible MsoTriState enumeration
 - helpers for tri-state configuration values in the .utils subpackage

UNDEFINED never silently becomes True or False. The conversion
raises unless the caller supplies an explicit default.

Copyright (c) 2026 The tristate authors.

Released under the MIT License.
"""

__version_info__ = (26, 10, 19)
__version__ = '.'.join(str(n) for n in __version_info__)

from . import debug, errors, mso, tristate, utils

from .debug import *
from .errors import *
from .mso import *
from .tristate import *
# .utils not star-imported

__all__ = [
    '__version__', '__version_info__',
    *debug.__all__,
    *errors.__all__,
    *mso.__all__,
    *tristate.__all__,
    ]
