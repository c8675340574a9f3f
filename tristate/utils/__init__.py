"""
Helpers for configuration values.
"""

from . import data_utils

from .data_utils import *

__all__ = data_utils.__all__
