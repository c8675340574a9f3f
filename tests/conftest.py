"""
Pytest fixtures.
"""

import pytest

import tristate


@pytest.fixture(autouse=True)
def restore_debug_level():
    """Tests may change the global debug level."""
    level = tristate.get_debug_level()
    yield None
    tristate.set_debug_level(level)
