"""Shared fixtures for the Zen of Changes test suite."""

import io

import pytest
from rich.console import Console

from divination import Diviner, SequenceSource


@pytest.fixture
def console():
    """Plain, wide console writing to a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def console_text(console):
    """Everything printed to the console fixture so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def fixed_diviner():
    """Diviner that replays the given numbers."""
    def _make(*values):
        return Diviner(source=SequenceSource(values))
    return _make
