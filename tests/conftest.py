"""Test configuration and fixtures for gridroute."""
import logging
import sys
from pathlib import Path

import pytest

# Make the root-level main.py importable when running from a source checkout
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from gridroute.algorithms import CharGrid, demo_grid


@pytest.fixture
def demo_map():
    """Fresh copy of the 12x12 demonstration map."""
    return demo_grid()


@pytest.fixture
def open_map():
    """Small wall-bordered room with no interior obstacles."""
    return CharGrid.from_text("""
WWWWWWW
WS    W
W     W
W    EW
WWWWWWW
""")


@pytest.fixture
def sealed_map():
    """Start and goal separated by a solid wall."""
    return CharGrid.from_text("""
WWWWWWW
WS W  W
W  W  W
W  W EW
WWWWWWW
""")


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
