"""Test configuration for errchain."""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from errchain import create_error, make_annotation, wrap_error


@pytest.fixture
def base_error():
    """Leaf error with a shared key."""
    return create_error(
        "b",
        make_annotation("x", 1),
        make_annotation("c", "b"),
    )


@pytest.fixture
def mid_error(base_error):
    """Wrapper around base_error."""
    return wrap_error(
        base_error,
        "m",
        make_annotation("y", 2),
        make_annotation("c", "m"),
    )


@pytest.fixture
def top_error(mid_error):
    """Outermost error of the three-level sample chain."""
    return wrap_error(
        mid_error,
        "t",
        make_annotation("z", 3),
        make_annotation("c", "t"),
    )
