"""Test fixtures and utilities"""

from pathlib import Path
from typing import Any, Callable, Mapping

import pytest
import yaml

from .utilities import Mat2


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def write_display_config(tmp_path) -> Callable[[Any], Path]:
    """Provide a function which writes the given data as YAML to a display configuration file."""
    def write(data: Any) -> Path:
        fp = tmp_path / "display.yaml"
        with open(fp, "w") as fh:
            yaml.safe_dump(data, fh)
        return fp
    return write


@pytest.fixture
def noncommuting_pair() -> tuple[Mat2, Mat2]:
    """Two matrices P and Q for which P * Q != Q * P"""
    p = Mat2(1, 1, 0, 1)
    q = Mat2(1, 0, 1, 1)
    assert p * q != q * p
    return p, q


#################################################################
# Other helpers
#################################################################
def vector_operands(a: Mapping[str, str], b: Mapping[str, str]) -> list[str]:
    """Build the command-line arguments for the calculator's two vectors."""
    return [arg for name, m in (("a", a), ("b", b)) for axis, value in m.items() for arg in (f"--{name}-{axis}", value)]
