"""Tests for the package's public surface."""

import subprocess
import sys

import bigdecimal


def test_exports():
    for name in bigdecimal.__all__:
        assert getattr(bigdecimal, name) is not None


def test_version():
    assert bigdecimal.__version__ == "0.1.0"


def test_module_entry_point():
    """python -m bigdecimal runs the command line tool."""
    result = subprocess.run(
        [sys.executable, "-m", "bigdecimal", "mul", "0.1", "3"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout == "0.3\n"
