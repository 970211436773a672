"""Test setup for md2toc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def sample_markdown() -> str:
    """Title, intro paragraph, nested sections and a trailing list."""
    return (
        "# Title\n"
        "\n"
        "Some intro text.\n"
        "\n"
        "## First section\n"
        "\n"
        "### Sub section\n"
        "\n"
        "## References\n"
        "\n"
        "- one\n"
        "- two\n"
    )


@pytest.fixture
def testdata_dir() -> Path:
    return TESTDATA
