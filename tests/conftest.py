"""Test setup for markdown_extract."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_markdown() -> str:
    """A small document with nested headings and a fenced block."""
    return (
        "# Intro\n"
        "Welcome.\n"
        "## Install\n"
        "pip install thing\n"
        "```bash\n"
        "# Install from source\n"
        "make install\n"
        "```\n"
        "## Usage\n"
        "Run it.\n"
        "# Install notes\n"
        "Later.\n"
    )
