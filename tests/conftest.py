"""Test setup for heading_outline."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def article_html() -> str:
    """A rendered article with nested, duplicated and decorated headings."""
    return """
        <article>
            <h1 id="guide">Getting Started</h1>
            <p>Intro paragraph.</p>
            <h2>Install</h2>
            <h3>From <code>pip</code></h3>
            <h3>From source</h3>
            <h2>Usage</h2>
            <h3>Overview</h3>
            <h2>FAQ</h2>
            <h3>Overview</h3>
            <h2></h2>
        </article>
    """
