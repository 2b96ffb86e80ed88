"""
Shared pytest fixtures for parbreak tests

Text is turned into items one character at a time: every character is a
unit-width box, whitespace after the first character is unit-width glue
that may stretch by one unit, and the paragraph ends in a forced break.
"""
import pytest
from pathlib import Path
import sys

# Development mode: make the repository root importable without installing
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from parbreak.items import Box, Glue, Penalty  # noqa: E402


GOLDEN_TEXT = (
    "  Far out in the uncharted backwaters of the unfashionable end of the western "
    "spiral arm of the Galaxy lies a small unregarded yellow sun. Orbiting this at a "
    "distance of roughly ninety-two million miles is an utterly insignificant little "
    "blue-green planet whose ape-descended life forms are so amazingly primitive that "
    "they still think digital watches are a pretty neat idea."
)


def tokenize(text):
    """Boxes per character, glue at whitespace, terminal forced break"""
    items = []
    for c in text:
        if c.isspace() and items:
            items.append(Glue(width=1.0, stretch=1.0, shrink=0.0))
        else:
            items.append(Box(width=1.0))
    items.append(Penalty.forced(flagged=True))
    return items


def render(text, breakpoints):
    """Slice text at break positions; the break character itself is dropped"""
    lines = []
    start = 0
    for bp in breakpoints:
        end = min(bp.break_at, len(text))
        lines.append(text[start:end])
        start = end + 1
    return lines


@pytest.fixture(scope="session")
def golden_text() -> str:
    """Reference paragraph"""
    return GOLDEN_TEXT


@pytest.fixture(scope="session")
def golden_items():
    """Reference paragraph as items"""
    return tokenize(GOLDEN_TEXT)


@pytest.fixture(scope="session")
def tokenizer():
    return tokenize


@pytest.fixture(scope="session")
def renderer():
    return render


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests laying out whole paragraphs"
    )
