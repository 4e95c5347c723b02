"""Pytest configuration and shared sample inputs."""

import pytest


RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


@pytest.fixture
def fruit_text() -> str:
    """Ten plain items, one per line."""
    return "apple\nbanana\ncherry\ndate\nfig\ngrape\nhoneydew\nkiwi\nlemon\nmango"


@pytest.fixture
def colored_items() -> list[str]:
    """Items wrapped in color codes."""
    return [
        f"{RED}red{RESET}",
        f"{GREEN}green{RESET}",
        f"\x1b[33myellow{RESET}",
        f"\x1b[34mblue{RESET}",
    ]


@pytest.fixture
def wide_text() -> str:
    """Mixed ASCII, CJK and emoji lines."""
    return "hello\n世界\nこんにちは\n🌟\nemoji\n文字"


@pytest.fixture
def people_tsv() -> str:
    return "Name\tAge\tCity\nJohn\t25\tNew York\nAlice\t30\tLondon"


@pytest.fixture(autouse=True)
def clean_width_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's terminal settings out of width detection."""
    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.delenv("TERM_WIDTH", raising=False)
