"""Pytest fixtures for mdview tests."""

import pytest
from pathlib import Path

import httpx


@pytest.fixture
def sample_markdown() -> str:
    """Small document touching every block type except blank lines."""
    return (
        "# Title\n"
        "Some text.\n"
        "![image](url)\n"
        "| A | B |\n"
        "|---|---|\n"
        "| 1 | 2 |"
    )


@pytest.fixture
def styled_markdown() -> str:
    """Document whose heading and table cells carry emphasis markers."""
    return '''# *Italic Heading*

| Name | Status |
|------|--------|
| **Alice** | *Active* |
| ~~Bob~~ | **_Inactive_** |'''


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path


@pytest.fixture
def make_transport():
    """Build an httpx mock transport returning a fixed response."""

    def factory(status_code: int = 200, text: str = "", calls: list = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            return httpx.Response(status_code, text=text)

        return httpx.MockTransport(handler)

    return factory
