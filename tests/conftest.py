"""
Pytest configuration and shared fixtures for ExtString tests.
"""

import io
from dataclasses import dataclass

import pytest

from extstring.cli import main


# Base letter plus combining accent, flag emoji, Devanagari conjunct, ZWJ family
COMBINING_SAMPLES = [
    "cafe\u0301",
    "n\u0303o\u0308",
    "\U0001F1EF\U0001F1F5",
    "\u0915\u094d\u0937",
    "\U0001F468\u200d\U0001F469\u200d\U0001F467",
]

MIXED_SCRIPT_SAMPLES = [
    "",
    "a",
    "123456789",
    "汉字漢字",
    "גבאabc1汉字漢字",
    "Привет, мир",
]


@pytest.fixture(params=COMBINING_SAMPLES + MIXED_SCRIPT_SAMPLES)
def sample_text(request) -> str:
    """Texts mixing scripts and multi-scalar grapheme clusters."""
    return request.param


@dataclass
class CliResult:
    """Outcome of one CLI invocation."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def lines(self) -> list[str]:
        return self.stdout.splitlines()


@pytest.fixture
def run_cli(capsys, monkeypatch):
    """Fixture to run the CLI in-process and capture its output."""

    def _run(*argv: str, stdin: str | None = None) -> CliResult:
        if stdin is not None:
            monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        exit_code = main(list(argv))
        captured = capsys.readouterr()
        return CliResult(exit_code, captured.out, captured.err)

    return _run
