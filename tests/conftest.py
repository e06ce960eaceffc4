from __future__ import annotations

import io

import pytest
from rich.console import Console


def _capture_console(*, stderr: bool = False) -> Console:
    return Console(file=io.StringIO(), stderr=stderr, color_system=None, width=120)


@pytest.fixture
def console() -> Console:
    return _capture_console()


@pytest.fixture
def err_console() -> Console:
    return _capture_console(stderr=True)


def lines_from(*lines: str):
    """Return a `read_line` callable that replays `lines`, then raises EOFError."""

    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def scripted_input():
    return lines_from
