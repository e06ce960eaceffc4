"""
Tests for the interactive read_positive_int loop.
"""

from __future__ import annotations

import pytest

from cylinder_calc.cli.input_reader import read_positive_int

PROMPT = "Provide the radius of the cylinder:"
MALFORMED = "Error: Invalid input. Please enter a valid integer."
NON_POSITIVE = "Error: Value must be positive. Please try again."


def test_returns_first_valid_value(console, err_console, scripted_input) -> None:
    value = read_positive_int(PROMPT, console=console, err_console=err_console, read_line=scripted_input("8"))
    assert value == 8
    assert console.file.getvalue() == PROMPT + "\n"
    assert err_console.file.getvalue() == ""


def test_rejects_until_positive_integer(console, err_console, scripted_input) -> None:
    """["abc", "-5", "0", "3"] -> three rejections, then 3."""
    value = read_positive_int(
        PROMPT,
        console=console,
        err_console=err_console,
        read_line=scripted_input("abc", "-5", "0", "3"),
    )

    assert value == 3
    assert console.file.getvalue().splitlines() == [PROMPT] * 4
    assert err_console.file.getvalue().splitlines() == [MALFORMED, NON_POSITIVE, NON_POSITIVE]


def test_leaves_remaining_lines_unread(console, err_console, scripted_input) -> None:
    read_line = scripted_input("x", "2", "9")
    assert read_positive_int(PROMPT, console=console, err_console=err_console, read_line=read_line) == 2
    assert read_line() == "9"


def test_end_of_input_propagates(console, err_console, scripted_input) -> None:
    with pytest.raises(EOFError):
        read_positive_int(PROMPT, console=console, err_console=err_console, read_line=scripted_input("nope"))
    assert err_console.file.getvalue().splitlines() == [MALFORMED]
