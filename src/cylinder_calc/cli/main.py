"""CLI (Typer).

One command, no options: prompt for radius and height, then print the
cylinder block followed by the circle block.
"""

from __future__ import annotations

from typing import Callable

import typer
from pydantic import ValidationError
from rich.console import Console

from cylinder_calc.cli.input_reader import read_positive_int
from cylinder_calc.cli.ui_components import build_consoles, print_block
from cylinder_calc.core.config import AppSettings
from cylinder_calc.core.logger import setup_logger
from cylinder_calc.core.services.calculation_pipeline import (
    CalculationResult,
    calculate,
    collect_dimensions,
)

app = typer.Typer(
    add_completion=False,
    help="Prompt for the radius and height of a cylinder and print its properties.",
)


def run_calculation(
    *,
    console: Console,
    err_console: Console,
    read_line: Callable[[], str] = input,
) -> CalculationResult:
    """Prompt, compute and print, in that order."""

    def read(prompt: str) -> int:
        return read_positive_int(
            prompt,
            console=console,
            err_console=err_console,
            read_line=read_line,
        )

    dimensions = collect_dimensions(read)
    result = calculate(dimensions)
    print_block(console, result.cylinder)
    print_block(console, result.circle)
    return result


@app.command(name="calculate")
def calculate_command() -> None:
    """Ask for radius and height, then print cylinder and circle properties."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid CYLINDER_CALC_* environment: {exc}") from exc

    setup_logger(level=settings.logging_level)
    console, err_console = build_consoles(settings)
    run_calculation(console=console, err_console=err_console)


def run() -> None:
    app()
