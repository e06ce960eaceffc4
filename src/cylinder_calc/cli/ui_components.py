"""Console components (Rich).

Everything written to the user's terminal goes through here or through
`input_reader`, so the command in `main.py` stays a list of steps.
"""

from __future__ import annotations

from rich.console import Console

from cylinder_calc.core.config import AppSettings
from cylinder_calc.core.interfaces.display import Displayable


def build_consoles(settings: AppSettings) -> tuple[Console, Console]:
    """Return the (stdout, stderr) consoles for a run."""

    return (
        Console(no_color=settings.no_color),
        Console(stderr=True, no_color=settings.no_color),
    )


def print_block(console: Console, item: Displayable) -> None:
    """Write `item.format()` verbatim.

    No markup, highlighting or wrapping: the block is the exact output format.
    """

    console.print(
        item.format(),
        end="",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
