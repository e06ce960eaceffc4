"""Interactive prompt loop for positive integers."""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.markup import escape

from cylinder_calc.core.domain.errors import InputValidationError
from cylinder_calc.core.logger import get_logger
from cylinder_calc.core.services.input_parser import parse_positive_int

log = get_logger(__name__)

_console = Console()
_err_console = Console(stderr=True)


def read_positive_int(
    prompt: str,
    *,
    console: Console | None = None,
    err_console: Console | None = None,
    read_line: Callable[[], str] = input,
) -> int:
    """Prompt until the user enters a strictly positive integer.

    Each rejected line gets one `Error: ...` message on `err_console`. There
    is no retry limit and no timeout; `EOFError` from `read_line` propagates.
    """

    if console is None:
        console = _console
    if err_console is None:
        err_console = _err_console

    while True:
        console.print(prompt, markup=False, highlight=False, soft_wrap=True)
        raw = read_line()
        try:
            value = parse_positive_int(raw)
        except InputValidationError as exc:
            log.debug("Rejected %r: %s", raw, type(exc).__name__)
            err_console.print(
                f"[red]Error:[/red] {escape(exc.message)}", highlight=False, soft_wrap=True
            )
            continue
        log.debug("Accepted %d for %r", value, prompt)
        return value
