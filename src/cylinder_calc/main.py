"""Script entry point.

Used by the `cylinder-calc` console script and by `python -m cylinder_calc`.
"""

from __future__ import annotations

from cylinder_calc.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
