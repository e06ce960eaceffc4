"""Display contract.

Protocol instead of a base class: `Circle` and `Cylinder` are pydantic models
and satisfy it structurally, so the CLI can print either one without knowing
which it got.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Displayable(Protocol):
    """Anything that renders itself as a labelled text block."""

    def format(self) -> str:
        """Return the block, newline-terminated, ready to be written as-is."""

        ...
