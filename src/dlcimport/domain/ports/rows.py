"""Port for the tabular input stream."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class RowSource(Protocol):
    """Yield raw rows in file order, one call at a time."""

    def next_row(self) -> Sequence[str | None] | None:
        """Return the next row's cell values, or ``None`` at end of stream."""
        ...
