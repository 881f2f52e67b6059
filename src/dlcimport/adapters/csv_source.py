"""CSV-backed row source."""

from __future__ import annotations

import csv
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path


class CsvRowSource:
    """Buffered row source over already-tokenized CSV rows."""

    def __init__(self, rows: Iterable[Sequence[str | None]]) -> None:
        self._rows: deque[Sequence[str | None]] = deque(rows)

    def next_row(self) -> Sequence[str | None] | None:
        if not self._rows:
            return None
        return self._rows.popleft()

    def __len__(self) -> int:
        return len(self._rows)

    @classmethod
    def from_path(cls, path: Path, *, encoding: str = "utf-8-sig") -> CsvRowSource:
        """Read the whole export; the conversion needs every row before it can finish."""

        with path.open(newline="", encoding=encoding) as handle:
            return cls(list(csv.reader(handle)))
