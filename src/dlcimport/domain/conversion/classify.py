"""Row classification by bibliographic level."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from dlcimport.domain.model import RowKind

if TYPE_CHECKING:
    from .schema import DlcRow

LEVEL_KINDS: Final[dict[str, RowKind]] = {
    "Set": RowKind.COLLECTION_HEADER,
    "Item": RowKind.ITEM,
}


def classify_level(bib_level: str | None) -> RowKind:
    if bib_level is None:
        return RowKind.NOISE
    return LEVEL_KINDS.get(bib_level, RowKind.NOISE)


def classify_row(row: DlcRow) -> RowKind:
    """Map a row to its kind; instruction rows and unknown levels are noise."""

    return classify_level(row.bib_level)
