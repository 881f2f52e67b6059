"""Fixed positional schema of the Generic DLC CSV export.

The export carries 42 columns and most of them are ignored, but every column is
still bound by position. A row with a different column count is rejected instead
of being zipped onto the wrong names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Final

from .errors import RowSchemaError

if TYPE_CHECKING:
    from collections.abc import Sequence


def clean_cell(value: str | None) -> str | None:
    """Strip a raw cell; empty cells become absent."""

    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def clean_cells(values: Sequence[str | None]) -> tuple[str | None, ...]:
    return tuple(clean_cell(value) for value in values)


def is_blank(values: Sequence[str | None]) -> bool:
    return all(clean_cell(value) is None for value in values)


@dataclass(frozen=True, slots=True, kw_only=True)
class DlcRow:
    """One parsed export line; absent cells are ``None``."""

    object_id: str | None = None  # item: digital object id + processinfo note
    file_name: str | None = None
    parent: str | None = None
    alias: str | None = None
    parent_object_id: str | None = None
    inherit_from_parent: str | None = None
    child_order: str | None = None
    bib_level: str | None = None  # Set -> collection, Item -> item
    collection: str | None = None
    form: str | None = None
    bib_id: str | None = None  # user_defined.integer_2
    title: str | None = None
    creator: str | None = None
    holdings_number: str | None = None  # id_0 / component_id
    extent: str | None = None  # container summary
    internal_access_conditions: str | None = None
    availability_to_public: str | None = None
    expiry_date: str | None = None
    constraint: str | None = None
    project_reveal_availability_to_public: str | None = None
    copyright_policy: str | None = None
    sensitive_material: str | None = None
    sensitive_reason: str | None = None
    internal_comments: str | None = None
    external_comments: str | None = None  # scopecontent note
    subunit_no: str | None = None
    subunit_type: str | None = None
    issue_date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    send_to_catalogue: str | None = None
    software: str | None = None
    device: str | None = None
    co_masters: str | None = None
    manipulation: str | None = None
    original: str | None = None
    access_only: str | None = None
    record_source: str | None = None
    digitisation_notes: str | None = None
    sheet_name: str | None = None
    sheet_creation_date: str | None = None
    additional_series_statement: str | None = None

    @classmethod
    def from_values(cls, values: Sequence[str | None], *, line: int | None = None) -> DlcRow:
        """Bind ``values`` to the column names, failing fast on a count mismatch."""

        if len(values) != len(COLUMNS):
            raise RowSchemaError(line=line, expected=len(COLUMNS), actual=len(values))
        return cls(**dict(zip(COLUMNS, clean_cells(values), strict=True)))


COLUMNS: Final[tuple[str, ...]] = tuple(column.name for column in fields(DlcRow))
