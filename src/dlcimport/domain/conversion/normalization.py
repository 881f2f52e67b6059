"""Pure clean-up helpers for the messy text fields of the export.

Every helper is best effort: when the junk it knows how to remove is not there,
the input comes back (trimmed) rather than raising.
"""

from __future__ import annotations

import re
from typing import Final

from dlcimport.domain.model import DateRange, DateType

_DMY_DATE: Final[re.Pattern[str]] = re.compile(r"(\d\d)/(\d\d)/(\d\d\d\d)")
_ISO_DATE: Final[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}")

# e.g. "Henningham, Leigh, 1960- photographer. 900747 4edef81f-a657-5334-b6ea-656183c3f08d"
_UUID_SUFFIX: Final[re.Pattern[str]] = re.compile(
    r"\s+[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}(?![0-9a-fA-F])"
)
_SIX_DIGIT_SUFFIX: Final[re.Pattern[str]] = re.compile(r"\s+\d{6}(?!\d)")

DATE_LABEL: Final[str] = "creation"


def clean_identifier(raw: str) -> str:
    """Drop everything from the first ``#`` on and trim the rest.

    A value that starts with ``#`` cleans to ``""``. The record builder does not
    accept an empty identifier: it keeps the trimmed raw value instead and
    records a malformed-field warning.
    """

    head, _sep, _junk = raw.partition("#")
    return head.strip()


def reformat_date(value: str) -> str:
    """Rewrite a ``DD/MM/YYYY`` date to ``YYYY-MM-DD``; leave anything else alone."""

    return _DMY_DATE.sub(r"\3-\2-\1", value, count=1)


def is_recognised_date(value: str) -> bool:
    return bool(_DMY_DATE.search(value) or _ISO_DATE.search(value))


def format_date_range(start: str | None, end: str | None) -> DateRange | None:
    """Build the creation date descriptor, or ``None`` without a start date."""

    if start is None:
        return None

    begin = reformat_date(start)
    finish = reformat_date(end) if end is not None else None
    expression = f"{begin}-{finish}" if finish is not None else begin
    return DateRange(
        date_type=DateType.SINGLE if finish is None else DateType.INCLUSIVE,
        label=DATE_LABEL,
        begin=begin,
        end=finish,
        expression=expression,
    )


def clean_agent_name(raw: str) -> str:
    """Strip the trailing UUID and six digit id the export appends to creators."""

    name = _UUID_SUFFIX.sub("", raw, count=1)
    name = _SIX_DIGIT_SUFFIX.sub("", name, count=1)
    return name.strip()
