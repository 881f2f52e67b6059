"""Row-to-record conversion engine for Generic DLC exports.

A run has two phases. ``consume_rows`` classifies each row and builds
provisional records with placeholder relationship fields; ``finalize`` then
resolves the placeholders once the single collection and the item count are
known, and ``emit`` hands the records to a sink in reverse accumulation order.
"""

from __future__ import annotations

from .agents import AgentResolver
from .builder import RecordBuilder, assemble_notes
from .classify import LEVEL_KINDS, classify_level, classify_row
from .context import ConversionContext, RunCounters
from .errors import (
    ConversionError,
    MalformedRowWarning,
    RowSchemaError,
    StructuralError,
    UnresolvedParentError,
)
from .finalize import emit, finalize
from .normalization import (
    clean_agent_name,
    clean_identifier,
    format_date_range,
    reformat_date,
)
from .runner import ConversionResult, consume_rows, run_conversion
from .schema import COLUMNS, DlcRow

__all__ = [
    "COLUMNS",
    "LEVEL_KINDS",
    "AgentResolver",
    "ConversionContext",
    "ConversionError",
    "ConversionResult",
    "DlcRow",
    "MalformedRowWarning",
    "RecordBuilder",
    "RowSchemaError",
    "RunCounters",
    "StructuralError",
    "UnresolvedParentError",
    "assemble_notes",
    "classify_level",
    "classify_row",
    "clean_agent_name",
    "clean_identifier",
    "consume_rows",
    "emit",
    "finalize",
    "format_date_range",
    "reformat_date",
    "run_conversion",
]
