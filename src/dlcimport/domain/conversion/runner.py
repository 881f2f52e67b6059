"""Entry point for running one conversion over a row stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dlcimport.domain.model import RowKind
from dlcimport.domain.ports import NullAgentLookup

from .agents import AgentResolver
from .builder import RecordBuilder
from .classify import classify_row
from .context import ConversionContext
from .finalize import emit, finalize
from .schema import DlcRow, is_blank

if TYPE_CHECKING:
    from dlcimport.domain.ports import AgentLookup, IdentifierGenerator, RecordSink, RowSource

    from .errors import MalformedRowWarning

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Summary of a successful run."""

    collection_uri: str
    collection_id: str | None
    item_count: int
    agents_created: int
    agents_matched: int
    digital_objects: int
    records_emitted: int
    rows_read: int
    rows_skipped: int
    warnings: tuple[MalformedRowWarning, ...] = ()


def run_conversion(
    source: RowSource,
    *,
    sink: RecordSink,
    identifiers: IdentifierGenerator,
    agent_lookup: AgentLookup | None = None,
    language: str = "eng",
    script: str = "Latn",
) -> ConversionResult:
    """Convert every row of ``source`` and emit the finished records to ``sink``.

    The run is all-or-nothing: structural errors propagate before anything has
    been handed to the sink.
    """

    context = ConversionContext()
    agents = AgentResolver(
        context=context,
        lookup=agent_lookup or NullAgentLookup(),
        identifiers=identifiers,
    )
    builder = RecordBuilder(
        context=context,
        identifiers=identifiers,
        agents=agents,
        language=language,
        script=script,
    )

    consume_rows(source, builder)
    collection = finalize(context)
    emitted = emit(context, sink)

    counters = context.counters
    log.info(
        "Converted %s: items=%s, agents_created=%s, agents_matched=%s, "
        "digital_objects=%s, warnings=%s",
        collection.id_0,
        context.item_count,
        counters.agents_created,
        counters.agents_matched,
        counters.digital_objects,
        len(context.warnings),
    )
    return ConversionResult(
        collection_uri=collection.uri,
        collection_id=collection.id_0,
        item_count=context.item_count,
        agents_created=counters.agents_created,
        agents_matched=counters.agents_matched,
        digital_objects=counters.digital_objects,
        records_emitted=emitted,
        rows_read=counters.rows_read,
        rows_skipped=counters.rows_skipped,
        warnings=tuple(context.warnings),
    )


def consume_rows(source: RowSource, builder: RecordBuilder) -> None:
    """Classify and build every row until the source is exhausted."""

    counters = builder.context.counters
    line = 0
    while (values := source.next_row()) is not None:
        line += 1
        counters.rows_read += 1
        if is_blank(values):
            counters.rows_skipped += 1
            continue

        row = DlcRow.from_values(values, line=line)
        kind = classify_row(row)
        if kind is RowKind.COLLECTION_HEADER:
            builder.build_collection(row, line=line)
        elif kind is RowKind.ITEM:
            builder.build_item(row, line=line)
        else:
            log.debug("Skipping row %s with bib_level=%r", line, row.bib_level)
            counters.rows_skipped += 1
