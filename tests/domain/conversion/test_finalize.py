from __future__ import annotations

import pytest

from dlcimport.domain.conversion import (
    AgentResolver,
    ConversionContext,
    ConversionError,
    DlcRow,
    RecordBuilder,
    UnresolvedParentError,
    emit,
    finalize,
)
from dlcimport.domain.model import UNRESOLVED, CollectionRecord, ItemRecord
from tests.support.conversion import (
    DictAgentLookup,
    RecordingSink,
    SequentialIdentifiers,
    item_row,
    set_row,
)


def _builder(identifiers: SequentialIdentifiers) -> RecordBuilder:
    context = ConversionContext()
    agents = AgentResolver(context=context, lookup=DictAgentLookup(), identifiers=identifiers)
    return RecordBuilder(context=context, identifiers=identifiers, agents=agents)


def test_finalize_links_items_and_counts_them(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)
    for line in (1, 2):
        builder.build_item(DlcRow.from_values(item_row(holdings_number=f"X/{line}")), line=line)
    collection = builder.build_collection(DlcRow.from_values(set_row(holdings_number="X")), line=3)

    resolved = finalize(builder.context)

    assert resolved is collection
    assert collection.extent.number == "2"
    items = [record for record in builder.context.records if isinstance(record, ItemRecord)]
    assert [item.resource_ref for item in items] == [collection.uri, collection.uri]
    assert all(not record.unresolved_fields() for record in builder.context.records)


def test_finalize_without_collection_fails(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)
    item = builder.build_item(DlcRow.from_values(item_row(holdings_number="X/1")), line=1)

    with pytest.raises(UnresolvedParentError):
        finalize(builder.context)

    assert item.resource_ref is UNRESOLVED


def test_finalize_runs_once(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)
    builder.build_collection(DlcRow.from_values(set_row(holdings_number="X")), line=1)
    finalize(builder.context)

    with pytest.raises(ConversionError, match="already been finalized"):
        finalize(builder.context)


def test_emit_reverses_accumulation_order(
    identifiers: SequentialIdentifiers,
    sink: RecordingSink,
) -> None:
    builder = _builder(identifiers)
    builder.build_item(DlcRow.from_values(item_row(holdings_number="X/1")), line=1)
    builder.build_collection(DlcRow.from_values(set_row(holdings_number="X")), line=2)
    finalize(builder.context)

    emitted = emit(builder.context, sink)

    assert emitted == 2
    assert sink.records == list(reversed(builder.context.records))
    assert isinstance(sink.records[0], CollectionRecord)


def test_emit_requires_finalization(
    identifiers: SequentialIdentifiers,
    sink: RecordingSink,
) -> None:
    builder = _builder(identifiers)
    builder.build_collection(DlcRow.from_values(set_row(holdings_number="X")), line=1)

    with pytest.raises(ConversionError, match="finalized before emission"):
        emit(builder.context, sink)

    assert sink.records == []


def test_emit_refuses_records_with_placeholders(
    identifiers: SequentialIdentifiers,
    sink: RecordingSink,
) -> None:
    builder = _builder(identifiers)
    builder.build_collection(DlcRow.from_values(set_row(holdings_number="X")), line=1)
    finalize(builder.context)
    late_item = builder.build_item(DlcRow.from_values(item_row(holdings_number="X/1")), line=2)

    with pytest.raises(ConversionError, match="resource_ref"):
        emit(builder.context, sink)

    assert late_item.resource_ref is UNRESOLVED
    assert sink.records == []
