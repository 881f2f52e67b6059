from __future__ import annotations

import pytest

from dlcimport.domain.conversion import (
    AgentResolver,
    ConversionContext,
    DlcRow,
    RecordBuilder,
    StructuralError,
    assemble_notes,
    clean_identifier,
)
from dlcimport.domain.model import (
    UNRESOLVED,
    AgentRecord,
    CollectionRecord,
    DigitalObjectRecord,
    ExtentPortion,
    ItemRecord,
    Level,
    NoteType,
    RecordType,
)
from tests.support.conversion import (
    DictAgentLookup,
    SequentialIdentifiers,
    item_row,
    set_row,
)


def _builder(
    identifiers: SequentialIdentifiers,
    lookup: DictAgentLookup | None = None,
) -> RecordBuilder:
    context = ConversionContext()
    agents = AgentResolver(
        context=context,
        lookup=lookup or DictAgentLookup(),
        identifiers=identifiers,
    )
    return RecordBuilder(context=context, identifiers=identifiers, agents=agents)


def test_build_collection_uses_placeholder_extent_number(
    identifiers: SequentialIdentifiers,
) -> None:
    builder = _builder(identifiers)
    row = DlcRow.from_values(
        set_row(
            holdings_number="PIC/21291",
            title="Photos",
            extent="13 photographs",
            bib_id="555",
            start_date="01/01/1950",
            end_date="31/12/1960",
        )
    )

    collection = builder.build_collection(row, line=1)

    assert isinstance(collection, CollectionRecord)
    assert collection.uri == "resource/1"
    assert collection.id_0 == "PIC/21291"
    assert collection.title == "Photos"
    assert collection.level is Level.COLLECTION
    assert collection.extent.portion is ExtentPortion.WHOLE
    assert collection.extent.container_summary == "13 photographs"
    assert collection.extent.number is UNRESOLVED
    assert collection.user_defined is not None
    assert collection.user_defined.integer_2 == "555"
    assert [date.expression for date in collection.dates] == ["1950-01-01-1960-12-31"]
    assert collection.language == "eng"
    assert collection.script == "Latn"
    assert builder.context.collection is collection
    assert collection.unresolved_fields() == ("extent.number",)


def test_second_collection_header_is_a_structural_error(
    identifiers: SequentialIdentifiers,
) -> None:
    builder = _builder(identifiers)
    builder.build_collection(DlcRow.from_values(set_row(holdings_number="A")), line=1)

    with pytest.raises(StructuralError, match="second collection-header"):
        builder.build_collection(DlcRow.from_values(set_row(holdings_number="B")), line=2)


def test_build_item_with_digital_object(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)
    row = DlcRow.from_values(
        item_row(
            object_id="nla.obj-123",
            holdings_number="PIC/21291/1-13",
            title="Portrait",
            extent="1 photograph",
            creator="Doe, Jane 900747 4edef81f-a657-5334-b6ea-656183c3f08d",
            external_comments="Studio portrait",
            start_date="05/03/1990",
        )
    )

    item = builder.build_item(row, line=3)

    agent, digital_object, built = builder.context.records
    assert built is item
    assert isinstance(agent, AgentRecord)
    assert agent.primary_name == "Doe, Jane"
    assert isinstance(digital_object, DigitalObjectRecord)
    assert digital_object.digital_object_id == "nla.obj-123"
    assert digital_object.title == "Portrait"
    assert [link.ref for link in digital_object.linked_agents] == [agent.uri]

    assert isinstance(item, ItemRecord)
    assert item.component_id == "PIC/21291/1-13"
    assert item.level is Level.ITEM
    assert item.extent.portion is ExtentPortion.PART
    assert item.extent.number == "1"
    assert item.resource_ref is UNRESOLVED
    assert [instance.digital_object_ref for instance in item.instances] == [digital_object.uri]
    assert [link.ref for link in item.linked_agents] == [agent.uri]
    assert [note.note_type for note in item.notes] == [
        NoteType.SCOPE_CONTENT,
        NoteType.PROCESS_INFO,
    ]
    assert builder.context.item_count == 1
    assert builder.context.counters.digital_objects == 1


def test_build_item_without_object_or_creator(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)

    item = builder.build_item(
        DlcRow.from_values(item_row(holdings_number="X/1", title="Loose")),
        line=1,
    )

    assert builder.context.records == [item]
    assert item.instances == []
    assert item.linked_agents == []
    assert item.notes == []
    assert item.dates == []


def test_notes_keep_fixed_order_and_skip_absent_fields() -> None:
    both = DlcRow.from_values(item_row(external_comments="Scope", object_id="obj-1"))
    only_object = DlcRow.from_values(item_row(object_id="obj-1"))

    assert [(note.note_type, note.content) for note in assemble_notes(both)] == [
        (NoteType.SCOPE_CONTENT, "Scope"),
        (NoteType.PROCESS_INFO, "obj-1"),
    ]
    assert [note.note_type for note in assemble_notes(only_object)] == [NoteType.PROCESS_INFO]
    assert assemble_notes(DlcRow.from_values(item_row())) == []


def test_same_creator_resolves_to_one_agent(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)
    creator_a = "Doe, Jane 900747 4edef81f-a657-5334-b6ea-656183c3f08d"
    creator_b = "Doe, Jane 123456"

    first = builder.build_item(DlcRow.from_values(item_row(creator=creator_a)), line=1)
    second = builder.build_item(DlcRow.from_values(item_row(creator=creator_b)), line=2)

    agents = builder.context.records_of(RecordType.AGENT_PERSON)
    assert len(agents) == 1
    assert first.linked_agents == second.linked_agents
    assert first.linked_agents[0].ref == agents[0].uri
    assert builder.context.agent_cache == {"Doe, Jane": agents[0].uri}


def test_external_lookup_match_creates_no_agent(identifiers: SequentialIdentifiers) -> None:
    lookup = DictAgentLookup({"Doe, Jane": "/agents/people/42"})
    builder = _builder(identifiers, lookup)

    for line in (1, 2):
        builder.build_item(DlcRow.from_values(item_row(creator="Doe, Jane 900747")), line=line)

    assert builder.context.records_of(RecordType.AGENT_PERSON) == []
    assert lookup.calls == ["Doe, Jane"]
    assert builder.context.counters.agents_matched == 1
    assert all(
        record.linked_agents[0].ref == "/agents/people/42"
        for record in builder.context.records_of(RecordType.ARCHIVAL_OBJECT)
        if isinstance(record, ItemRecord)
    )


def test_collection_creator_shares_agent_with_items(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)

    item = builder.build_item(DlcRow.from_values(item_row(creator="Doe, Jane")), line=1)
    collection = builder.build_collection(
        DlcRow.from_values(set_row(creator="Doe, Jane 900747")),
        line=2,
    )

    assert collection.linked_agents == item.linked_agents
    assert len(builder.context.records_of(RecordType.AGENT_PERSON)) == 1


def test_missing_holdings_number_is_a_warning(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)

    item = builder.build_item(DlcRow.from_values(item_row(title="No id")), line=4)

    assert item.component_id is None
    [warning] = builder.context.warnings
    assert warning.line == 4
    assert warning.field == "holdings_number"


def test_identifier_that_cleans_to_nothing_falls_back_to_raw(
    identifiers: SequentialIdentifiers,
) -> None:
    builder = _builder(identifiers)

    item = builder.build_item(DlcRow.from_values(item_row(holdings_number=" #PIC/1 ")), line=2)

    assert clean_identifier("#PIC/1") == ""
    assert item.component_id == "#PIC/1"
    assert [warning.field for warning in builder.context.warnings] == ["holdings_number"]


def test_unrecognised_date_is_kept_with_warning(identifiers: SequentialIdentifiers) -> None:
    builder = _builder(identifiers)

    item = builder.build_item(
        DlcRow.from_values(item_row(holdings_number="X/1", start_date="circa 1900")),
        line=5,
    )

    assert item.dates[0].begin == "circa 1900"
    assert [warning.field for warning in builder.context.warnings] == ["start_date"]
