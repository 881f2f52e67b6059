"""Translate finalized domain records into JSONModel payloads."""

from __future__ import annotations

from functools import singledispatch
from typing import TYPE_CHECKING

from dlcimport.domain.model import (
    AgentRecord,
    CollectionRecord,
    DigitalObjectRecord,
    ItemRecord,
    Placeholder,
)

from .schema import (
    AgentNamePayload,
    AgentPersonPayload,
    ArchivalObjectPayload,
    DatePayload,
    DigitalObjectPayload,
    ExtentPayload,
    InstancePayload,
    LangMaterialPayload,
    LanguageAndScriptPayload,
    LinkedAgentPayload,
    NoteMultipartPayload,
    NoteTextPayload,
    RecordPayload,
    RefPayload,
    ResourcePayload,
    UserDefinedPayload,
)

if TYPE_CHECKING:
    from dlcimport.domain.model import (
        DateRange,
        Extent,
        LinkedAgent,
        Note,
        Record,
        UserDefined,
    )


class UnresolvedRecordError(ValueError):
    """Raised when a record still carries a placeholder at translation time."""


@singledispatch
def to_payload(record: Record) -> RecordPayload:
    raise TypeError(f"Unsupported record: {type(record).__name__}")


@to_payload.register
def _(record: CollectionRecord) -> RecordPayload:
    return ResourcePayload(
        uri=record.uri,
        id_0=record.id_0,
        title=record.title,
        level=record.level.value,
        extents=[_extent(record, record.extent)],
        dates=[_date(date) for date in record.dates],
        linked_agents=[_linked_agent(agent) for agent in record.linked_agents],
        user_defined=_user_defined(record.user_defined),
        finding_aid_language=record.language,
        finding_aid_script=record.script,
        lang_materials=[
            LangMaterialPayload(
                language_and_script=LanguageAndScriptPayload(
                    language=record.language,
                    script=record.script,
                )
            )
        ],
    )


@to_payload.register
def _(record: ItemRecord) -> RecordPayload:
    if isinstance(record.resource_ref, Placeholder):
        raise UnresolvedRecordError(f"{record.uri}: parent collection was never resolved")
    return ArchivalObjectPayload(
        uri=record.uri,
        title=record.title,
        component_id=record.component_id,
        level=record.level.value,
        dates=[_date(date) for date in record.dates],
        extents=[_extent(record, record.extent)],
        instances=[
            InstancePayload(digital_object=RefPayload(ref=instance.digital_object_ref))
            for instance in record.instances
        ],
        notes=[_note(note) for note in record.notes],
        linked_agents=[_linked_agent(agent) for agent in record.linked_agents],
        resource=RefPayload(ref=record.resource_ref),
    )


@to_payload.register
def _(record: AgentRecord) -> RecordPayload:
    return AgentPersonPayload(
        uri=record.uri,
        names=[AgentNamePayload(primary_name=record.primary_name)],
    )


@to_payload.register
def _(record: DigitalObjectRecord) -> RecordPayload:
    return DigitalObjectPayload(
        uri=record.uri,
        digital_object_id=record.digital_object_id,
        title=record.title,
        linked_agents=[_linked_agent(agent) for agent in record.linked_agents],
        user_defined=_user_defined(record.user_defined),
    )


def _extent(record: Record, extent: Extent) -> ExtentPayload:
    if isinstance(extent.number, Placeholder):
        raise UnresolvedRecordError(f"{record.uri}: extent number was never resolved")
    return ExtentPayload(
        portion=extent.portion.value,
        extent_type=extent.extent_type,
        container_summary=extent.container_summary,
        number=extent.number,
    )


def _date(date: DateRange) -> DatePayload:
    return DatePayload(
        date_type=date.date_type.value,
        label=date.label,
        begin=date.begin,
        end=date.end,
        expression=date.expression,
    )


def _linked_agent(agent: LinkedAgent) -> LinkedAgentPayload:
    return LinkedAgentPayload(role=agent.role.value, ref=agent.ref)


def _note(note: Note) -> NoteMultipartPayload:
    return NoteMultipartPayload(
        type=note.note_type.value,
        subnotes=[NoteTextPayload(content=note.content)],
    )


def _user_defined(user_defined: UserDefined | None) -> UserDefinedPayload | None:
    if user_defined is None:
        return None
    return UserDefinedPayload(integer_2=user_defined.integer_2)
