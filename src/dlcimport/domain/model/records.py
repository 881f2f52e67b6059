"""Archival records produced by a conversion run.

Records are plain mutable dataclasses. The builder creates them with placeholder
relationship fields and the finalizer overwrites those in place, so nothing here
is frozen except the small value objects hanging off a record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from dlcimport.domain.model.enums import (
    UNRESOLVED,
    AgentRole,
    DateType,
    ExtentPortion,
    Level,
    NoteType,
    Placeholder,
    RecordType,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class DateRange:
    date_type: DateType
    begin: str
    end: str | None = None
    expression: str
    label: str = "creation"


@dataclass(slots=True, kw_only=True)
class Extent:
    portion: ExtentPortion
    container_summary: str | None = None
    number: str | Placeholder = UNRESOLVED
    extent_type: str = "items"


@dataclass(frozen=True, slots=True)
class LinkedAgent:
    ref: str
    role: AgentRole = AgentRole.CREATOR


@dataclass(frozen=True, slots=True)
class Note:
    note_type: NoteType
    content: str


@dataclass(frozen=True, slots=True)
class DigitalObjectInstance:
    """Instance linking an item to its digital object surrogate."""

    digital_object_ref: str
    instance_type: str = "digital_object"


@dataclass(frozen=True, slots=True)
class UserDefined:
    integer_2: str


@dataclass(eq=False, kw_only=True)
class Record:
    """Base for every produced record; ``uri`` is the generated opaque identifier."""

    uri: str

    # class-level discriminator; subclasses must override
    RECORD_TYPE: ClassVar[RecordType]

    @property
    def record_type(self) -> RecordType:
        return self.RECORD_TYPE

    def unresolved_fields(self) -> tuple[str, ...]:
        """Names of placeholder fields that still await finalization."""

        return ()


@dataclass(eq=False, kw_only=True)
class CollectionRecord(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.RESOURCE

    id_0: str | None
    title: str | None
    extent: Extent
    dates: list[DateRange] = field(default_factory=list[DateRange])
    linked_agents: list[LinkedAgent] = field(default_factory=list[LinkedAgent])
    user_defined: UserDefined | None = None
    level: Level = Level.COLLECTION
    language: str = "eng"
    script: str = "Latn"

    def unresolved_fields(self) -> tuple[str, ...]:
        if self.extent.number is UNRESOLVED:
            return ("extent.number",)
        return ()


@dataclass(eq=False, kw_only=True)
class ItemRecord(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.ARCHIVAL_OBJECT

    title: str | None
    component_id: str | None
    extent: Extent
    dates: list[DateRange] = field(default_factory=list[DateRange])
    instances: list[DigitalObjectInstance] = field(default_factory=list[DigitalObjectInstance])
    notes: list[Note] = field(default_factory=list[Note])
    linked_agents: list[LinkedAgent] = field(default_factory=list[LinkedAgent])
    resource_ref: str | Placeholder = UNRESOLVED
    level: Level = Level.ITEM

    def unresolved_fields(self) -> tuple[str, ...]:
        if self.resource_ref is UNRESOLVED:
            return ("resource_ref",)
        return ()


@dataclass(eq=False, kw_only=True)
class AgentRecord(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.AGENT_PERSON

    primary_name: str


@dataclass(eq=False, kw_only=True)
class DigitalObjectRecord(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.DIGITAL_OBJECT

    digital_object_id: str
    title: str | None
    linked_agents: list[LinkedAgent] = field(default_factory=list[LinkedAgent])
    user_defined: UserDefined | None = None


ArchivalRecord: TypeAlias = CollectionRecord | ItemRecord | AgentRecord | DigitalObjectRecord
