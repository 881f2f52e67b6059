"""Public domain model surface."""

from __future__ import annotations

from dlcimport.domain.model.enums import (
    UNRESOLVED,
    AgentRole,
    DateType,
    ExtentPortion,
    Level,
    NoteType,
    Placeholder,
    RecordType,
    RowKind,
)
from dlcimport.domain.model.records import (
    AgentRecord,
    ArchivalRecord,
    CollectionRecord,
    DateRange,
    DigitalObjectInstance,
    DigitalObjectRecord,
    Extent,
    ItemRecord,
    LinkedAgent,
    Note,
    Record,
    UserDefined,
)

__all__ = [  # noqa: RUF022
    # records
    "Record",
    "ArchivalRecord",
    "CollectionRecord",
    "ItemRecord",
    "AgentRecord",
    "DigitalObjectRecord",
    # value objects
    "DateRange",
    "Extent",
    "LinkedAgent",
    "Note",
    "DigitalObjectInstance",
    "UserDefined",
    # enums
    "AgentRole",
    "DateType",
    "ExtentPortion",
    "Level",
    "NoteType",
    "Placeholder",
    "RecordType",
    "RowKind",
    "UNRESOLVED",
]
