"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import Enum, StrEnum


class RowKind(StrEnum):
    COLLECTION_HEADER = "collection-header"
    ITEM = "item"
    NOISE = "noise"


class RecordType(StrEnum):
    """JSONModel type of a produced record; also the kind passed to identifier generators."""

    RESOURCE = "resource"
    ARCHIVAL_OBJECT = "archival_object"
    AGENT_PERSON = "agent_person"
    DIGITAL_OBJECT = "digital_object"


class Level(StrEnum):
    COLLECTION = "collection"
    ITEM = "item"


class DateType(StrEnum):
    SINGLE = "single"
    INCLUSIVE = "inclusive"


class ExtentPortion(StrEnum):
    WHOLE = "whole"
    PART = "part"


class NoteType(StrEnum):
    SCOPE_CONTENT = "scopecontent"
    PROCESS_INFO = "processinfo"


class AgentRole(StrEnum):
    CREATOR = "creator"


class Placeholder(Enum):
    """Sentinel for fields that are only known once every row has been read."""

    UNRESOLVED = "unresolved"

    def __repr__(self) -> str:
        return "<UNRESOLVED>"


UNRESOLVED = Placeholder.UNRESOLVED
