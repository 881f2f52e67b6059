"""JSONModel output adapter."""

from __future__ import annotations

from .schema import (
    AgentPersonPayload,
    ArchivalObjectPayload,
    DigitalObjectPayload,
    RecordPayload,
    ResourcePayload,
)
from .sink import JsonRecordBatch
from .translator import UnresolvedRecordError, to_payload

__all__ = [
    "AgentPersonPayload",
    "ArchivalObjectPayload",
    "DigitalObjectPayload",
    "JsonRecordBatch",
    "RecordPayload",
    "ResourcePayload",
    "UnresolvedRecordError",
    "to_payload",
]
