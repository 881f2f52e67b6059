"""Domain port definitions for adapters."""

from __future__ import annotations

from .agents import AgentLookup, NullAgentLookup
from .identifiers import IdentifierGenerator
from .rows import RowSource
from .sink import RecordSink

__all__ = [
    "AgentLookup",
    "IdentifierGenerator",
    "NullAgentLookup",
    "RecordSink",
    "RowSource",
]
