"""Run-scoped state shared by the builder and the finalizer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dlcimport.domain.model import ArchivalRecord, CollectionRecord, RecordType

from .errors import MalformedRowWarning

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RunCounters:
    rows_read: int = 0
    rows_skipped: int = 0
    agents_created: int = 0
    agents_matched: int = 0
    digital_objects: int = 0


@dataclass(slots=True)
class ConversionContext:
    """Mutable state of a single conversion run.

    ``records`` is the flat ownership list in accumulation order. The agent cache
    maps cleaned creator names to agent identifiers and never outlives the run.
    """

    records: list[ArchivalRecord] = field(default_factory=list[ArchivalRecord])
    agent_cache: dict[str, str] = field(default_factory=dict[str, str])
    collection: CollectionRecord | None = None
    item_count: int = 0
    finalized: bool = False
    counters: RunCounters = field(default_factory=RunCounters)
    warnings: list[MalformedRowWarning] = field(default_factory=list[MalformedRowWarning])

    def add(self, record: ArchivalRecord) -> None:
        self.records.append(record)

    def warn(self, *, line: int | None, column: str, value: str | None, message: str) -> None:
        warning = MalformedRowWarning(line=line, field=column, value=value, message=message)
        self.warnings.append(warning)
        log.warning("Malformed field: %s", warning)

    def records_of(self, record_type: RecordType) -> list[ArchivalRecord]:
        return [record for record in self.records if record.record_type == record_type]
