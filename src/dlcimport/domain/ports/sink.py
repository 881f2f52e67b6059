"""Port for the consumer of finished records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dlcimport.domain.model import ArchivalRecord


@runtime_checkable
class RecordSink(Protocol):
    """Absorb finalized records; the order of ``accept`` calls is significant."""

    def accept(self, record: ArchivalRecord) -> None: ...
