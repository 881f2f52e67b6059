"""JSON batch sink: the import file consumed by the archival repository."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from .translator import to_payload

if TYPE_CHECKING:
    from pathlib import Path

    from dlcimport.domain.model import ArchivalRecord

    from .schema import RecordPayload

log = logging.getLogger(__name__)


class JsonRecordBatch:
    """Accumulate payloads in ``accept`` order and write them as one JSON array."""

    def __init__(self) -> None:
        self.payloads: list[RecordPayload] = []

    def accept(self, record: ArchivalRecord) -> None:
        self.payloads.append(to_payload(record))

    def __len__(self) -> int:
        return len(self.payloads)

    def as_json_data(self) -> list[dict[str, Any]]:
        return [payload.model_dump(mode="json", exclude_none=True) for payload in self.payloads]

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(self.as_json_data(), handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        log.info("Wrote %s record(s) to %s", len(self.payloads), path)
        return path
