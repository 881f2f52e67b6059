"""Import URI generator for records created by a conversion run."""

from __future__ import annotations

from typing import Final
from uuid import uuid4

from dlcimport.domain.model import RecordType

_REPOSITORY_SCOPED: Final[dict[RecordType, str]] = {
    RecordType.RESOURCE: "resources",
    RecordType.ARCHIVAL_OBJECT: "archival_objects",
    RecordType.DIGITAL_OBJECT: "digital_objects",
}


class ImportUriGenerator:
    """Mint ``import_<hex>`` URIs the way a batch importer expects them.

    Agents are global, everything else lives below the target repository.
    """

    def __init__(self, repository_id: str) -> None:
        self.repository_id = repository_id

    def new_identifier(self, kind: RecordType) -> str:
        token = f"import_{uuid4().hex}"
        if kind is RecordType.AGENT_PERSON:
            return f"/agents/people/{token}"
        collection = _REPOSITORY_SCOPED.get(kind)
        if collection is None:
            raise ValueError(f"Unsupported record type: {kind}")
        return f"/repositories/{self.repository_id}/{collection}/{token}"
