"""Port for minting record identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dlcimport.domain.model import RecordType


@runtime_checkable
class IdentifierGenerator(Protocol):
    """Produce globally unique, opaque identifiers for new records."""

    def new_identifier(self, kind: RecordType) -> str: ...
