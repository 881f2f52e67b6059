"""Provisional record construction for collection-header and item rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from dlcimport.domain.model import (
    UNRESOLVED,
    CollectionRecord,
    DateRange,
    DigitalObjectInstance,
    DigitalObjectRecord,
    Extent,
    ExtentPortion,
    ItemRecord,
    LinkedAgent,
    Note,
    NoteType,
    RecordType,
    UserDefined,
)

from .errors import StructuralError
from .normalization import clean_identifier, format_date_range, is_recognised_date

if TYPE_CHECKING:
    from dlcimport.domain.ports import IdentifierGenerator

    from .agents import AgentResolver
    from .context import ConversionContext
    from .schema import DlcRow

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordBuilder:
    """First phase of a run: turn classified rows into provisional records.

    Relationship fields that depend on the whole input (an item's parent, the
    collection's item count) are written as ``UNRESOLVED`` and left for the
    finalizer. Records referenced by a row are added to the context before the
    record that references them.
    """

    context: ConversionContext
    identifiers: IdentifierGenerator
    agents: AgentResolver
    language: str = "eng"
    script: str = "Latn"

    def build_collection(self, row: DlcRow, *, line: int | None = None) -> CollectionRecord:
        if self.context.collection is not None:
            raise StructuralError(
                f"row {line}: found a second collection-header row; "
                "only one collection per run is supported"
            )

        creator = self.agents.creator_for(row.creator)
        record = CollectionRecord(
            uri=self.identifiers.new_identifier(RecordType.RESOURCE),
            id_0=self._identifier(row, line),
            title=row.title,
            extent=Extent(
                portion=ExtentPortion.WHOLE,
                container_summary=row.extent,
                number=UNRESOLVED,
            ),
            dates=self._dates(row, line),
            linked_agents=_as_list(creator),
            user_defined=_user_defined(row),
            language=self.language,
            script=self.script,
        )
        self.context.add(record)
        self.context.collection = record
        log.debug("Built collection %s (%s) from row %s", record.uri, record.id_0, line)
        return record

    def build_item(self, row: DlcRow, *, line: int | None = None) -> ItemRecord:
        creator = self.agents.creator_for(row.creator)

        instances: list[DigitalObjectInstance] = []
        if row.object_id is not None:
            digital_object = self._build_digital_object(row, row.object_id, creator)
            instances.append(DigitalObjectInstance(digital_object_ref=digital_object.uri))

        record = ItemRecord(
            uri=self.identifiers.new_identifier(RecordType.ARCHIVAL_OBJECT),
            title=row.title,
            component_id=self._identifier(row, line),
            extent=Extent(
                portion=ExtentPortion.PART,
                container_summary=row.extent,
                number="1",
            ),
            dates=self._dates(row, line),
            instances=instances,
            notes=assemble_notes(row),
            linked_agents=_as_list(creator),
            resource_ref=UNRESOLVED,
        )
        self.context.add(record)
        self.context.item_count += 1
        return record

    def _build_digital_object(
        self,
        row: DlcRow,
        object_id: str,
        creator: LinkedAgent | None,
    ) -> DigitalObjectRecord:
        record = DigitalObjectRecord(
            uri=self.identifiers.new_identifier(RecordType.DIGITAL_OBJECT),
            digital_object_id=object_id,
            title=row.title,
            linked_agents=_as_list(creator),
            user_defined=_user_defined(row),
        )
        self.context.add(record)
        self.context.counters.digital_objects += 1
        return record

    def _identifier(self, row: DlcRow, line: int | None) -> str | None:
        raw = row.holdings_number
        if raw is None:
            self.context.warn(
                line=line,
                column="holdings_number",
                value=None,
                message="missing holdings number; record has no identifier",
            )
            return None

        cleaned = clean_identifier(raw)
        if not cleaned:
            self.context.warn(
                line=line,
                column="holdings_number",
                value=raw,
                message="nothing left before '#'; keeping the raw value",
            )
            return raw.strip()
        return cleaned

    def _dates(self, row: DlcRow, line: int | None) -> list[DateRange]:
        for column, value in (("start_date", row.start_date), ("end_date", row.end_date)):
            if value is not None and not is_recognised_date(value):
                self.context.warn(
                    line=line,
                    column=column,
                    value=value,
                    message="unrecognised date format; kept unchanged",
                )
        return _as_list(format_date_range(row.start_date, row.end_date))


def assemble_notes(row: DlcRow) -> list[Note]:
    """Scope-content from external comments, then processing info from the object id."""

    notes: list[Note] = []
    if row.external_comments is not None:
        notes.append(Note(NoteType.SCOPE_CONTENT, row.external_comments))
    if row.object_id is not None:
        notes.append(Note(NoteType.PROCESS_INFO, row.object_id))
    return notes


def _user_defined(row: DlcRow) -> UserDefined | None:
    if row.bib_id is None:
        return None
    return UserDefined(integer_2=row.bib_id)


T = TypeVar("T")


def _as_list(value: T | None) -> list[T]:
    return [] if value is None else [value]
