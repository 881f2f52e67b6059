"""Deferred linking of placeholder fields and ordered emission."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dlcimport.domain.model import CollectionRecord, ItemRecord

from .errors import ConversionError, UnresolvedParentError

if TYPE_CHECKING:
    from dlcimport.domain.ports import RecordSink

    from .context import ConversionContext

log = logging.getLogger(__name__)


def finalize(context: ConversionContext) -> CollectionRecord:
    """Resolve every placeholder once the whole input has been read.

    Items get the collection's identifier as their parent reference and the
    collection gets the final item count as its extent number.
    """

    if context.finalized:
        raise ConversionError("Run has already been finalized")

    collection = context.collection
    if collection is None:
        raise UnresolvedParentError(
            f"No collection-header row found; cannot link {context.item_count} item(s)"
        )

    for record in context.records:
        if isinstance(record, ItemRecord):
            record.resource_ref = collection.uri
        elif isinstance(record, CollectionRecord):
            record.extent.number = str(context.item_count)

    context.finalized = True
    log.debug("Linked %s item(s) to %s", context.item_count, collection.uri)
    return collection


def emit(context: ConversionContext, sink: RecordSink) -> int:
    """Hand records to ``sink`` in reverse accumulation order.

    Reversing restores the spreadsheet order of collection and items for the
    position-preserving consumer. Returns the number of records emitted.
    """

    if not context.finalized:
        raise ConversionError("Records must be finalized before emission")

    for record in context.records:
        pending = record.unresolved_fields()
        if pending:
            raise ConversionError(
                f"{record.record_type} {record.uri} still has unresolved fields: "
                + ", ".join(pending)
            )

    for record in reversed(context.records):
        sink.accept(record)
    return len(context.records)
