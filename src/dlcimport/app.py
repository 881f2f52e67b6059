"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from dlcimport.adapters.csv_source import CsvRowSource
from dlcimport.adapters.identifiers import ImportUriGenerator
from dlcimport.adapters.jsonmodel import JsonRecordBatch
from dlcimport.adapters.sqlalchemy.unit_of_work import (
    AgentRegistryUnitOfWork,
    is_started,
    startup,
)
from dlcimport.config import get_conversion_config
from dlcimport.domain.conversion import clean_agent_name, run_conversion
from dlcimport.domain.ports import NullAgentLookup

if TYPE_CHECKING:
    from pathlib import Path

    from dlcimport.config import ConversionConfig
    from dlcimport.domain.conversion import ConversionResult
    from dlcimport.domain.ports import AgentLookup

UnitOfWorkFactory = Callable[[], AgentRegistryUnitOfWork]


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConvertOutcome:
    result: ConversionResult
    output_path: Path


def default_output_path(input_path: Path) -> Path:
    return input_path.with_suffix(".json")


def convert_dlc_csv(
    input_path: Path,
    *,
    output_path: Path | None = None,
    config: ConversionConfig | None = None,
    use_registry: bool = True,
    database_uri: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ConvertOutcome:
    """Convert a Generic DLC CSV export into a JSONModel import batch file.

    The output file is only written once the whole run has succeeded.
    """

    effective_config = config or get_conversion_config()
    target = output_path or default_output_path(input_path)
    source = CsvRowSource.from_path(input_path)
    batch = JsonRecordBatch()
    identifiers = ImportUriGenerator(effective_config.repository_id)
    log.info(
        "Starting DLC conversion: input=%s, output=%s, repository=%s, registry=%s",
        input_path,
        target,
        effective_config.repository_id,
        use_registry,
    )

    if use_registry:
        _ensure_registry(database_uri)
        with (unit_of_work_factory or AgentRegistryUnitOfWork)() as uow:
            result = _convert(source, batch, identifiers, effective_config, uow.agents)
    else:
        result = _convert(source, batch, identifiers, effective_config, NullAgentLookup())

    batch.write(target)
    log.info(
        "Finished DLC conversion: collection=%s, items=%s, records=%s, warnings=%s",
        result.collection_id,
        result.item_count,
        result.records_emitted,
        len(result.warnings),
    )
    return ConvertOutcome(result=result, output_path=target)


def register_agent(
    name: str,
    agent_uri: str,
    *,
    replace: bool = False,
    database_uri: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> bool:
    """Record a pre-existing agent so later conversions link to it instead of creating one."""

    cleaned = clean_agent_name(name)
    if not cleaned:
        raise ValueError("Agent name must not be blank")
    if not agent_uri.strip():
        raise ValueError("Agent URI must not be blank")

    _ensure_registry(database_uri)
    with (unit_of_work_factory or AgentRegistryUnitOfWork)() as uow:
        stored = uow.agents.add(cleaned, agent_uri.strip(), replace=replace)
        uow.commit()

    if stored:
        log.info("Registered agent %r -> %s", cleaned, agent_uri)
    else:
        log.info("Agent %r already registered; left unchanged", cleaned)
    return stored


def _convert(
    source: CsvRowSource,
    batch: JsonRecordBatch,
    identifiers: ImportUriGenerator,
    config: ConversionConfig,
    lookup: AgentLookup,
) -> ConversionResult:
    return run_conversion(
        source,
        sink=batch,
        identifiers=identifiers,
        agent_lookup=lookup,
        language=config.language,
        script=config.script,
    )


def _ensure_registry(database_uri: str | None) -> None:
    if database_uri is not None:
        startup(database_uri=database_uri, force=True)
    elif not is_started():
        startup()
