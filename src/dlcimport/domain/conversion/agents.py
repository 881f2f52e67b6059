"""Creator-to-agent resolution with in-run deduplication."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dlcimport.domain.model import AgentRecord, LinkedAgent, RecordType

from .normalization import clean_agent_name

if TYPE_CHECKING:
    from dlcimport.domain.ports import AgentLookup, IdentifierGenerator

    from .context import ConversionContext

log = logging.getLogger(__name__)


@dataclass(slots=True)
class AgentResolver:
    """Resolve cleaned creator names to agent identifiers.

    Order of resolution: the run's cache, then the external lookup, then a new
    ``AgentRecord`` appended to the run. Whatever answers is cached under the
    cleaned name, so each distinct name costs at most one lookup and one record.
    """

    context: ConversionContext
    lookup: AgentLookup
    identifiers: IdentifierGenerator

    def resolve(self, name: str) -> str:
        cached = self.context.agent_cache.get(name)
        if cached is not None:
            return cached

        existing = self.lookup.lookup_agent_by_name(name)
        if existing is not None:
            log.debug("Matched existing agent %s for %r", existing, name)
            self.context.counters.agents_matched += 1
            self.context.agent_cache[name] = existing
            return existing

        uri = self.identifiers.new_identifier(RecordType.AGENT_PERSON)
        self.context.add(AgentRecord(uri=uri, primary_name=name))
        self.context.counters.agents_created += 1
        self.context.agent_cache[name] = uri
        log.debug("Created agent %s for %r", uri, name)
        return uri

    def creator_for(self, creator: str | None) -> LinkedAgent | None:
        """Return the creator link for a raw creator cell, if the row has one."""

        if creator is None:
            return None
        name = clean_agent_name(creator)
        if not name:
            return None
        return LinkedAgent(ref=self.resolve(name))
