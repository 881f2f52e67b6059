"""Port for resolving agents that already exist outside the current run."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AgentLookup(Protocol):
    """Look up a pre-existing person agent by its cleaned primary name."""

    def lookup_agent_by_name(self, name: str) -> str | None:
        """Return the agent's identifier, or ``None`` when no agent carries ``name``."""
        ...


class NullAgentLookup:
    """Lookup used when no agent registry is configured: nothing pre-exists."""

    def lookup_agent_by_name(self, name: str) -> str | None:
        _ = name
        return None
