"""SQLAlchemy adapter package for the agent registry."""

from __future__ import annotations

from .mappings import agent_name_table, create_all_tables, metadata
from .repositories import SqlAlchemyAgentRegistry
from .unit_of_work import AgentRegistryUnitOfWork, StartupError, is_started, shutdown, startup

__all__ = [
    "AgentRegistryUnitOfWork",
    "SqlAlchemyAgentRegistry",
    "StartupError",
    "agent_name_table",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
