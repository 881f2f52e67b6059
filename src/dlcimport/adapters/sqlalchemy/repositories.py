"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select, update

from dlcimport.adapters.sqlalchemy.mappings import agent_name_table

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyAgentRegistry:
    """Known person agents keyed by primary name.

    Serves as the conversion's external agent lookup; ``add`` is used to seed it
    with agents that already exist in the target repository.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def lookup_agent_by_name(self, name: str) -> str | None:
        stmt = (
            select(agent_name_table.c.agent_uri)
            .where(agent_name_table.c.primary_name == name)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def add(self, name: str, agent_uri: str, *, replace: bool = False) -> bool:
        """Register ``name``; return False if it was already known and left alone."""

        existing = self.lookup_agent_by_name(name)
        if existing is not None and not replace:
            return False
        if existing is not None:
            stmt = (
                update(agent_name_table)
                .where(agent_name_table.c.primary_name == name)
                .values(agent_uri=agent_uri)
            )
        else:
            stmt = insert(agent_name_table).values(primary_name=name, agent_uri=agent_uri)
        self.session.execute(stmt)
        return True

    def count(self) -> int:
        stmt = select(func.count()).select_from(agent_name_table)
        return self.session.execute(stmt).scalar_one()
