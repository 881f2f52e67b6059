"""SQLAlchemy table metadata for the agent registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, Integer, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()


agent_name_table = Table(
    "agent_name",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("primary_name", String, nullable=False, unique=True, index=True),
    Column("agent_uri", String, nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine, checkfirst=True)
