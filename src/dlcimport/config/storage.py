"""Data storage configuration for the agent registry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "dlcimport"
DEFAULT_REGISTRY_FILENAME: Final[str] = "agents.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    registry_filename: str = DEFAULT_REGISTRY_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def registry_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.registry_filename

    def registry_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.registry_path()}"


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    uri: str


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("DLC_IMPORT_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    return StorageConfig(data_dir=data_dir)


def get_registry_config(*, storage: StorageConfig | None = None) -> RegistryConfig:
    env_uri = os.getenv("DLC_AGENTS_DATABASE_URI")
    if env_uri:
        return RegistryConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return RegistryConfig(uri=storage_config.registry_uri())
