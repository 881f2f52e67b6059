"""Application configuration helpers."""

from __future__ import annotations

from .conversion import ConversionConfig, get_conversion_config
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import RegistryConfig, StorageConfig, get_registry_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "ConversionConfig",
    "RegistryConfig",
    "StorageConfig",
    "configure_logging",
    "get_conversion_config",
    "get_registry_config",
    "get_storage_config",
]
