"""Settings that shape the produced records."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

DEFAULT_REPOSITORY_ID: Final[str] = "12345"
DEFAULT_LANGUAGE: Final[str] = "eng"
DEFAULT_SCRIPT: Final[str] = "Latn"


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Target repository and finding-aid language of a conversion."""

    repository_id: str = DEFAULT_REPOSITORY_ID
    language: str = DEFAULT_LANGUAGE
    script: str = DEFAULT_SCRIPT

    def __post_init__(self) -> None:
        if not self.repository_id.isdigit():
            raise ConfigurationError(
                f"Repository id must be a positive integer, got {self.repository_id!r}"
            )

    @classmethod
    def from_environment(cls) -> ConversionConfig:
        return cls(
            repository_id=_env_or_default("DLC_REPOSITORY_ID", DEFAULT_REPOSITORY_ID),
            language=_env_or_default("DLC_LANGUAGE", DEFAULT_LANGUAGE),
            script=_env_or_default("DLC_SCRIPT", DEFAULT_SCRIPT),
        )


def _env_or_default(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_conversion_config(*, repository_id: str | None = None) -> ConversionConfig:
    config = ConversionConfig.from_environment()
    if repository_id is None:
        return config
    return ConversionConfig(
        repository_id=repository_id,
        language=config.language,
        script=config.script,
    )
