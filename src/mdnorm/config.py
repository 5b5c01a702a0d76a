"""Configuration loading utilities for mdnorm."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import project_config_path, runtime_config_dir
from .registry import BUILTIN_TRANSFORM_NAMES


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class NormalizeConfig(BaseModel):
    transforms: List[str] = Field(
        default_factory=lambda: ["replace_null_chars", "detab"],
        description="Transform chain applied by `mdnorm normalize`, left to right",
    )
    per_line: bool = Field(default=True, description="Apply the chain to each line separately")

    @field_validator("transforms")
    @classmethod
    def _validate_transforms(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("At least one transform is required")
        unknown = [name for name in value if name not in BUILTIN_TRANSFORM_NAMES]
        if unknown:
            raise ValueError(f"Unknown transforms: {', '.join(unknown)}")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    normalize: NormalizeConfig = Field(default_factory=NormalizeConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            try:
                with candidate.open("r", encoding="utf-8") as handle:
                    data = yaml.safe_load(handle) or {}
                return AppConfig.model_validate(data)
            except (yaml.YAMLError, ValidationError) as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
