"""Run configuration models and YAML persistence."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, validator

DEFAULT_RUNTIME_OPTIONS = "-Djline.terminal=NONE"
WORKSHEET_EXTENSION = "sc"


class RunConfiguration(BaseModel):
    """Persisted description of how to launch a worksheet session."""

    name: str = "Worksheet"
    runtime_options: str = DEFAULT_RUNTIME_OPTIONS
    working_directory: str = ""
    script_path: str = ""
    module: Optional[str] = Field(
        default=None, description="Module whose classpath the worksheet runs with."
    )

    @validator("runtime_options", "working_directory", "script_path", pre=True)
    def _blank_strings(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    @validator("module", pre=True)
    def _blank_module(cls, value: Any) -> Any:
        if value is None or str(value).strip() == "":
            return None
        return str(value)


class ProjectContext(BaseModel):
    """Host project the worksheet belongs to."""

    name: str = "project"
    base_directory: Optional[Path] = None
    modules: List[str] = Field(default_factory=list)

    @validator("modules", each_item=True)
    def _strip_module(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Module names cannot be empty")
        return value

    def base_path(self) -> Optional[str]:
        """Return the base directory when it resolves to an existing folder."""

        if self.base_directory is None or not self.base_directory.is_dir():
            return None
        return str(self.base_directory)


class ConfigError(Exception):
    """Raised when a configuration file is invalid."""


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc
    return data if data is not None else {}


def load_config(path: Path) -> RunConfiguration:
    """Load a run configuration from a YAML file."""

    data = _read_yaml(path)
    try:
        return RunConfiguration.parse_obj(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid run configuration: {exc}") from exc


def save_config(config: RunConfiguration, path: Path) -> None:
    """Persist a run configuration to disk as YAML."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config.dict(), sort_keys=False))


def load_project(path: Path) -> ProjectContext:
    """Load a project description, defaulting its base directory to the file's folder."""

    data = _read_yaml(path)
    if isinstance(data, dict) and "base_directory" not in data:
        data = {**data, "base_directory": str(path.resolve().parent)}
    try:
        return ProjectContext.parse_obj(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid project file: {exc}") from exc


__all__ = [
    "DEFAULT_RUNTIME_OPTIONS",
    "WORKSHEET_EXTENSION",
    "ConfigError",
    "ProjectContext",
    "RunConfiguration",
    "load_config",
    "load_project",
    "save_config",
]
