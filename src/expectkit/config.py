from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_FILENAME = "expectkit.yaml"


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    suite: str = "expectkit"
    junit: str | None = None
    show_passed: bool = True
    verbose: bool = False

    @field_validator("suite", "junit", mode="before")
    @classmethod
    def expand_env_variables(cls, v: Any) -> Any:
        """Expand ${VAR} and ${VAR:-default} references.

        Raises ValueError naming the variable when a reference without a
        default is unset.
        """
        if not isinstance(v, str):
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"unset environment variable in '{v}': {e}") from e

    @field_validator("suite")
    @classmethod
    def suite_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("suite must not be empty")
        return v


def find_config(script: Path) -> Path | None:
    """Return the config file sitting next to *script*, if there is one."""
    candidate = script.parent / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    config = RunConfig(**raw)

    # Resolve a relative report path against the config file location
    if config.junit:
        junit_path = Path(config.junit)
        if not junit_path.is_absolute():
            config.junit = str((config_dir / junit_path).resolve())

    return config
