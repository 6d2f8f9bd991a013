"""Generate JSON Schema for the expectkit.yaml format."""

from __future__ import annotations

import json
from pathlib import Path

from expectkit.config import RunConfig


def generate_json_schema() -> dict:
    schema = RunConfig.model_json_schema()
    schema["title"] = "expectkit.yaml"
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
