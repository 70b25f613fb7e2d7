"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import LoaderConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_loader_config(path: Path) -> LoaderConfig:
    """
    Load loader.yaml into a LoaderConfig.

    Keys are optional; anything omitted keeps its default.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or holds invalid values
    """
    data = _load_yaml(path)
    return LoaderConfig(**data)
