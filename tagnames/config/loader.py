"""YAML loader for the config subsystem.

The helper consumes one YAML file, validates it via models.py and returns a
typed object to the caller.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from .models import NamesConfig

_DEFAULT_CONFIG_DIR = Path("config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_names_config(path: Path | str = _DEFAULT_CONFIG_DIR / "names.yml") -> NamesConfig:
    """Load names.yml (extra `kinds` and `logging` settings).

    A blank file yields the defaults: no extra kinds, INFO logging to stderr.
    """

    data = _read_yaml(Path(path))
    return NamesConfig.model_validate(data)
