from __future__ import annotations
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from laserdot.api.config import LaserDotConfig
from laserdot.api.errors import ConfigError


def load_config(path: Union[str, Path]) -> LaserDotConfig:
    """
    Read a YAML mapping of LaserDotConfig fields. Missing keys keep their
    defaults; unknown keys are an error.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing config file {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return config_from_dict(data or {})


def config_from_dict(data: Dict[str, Any]) -> LaserDotConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(LaserDotConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
    return LaserDotConfig().replace(**data)
