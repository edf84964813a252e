"""
Run configuration for the command line, loaded from YAML.

Example:
    grammar_path: examples/grammars/gorey_fate.mutagen
    root_rule: -root-
    count: 20
    start_seed: 100
    output_path: out/gorey.csv
    log_level: DEBUG
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .grammar import DEFAULT_RULE

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Settings for a generation run."""
    grammar_path: Optional[Path] = None
    root_rule: str = DEFAULT_RULE
    count: int = 5
    start_seed: int = 0
    output_path: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.grammar_path is not None:
            self.grammar_path = Path(self.grammar_path)
        if self.output_path is not None:
            self.output_path = Path(self.output_path)
        for name in ("count", "start_seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative")
        for name in ("root_rule", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")

    def merged(self, overrides: Dict[str, Any]) -> "GeneratorConfig":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def config_from_dict(data: Dict[str, Any]) -> GeneratorConfig:
    known = {f.name for f in fields(GeneratorConfig)}
    for key in data:
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
    return GeneratorConfig(**{k: v for k, v in data.items() if k in known})


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Load a GeneratorConfig from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return config_from_dict(data)
