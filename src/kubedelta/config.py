#!/usr/bin/env python3
"""
KUBEDELTA CONFIGURATION
-----------------------
Policy switches shared by the engine and the CLI. Values come from an
optional YAML file and are then overridden by command-line flags.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ruamel.yaml import YAML, YAMLError

from kubedelta.core.errors import ConfigError

logger = logging.getLogger("kubedelta.config")


@dataclass(frozen=True)
class DiffConfig:
    strict: bool = False       # Raise on malformed/duplicate documents instead of skipping
    symmetric: bool = False    # Also report keys that exist only on the right side
    color: bool = True         # Colored terminal output
    indent: int = 2            # Indentation used when rendering subtrees

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "DiffConfig":
        """Loads settings from a YAML mapping, e.g. '.kubedelta.yaml'."""
        try:
            data = YAML(typ='safe').load(Path(file_path).read_text(encoding='utf-8-sig'))
        except (OSError, YAMLError) as e:
            raise ConfigError(f"Unable to load config from {file_path}: {e}")
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiffConfig":
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config setting(s): {', '.join(unknown)}")

        for name, value in data.items():
            expected = int if name == "indent" else bool
            if type(value) is not expected:
                raise ConfigError(f"Setting '{name}' must be of type {expected.__name__}")
        if data.get("indent", 2) < 1:
            raise ConfigError("Setting 'indent' must be positive")

        logger.debug(f"Loaded config: {data}")
        return cls(**data)

    def override(self, **changes: Optional[Any]) -> "DiffConfig":
        """Returns a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
