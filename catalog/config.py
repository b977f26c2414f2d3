"""
Catalog configuration with YAML and environment support.

This module provides the CatalogConfig dataclass that controls logging and
which demos the driver runs, loadable from a YAML file or from
``CATALOG_*`` environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

ENV_PREFIX = "CATALOG_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


@dataclass
class CatalogConfig:
    """Configuration for a catalog run.

    Attributes:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether console logs are JSON instead of human-readable
        log_file: Optional file that also receives JSON logs
        use_colors: Whether console logs use ANSI colors
        demos: Demo names to run; empty means every registered demo
        echo: Whether demo output is printed while running
    """

    log_level: str = "WARNING"
    json_logs: bool = False
    log_file: Optional[str] = None
    use_colors: bool = True
    demos: List[str] = field(default_factory=list)
    echo: bool = True

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if isinstance(self.demos, str):
            self.demos = [d.strip() for d in self.demos.split(",") if d.strip()]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Create configuration from a dictionary.

        Raises:
            ValueError: If the dictionary has keys that are not config fields
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["CatalogConfig"] = None,
    ) -> "CatalogConfig":
        """Build configuration from ``CATALOG_*`` environment variables.

        Variables that are not set keep the value from ``base`` (or the
        defaults). ``CATALOG_DEMOS`` is a comma-separated list.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            base: Configuration to start from

        Returns:
            CatalogConfig instance
        """
        env = os.environ if environ is None else environ
        values = (base or cls()).to_dict()

        for key in values:
            raw = env.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is None:
                continue
            if key in ("json_logs", "use_colors", "echo"):
                values[key] = _parse_bool(f"{ENV_PREFIX}{key.upper()}", raw)
            elif key == "log_file":
                values[key] = raw or None
            else:
                values[key] = raw

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "log_file": self.log_file,
            "use_colors": self.use_colors,
            "demos": list(self.demos),
            "echo": self.echo,
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
