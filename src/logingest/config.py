"""
Settings for logingest.

Defaults can be overridden by a YAML file and then by environment
variables (``LOGINGEST_EPOCH_UNIT``, ``LOGINGEST_LOG_LEVEL``).
"""

import logging
import os
from dataclasses import dataclass, field

import yaml

from logingest.core.exceptions import ConfigurationError
from logingest.normalization.timestamps import EpochUnit

__all__ = ["IngestSettings", "ENV_PREFIX"]

ENV_PREFIX = "LOGINGEST_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class IngestSettings:
    """Runtime settings for normalization and logging."""
    epoch_unit: EpochUnit = EpochUnit.MILLISECONDS
    log_level: str = "WARNING"
    source: list[str] = field(default_factory=list)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def load(cls, config_path: str | None = None, env: dict[str, str] | None = None) -> "IngestSettings":
        """
        Build settings from defaults, an optional YAML file and the environment.

        Args:
            config_path: Path to a YAML file with ``epoch_unit``/``log_level`` keys
            env: Environment mapping; defaults to ``os.environ``

        Raises:
            ConfigurationError: If the file or a value is invalid
        """
        values: dict[str, str] = {}
        source = []

        if config_path is not None:
            values.update(cls._read_yaml(config_path))
            source.append(str(config_path))

        env = os.environ if env is None else env
        for key in ("epoch_unit", "log_level"):
            env_key = ENV_PREFIX + key.upper()
            if env.get(env_key):
                values[key] = env[env_key]
                source.append(env_key)

        settings = cls(source=source)
        if "epoch_unit" in values:
            try:
                settings.epoch_unit = EpochUnit.from_string(str(values["epoch_unit"]))
            except ValueError as e:
                raise ConfigurationError(str(e), config_key="epoch_unit") from e
        if "log_level" in values:
            level = str(values["log_level"]).upper()
            if level not in _LOG_LEVELS:
                raise ConfigurationError(f"Unknown log level: {values['log_level']}", config_key="log_level")
            settings.log_level = level
        return settings

    @staticmethod
    def _read_yaml(config_path: str) -> dict:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        return data
