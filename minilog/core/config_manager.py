import os
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .formatting import Formatter, default_formatter, simple_formatter
from .levels import Level
from .logger import Logger
from .logging import logger
from .sinks import OutputSink, logging_sink, stderr_sink, stdout_sink

FORMATTERS: Dict[str, Formatter] = {
    "default": default_formatter,
    "simple": simple_formatter,
}

OUTPUTS = {
    "stdout": lambda: stdout_sink,
    "stderr": lambda: stderr_sink,
    "logging": logging_sink,
}

DEFAULTS = {
    "level": "DEBUG",
    "format": "default",
    "output": "stdout",
}

ENV_OVERRIDES = {
    "level": "MINILOG_LEVEL",
    "format": "MINILOG_FORMAT",
    "output": "MINILOG_OUTPUT",
}


class ConfigManager:
    """
    Loads Logger settings from an optional YAML file and the environment.

    The file holds a top-level ``minilog`` mapping with ``level``, ``format``
    and ``output`` keys. MINILOG_LEVEL, MINILOG_FORMAT and MINILOG_OUTPUT
    override the file.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = self._load_config()

        logger.debug("Configuration manager initialized", extra={
            "config": {
                "config_path": config_path,
                "config_exists": bool(config_path) and os.path.exists(config_path),
                "settings": dict(self.config),
            }
        })

    def _read_file(self) -> Dict[str, Any]:
        if not self.config_path:
            return {}
        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            logger.warning("Configuration file not found: %s", e.filename, extra={
                "config": {
                    "error_type": "file_not_found",
                    "file_path": str(e.filename)
                }
            })
            return {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file {self.config_path}: {e}",
                                     original_exception=e) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {self.config_path} must contain a mapping")
        section = data.get("minilog", {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError("'minilog' section must be a mapping", setting="minilog")
        return section

    def _load_config(self) -> Dict[str, Any]:
        config = dict(DEFAULTS)
        for key, value in self._read_file().items():
            if key not in DEFAULTS:
                logger.warning("Ignoring unknown setting: %s", key)
                continue
            if value is None:
                raise ConfigurationError(f"Setting '{key}' has no value", setting=key)
            config[key] = str(value)
        for key, env_name in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                config[key] = value
        self._validate(config)
        return config

    def _validate(self, config: Dict[str, Any]):
        self._resolve_level(config["level"])
        self._resolve_formatter(config["format"])
        if config["output"].lower() not in OUTPUTS:
            raise ConfigurationError(f"Unknown output: {config['output']!r}", setting="output")

    @staticmethod
    def _resolve_level(name: str) -> Level:
        try:
            return Level.from_name(name)
        except ValueError as e:
            raise ConfigurationError(str(e), setting="level", original_exception=e) from e

    @staticmethod
    def _resolve_formatter(name: str) -> Formatter:
        try:
            return FORMATTERS[name.lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown format: {name!r}", setting="format") from None

    def get_config(self) -> Dict[str, Any]:
        return self.config

    @property
    def level(self) -> Level:
        return self._resolve_level(self.config["level"])

    @property
    def formatter(self) -> Formatter:
        return self._resolve_formatter(self.config["format"])

    def build_output(self) -> OutputSink:
        return OUTPUTS[self.config["output"].lower()]()

    def reload_config(self):
        logger.info("Reloading configuration from %s", self.config_path)
        self.config = self._load_config()

    def create_logger(self) -> Logger:
        """Build a new Logger from the current settings."""
        return Logger(self.build_output(), self.formatter, self.level)

    def apply(self, target: Logger) -> Logger:
        """Reconfigure an existing Logger, such as the shared one."""
        target.set_output(self.build_output())
        target.set_format(self.formatter)
        target.set_level(self.level)
        return target
