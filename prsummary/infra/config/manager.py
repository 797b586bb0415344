"""Configuration management for prsummary"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from ...domain.types import SummarizerConfig
from ...shared import constants

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration value cannot be used"""
    pass


def _parse_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("expected an integer, got bool")
    return int(value)


def _parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("expected a number, got bool")
    return float(value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('1', 'true', 'yes', 'on'):
        return True
    if text in ('0', 'false', 'no', 'off', ''):
        return False
    raise ValueError(f"not a boolean: {value!r}")


_PARSERS: Dict[str, Callable[[Any], Any]] = {
    'api_url': _parse_str,
    'model': _parse_str,
    'max_tokens': _parse_int,
    'anthropic_version': _parse_str,
    'ollama_url': _parse_str,
    'embed_model': _parse_str,
    'compress_model': _parse_str,
    'local_pipeline': _parse_bool,
    'min_commits': _parse_int,
    'timeout': _parse_float,
}


class ConfigManager:
    """Build SummarizerConfig from defaults, .prsummary.yml and the environment"""

    CONFIG_FILE = constants.CONFIG_FILE
    API_KEY_ENV = 'ANTHROPIC_API_KEY'

    def __init__(self, repo_root: str, environ: Optional[Dict[str, str]] = None):
        """Initialize config manager for repository"""
        self.repo_root = Path(repo_root)
        self.environ = os.environ if environ is None else environ
        self.file_config = self._load_file_config()

    @property
    def config_path(self) -> Path:
        return self.repo_root / self.CONFIG_FILE

    def _load_file_config(self) -> Dict[str, Any]:
        """Load configuration from .prsummary.yml, if present"""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                raw_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load %s: %s", self.config_path, e)
            return {}

        if not isinstance(raw_config, dict):
            logger.warning("Ignoring %s: expected a mapping", self.config_path)
            return {}

        unknown = set(raw_config) - set(_PARSERS)
        if unknown:
            logger.warning("Unknown keys in %s: %s", self.CONFIG_FILE, ', '.join(sorted(map(str, unknown))))
        return {k: v for k, v in raw_config.items() if k in _PARSERS}

    def _env_overrides(self) -> Dict[str, str]:
        """PRSUMMARY_<KEY> variables, keyed by config field name"""
        overrides = {}
        for key in _PARSERS:
            value = self.environ.get(constants.ENV_PREFIX + key.upper())
            if value is not None and value != '':
                overrides[key] = value
        return overrides

    def get(self) -> SummarizerConfig:
        """Get effective configuration; environment variables take precedence"""
        merged: Dict[str, Any] = {}
        merged.update(self.file_config)
        merged.update(self._env_overrides())

        values = {}
        for key, raw in merged.items():
            try:
                values[key] = _PARSERS[key](raw)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {key}: {raw!r} ({e})") from e

        if values.get('max_tokens', 1) < 1:
            raise ConfigError("max_tokens must be a positive integer")
        if values.get('timeout', 1.0) <= 0:
            raise ConfigError("timeout must be positive")

        return SummarizerConfig(api_key=self.environ.get(self.API_KEY_ENV) or None, **values)
