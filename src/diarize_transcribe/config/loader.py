"""Configuration loader with YAML merging and environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from diarize_transcribe.config.schema import DiarizeTranscribeConfig
from diarize_transcribe.core.exceptions import ConfigError
from diarize_transcribe.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "DIARIZE_TRANSCRIBE"


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, override takes precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or not a mapping
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def apply_env_overrides(
    config: dict[str, Any],
    prefix: str = ENV_PREFIX,
    environ: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Apply environment variable overrides to config.

    Variables follow the pattern {PREFIX}__{SECTION}__{KEY}, e.g.
    DIARIZE_TRANSCRIBE__DIARIZATION__CLUSTERING_THRESHOLD=0.8
    """
    environ = os.environ if environ is None else environ
    result = config.copy()

    for key, value in environ.items():
        if not key.startswith(f"{prefix}__"):
            continue

        parts = key[len(prefix) + 2:].lower().split("__")

        target = result
        for part in parts[:-1]:
            existing = target.get(part)
            target[part] = dict(existing) if isinstance(existing, dict) else {}
            target = target[part]

        target[parts[-1]] = _convert_value(value)
        logger.debug(f"Env override: {'.'.join(parts)} = {value}")

    return result


def _convert_value(value: str) -> Any:
    """Convert string value to appropriate type."""
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if lowered in ("null", "none"):
        return None

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


def load_config(
    config_path: Path | str | None = None,
    env: str | None = None,
    config_dir: Path | str = "configs",
    overrides: dict[str, Any] | None = None,
) -> DiarizeTranscribeConfig:
    """Load configuration from YAML files with environment overrides.

    Loading order (each overrides previous):
    1. Default values from schema
    2. base.yaml (if exists)
    3. {env}.yaml (if env specified and exists)
    4. config_path (if specified)
    5. Environment variables
    6. `overrides` (command line flags)

    Raises:
        ConfigError: If configuration is invalid
    """
    config_dir = Path(config_dir)
    config: dict[str, Any] = {}

    base_path = config_dir / "base.yaml"
    if base_path.exists():
        logger.debug(f"Loading base config: {base_path}")
        config = deep_merge(config, load_yaml(base_path))

    if env:
        env_path = config_dir / f"{env}.yaml"
        if env_path.exists():
            logger.debug(f"Loading {env} config: {env_path}")
            config = deep_merge(config, load_yaml(env_path))

    if config_path:
        config_path = Path(config_path)
        logger.debug(f"Loading config: {config_path}")
        config = deep_merge(config, load_yaml(config_path))

    config = apply_env_overrides(config)

    if overrides:
        config = deep_merge(config, overrides)

    try:
        return DiarizeTranscribeConfig(**config)
    except PydanticValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
