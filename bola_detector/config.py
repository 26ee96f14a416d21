"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from bola_detector.errors import ConfigError
from bola_detector.formatter import OUTPUT_FORMATS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_file: str | None = None
    output_format: str = "text"
    show_stats: bool = False
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _pick(cli_value, env_name: str, yaml_data: dict, yaml_key: str, default):
    """CLI beats env beats YAML beats default."""
    if cli_value is not None:
        return cli_value
    if env_name in os.environ:
        return os.environ[env_name]
    if yaml_key in yaml_data:
        return yaml_data[yaml_key]
    return default


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data."""
    output_format = str(_pick(
        getattr(cli_args, "output", None), "BOLA_OUTPUT", yaml_data, "output",
        Config.output_format,
    )).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unknown output format: {output_format}")

    log_level = str(_pick(
        getattr(cli_args, "log_level", None), "BOLA_LOG_LEVEL", yaml_data, "log_level",
        Config.log_level,
    )).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {log_level}")

    # --stats is a store_true flag, so False means "not given"
    stats_flag = True if getattr(cli_args, "stats", False) else None
    show_stats = _parse_bool(_pick(
        stats_flag, "BOLA_STATS", yaml_data, "stats", Config.show_stats,
    ))

    log_file = _pick(
        getattr(cli_args, "log_file", None), "BOLA_LOG_FILE", yaml_data, "log_file", None,
    )

    return Config(
        log_file=str(log_file) if log_file else None,
        output_format=output_format,
        show_stats=show_stats,
        log_level=log_level,
    )
