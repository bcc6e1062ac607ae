"""Configuration loading from CLI args, env vars, and optional YAML file.

Precedence (highest first): CLI args, environment variables, YAML file,
dataclass defaults.
"""

import os
import logging
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    input_file: str
    output_file: str
    strict_format: bool = False
    input_encoding: str = "utf-8"
    log_level: str = "INFO"
    stats_output: str | None = None


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data.

    Raises:
        ValueError: If the resulting log level is not a known level name.
    """
    strict_format = _parse_bool(
        os.environ.get("GOR_STRICT_FORMAT", yaml_data.get("strict_format", Config.strict_format))
    )
    if cli_args.strict:
        strict_format = True

    input_encoding = cli_args.encoding or os.environ.get(
        "GOR_INPUT_ENCODING", yaml_data.get("input_encoding", Config.input_encoding)
    )

    log_level = (cli_args.log_level or os.environ.get(
        "LOG_LEVEL", yaml_data.get("log_level", Config.log_level)
    )).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}")

    stats_output = cli_args.stats_output or os.environ.get(
        "GOR_STATS_OUTPUT", yaml_data.get("stats_output", Config.stats_output)
    )

    return Config(
        input_file=cli_args.input_file,
        output_file=cli_args.output_file,
        strict_format=strict_format,
        input_encoding=input_encoding,
        log_level=log_level,
        stats_output=stats_output,
    )
