# config_utils.py
# Purpose: Load sampling defaults and merge optional YAML overrides
# Date: 2026-10-17
# Dependencies: yaml, dataclasses, pathlib, typing

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

EXAMPLE_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "sample_config.yaml"

DEFAULT_SAMPLE_SIZE = 5


@dataclass
class SampleConfig:
    sample_size: int = DEFAULT_SAMPLE_SIZE
    # Comma-separated; a leading "!" switches the list to exclude mode
    sample_exts: str = ""
    # Exit non-zero if any single file failed to copy
    fail_on_copy_error: bool = False

    def __post_init__(self):
        self.sample_size = parse_sample_size(self.sample_size)


def parse_sample_size(value: Any) -> int:
    """
    Validate a sample size coming from the command line or a config file.

    Args:
        value: int or string form of the per-group cap.
    Returns:
        The cap as a non-negative int.
    Raises:
        ConfigError: if the value is not a whole number or is negative.
    """
    if isinstance(value, bool):
        raise ConfigError(f"Invalid sample size: {value!r}")
    if isinstance(value, int):
        size = value
    else:
        try:
            size = int(str(value).strip())
        except ValueError:
            raise ConfigError(f"Invalid sample size: {value!r} (expected a whole number)") from None
    if size < 0:
        raise ConfigError(f"Invalid sample size: {size} (must be 0 or greater)")
    return size


def load_config(path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None) -> SampleConfig:
    """
    Build the run configuration: dataclass defaults, then the YAML file (if given),
    then explicit overrides (command line arguments that were actually passed).
    """
    values: Dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        try:
            raw = yaml.safe_load(path.read_text())
        except OSError as e:
            raise ConfigError(f"Unable to read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        known = {f.name for f in fields(SampleConfig)}
        for key, val in raw.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key '{key}' in {path}")
                continue
            values[key] = val
        logger.info(f"Loaded configuration from {path}")

    for key, val in (overrides or {}).items():
        if val is not None:
            values[key] = val

    cfg = replace(SampleConfig(), **values)
    if cfg.sample_exts is None:
        cfg.sample_exts = ""
    if not isinstance(cfg.sample_exts, str):
        # Allow a YAML list: [csv, txt]
        if isinstance(cfg.sample_exts, (list, tuple)):
            cfg.sample_exts = ",".join(str(e) for e in cfg.sample_exts)
        else:
            raise ConfigError(f"Invalid sample_exts: {cfg.sample_exts!r}")
    if not isinstance(cfg.fail_on_copy_error, bool):
        raise ConfigError(f"Invalid fail_on_copy_error: {cfg.fail_on_copy_error!r} (expected true/false)")
    return cfg
