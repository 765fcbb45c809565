#!/usr/bin/env python3
"""
Run configuration loading.

Schema (config.json, every key optional)
========================================
{
  "run_id": "default",               # names the log directory runs/<run_id>/
  "master_seed": 42,                 # null draws a fresh seed every run
  "logging": {
    "level": "INFO",
    "format": "%(asctime)s [%(levelname)s] %(threadName)s: %(message)s",
    "log_dir": "runs"                # null disables the log file
  },
  "simulation": {
    "variant": "fireworks",          # dot | laser | fireworks
    "fps": 60,
    "max_frames": null,              # stop after this many frames; null runs until closed
    "show_hud": false,
    "stats_every": 60                # frames between scene stats debug lines; 0 disables
  }
}

Simulation constants (speeds, decay ranges, canvas size) are fixed in sparks.constants and
are not configurable.
"""
import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .constants import DEFAULT_FPS
from .logger_setup import DEFAULT_FORMAT
from .variants import DEFAULT_VARIANT, VARIANTS, variant_names

logger = logging.getLogger("sparks")

DEFAULT_CONFIG_PATH = "config.json"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file or override holds an unusable value."""


@dataclass(frozen=True)
class SimConfig:
    run_id: str = "default"
    master_seed: Optional[int] = 42
    log_level: str = "INFO"
    log_format: str = DEFAULT_FORMAT
    log_dir: Optional[str] = "runs"
    variant: str = DEFAULT_VARIANT
    fps: int = DEFAULT_FPS
    max_frames: Optional[int] = None
    show_hud: bool = False
    stats_every: int = 60

    def with_overrides(self, **overrides: Any) -> "SimConfig":
        """Return a validated copy; None values leave the field unchanged."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return validate(replace(self, **changes))


def validate(cfg: SimConfig) -> SimConfig:
    if cfg.variant not in VARIANTS:
        raise ConfigError(f"Unknown variant {cfg.variant!r}; expected one of {variant_names()}")
    if not isinstance(cfg.fps, int) or isinstance(cfg.fps, bool) or cfg.fps <= 0:
        raise ConfigError(f"fps must be a positive integer, got {cfg.fps!r}")
    if cfg.max_frames is not None and (not isinstance(cfg.max_frames, int) or cfg.max_frames <= 0):
        raise ConfigError(f"max_frames must be a positive integer or null, got {cfg.max_frames!r}")
    if not isinstance(cfg.show_hud, bool):
        raise ConfigError(f"show_hud must be true or false, got {cfg.show_hud!r}")
    if not isinstance(cfg.stats_every, int) or cfg.stats_every < 0:
        raise ConfigError(f"stats_every must be a non-negative integer, got {cfg.stats_every!r}")
    if cfg.master_seed is not None and (not isinstance(cfg.master_seed, int) or cfg.master_seed < 0):
        raise ConfigError(f"master_seed must be a non-negative integer or null, got {cfg.master_seed!r}")
    if str(cfg.log_level).upper() not in _LEVELS:
        raise ConfigError(f"logging level must be one of {list(_LEVELS)}, got {cfg.log_level!r}")
    return replace(cfg, log_level=str(cfg.log_level).upper())


def _read_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data


def config_from_dict(data: Dict[str, Any]) -> SimConfig:
    log_cfg = data.get("logging") or {}
    sim_cfg = data.get("simulation") or {}
    defaults = SimConfig()
    return validate(SimConfig(
        run_id=str(data.get("run_id", defaults.run_id)),
        master_seed=data.get("master_seed", defaults.master_seed),
        log_level=log_cfg.get("level", defaults.log_level),
        log_format=log_cfg.get("format", defaults.log_format),
        log_dir=log_cfg.get("log_dir", defaults.log_dir),
        variant=sim_cfg.get("variant", defaults.variant),
        fps=sim_cfg.get("fps", defaults.fps),
        max_frames=sim_cfg.get("max_frames", defaults.max_frames),
        show_hud=sim_cfg.get("show_hud", defaults.show_hud),
        stats_every=sim_cfg.get("stats_every", defaults.stats_every),
    ))


def load_config(path: str = DEFAULT_CONFIG_PATH) -> SimConfig:
    """
    Load a config file. A missing file yields the defaults; a malformed one raises ConfigError.
    """
    if not os.path.isfile(path):
        logger.warning(f"Config file {path} not found; using defaults")
        return SimConfig()
    return config_from_dict(_read_json(path))
