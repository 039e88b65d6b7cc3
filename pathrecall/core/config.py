from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from pathrecall.core.errors import ConfigError
from pathrecall.core.path_generator import DEFAULT_ANCHOR, Direction
from pathrecall.core.schedule import RevealPolicy, RevealTiming
from pathrecall.core.session import RestartPolicy

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "config.yaml"


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = 12
    default_length: int = 8
    min_length: int = 1
    max_length: int = 20
    reveal_policy: RevealPolicy = RevealPolicy.STAGGERED
    step_delay_ms: int = 100
    flash_delay_ms: int = 400
    hold_ms: int = 2000
    fixed_anchor: int = DEFAULT_ANCHOR
    fixed_direction: Direction = Direction.UP
    restart_policy: RestartPolicy = RestartPolicy.RESET
    wrong_clear_ms: int = 0

    @property
    def cell_count(self) -> int:
        return self.grid_size * self.grid_size

    def reveal_timing(self) -> RevealTiming:
        return RevealTiming(
            policy=self.reveal_policy,
            step_delay_ms=self.step_delay_ms,
            hold_ms=self.hold_ms,
            flash_delay_ms=self.flash_delay_ms,
        )


_ENUM_FIELDS: dict[str, type[Enum]] = {
    "reveal_policy": RevealPolicy,
    "fixed_direction": Direction,
    "restart_policy": RestartPolicy,
}


def _coerce_field(name: str, value: Any) -> Any:
    if name in _ENUM_FIELDS:
        enum_type = _ENUM_FIELDS[name]
        if not isinstance(value, str):
            raise ConfigError(f"'{name}' must be one of {[m.name.lower() for m in enum_type]}")
        try:
            return enum_type[value.strip().upper()]
        except KeyError:
            raise ConfigError(
                f"'{name}': unknown value {value!r}; expected one of "
                f"{[m.name.lower() for m in enum_type]}"
            ) from None
    # bool is an int subclass but never a sensible delay or size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}")
    return value


def config_from_mapping(raw: dict, base: Optional[GameConfig] = None) -> GameConfig:
    """Apply the keys of *raw* on top of *base* (defaults when omitted)."""
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    overrides = {name: _coerce_field(name, value) for name, value in raw.items()}
    config = replace(base or GameConfig(), **overrides)
    if not config.min_length <= config.default_length <= config.max_length:
        raise ConfigError(
            f"default_length {config.default_length} must lie within "
            f"[{config.min_length}, {config.max_length}]"
        )
    try:
        config.reveal_timing()
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Read a YAML config file; the packaged defaults are used when *path* is None."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("Packaged config missing at %s, using built-in defaults", config_path)
        return GameConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path.name}: invalid YAML: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path.name}: expected a mapping of settings")
    config = config_from_mapping(raw)
    logger.info("Loaded game config from %s", config_path)
    return config


def coerce_length(value: Any, default: int) -> int:
    """Turn user input into a path length.

    Only the leading integer counts ("3.7" and "5 cells" read as 3 and 5).
    Input without one, and zero, fall back to *default*; negative lengths
    pass through so the generator reports them.
    """
    match = _LEADING_INT.match(str(value))
    if match is None:
        return default
    return int(match.group(1)) or default
