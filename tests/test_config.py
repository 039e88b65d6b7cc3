"""Tests for pathrecall.core.config – YAML settings and length coercion."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from pathrecall.core.config import (
    DEFAULT_CONFIG_PATH,
    GameConfig,
    coerce_length,
    config_from_mapping,
    load_config,
)
from pathrecall.core.errors import ConfigError
from pathrecall.core.path_generator import Direction
from pathrecall.core.schedule import RevealPolicy
from pathrecall.core.session import RestartPolicy


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# GameConfig defaults
# ---------------------------------------------------------------------------

class TestGameConfig:
    def test_defaults(self):
        c = GameConfig()
        assert c.grid_size == 12
        assert c.cell_count == 144
        assert c.default_length == 8
        assert c.reveal_policy is RevealPolicy.STAGGERED
        assert c.step_delay_ms == 100
        assert c.flash_delay_ms == 400
        assert c.hold_ms == 2000
        assert c.fixed_anchor == 133
        assert c.fixed_direction is Direction.UP

    def test_reveal_timing(self):
        t = GameConfig(reveal_policy=RevealPolicy.FLASH, flash_delay_ms=250).reveal_timing()
        assert t.policy is RevealPolicy.FLASH
        assert t.total_ms(2) == 1000


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_packaged_file_exists(self):
        assert DEFAULT_CONFIG_PATH.exists()

    def test_packaged_matches_defaults(self):
        assert load_config() == GameConfig()

    def test_overrides(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """
            grid_size: 6
            fixed_anchor: 30
            reveal_policy: Flash
            fixed_direction: right
            restart_policy: reject
            wrong_clear_ms: 750
            """,
        )
        c = load_config(path)
        assert c.grid_size == 6
        assert c.fixed_anchor == 30
        assert c.reveal_policy is RevealPolicy.FLASH
        assert c.fixed_direction is Direction.RIGHT
        assert c.restart_policy is RestartPolicy.REJECT
        assert c.wrong_clear_ms == 750
        assert c.hold_ms == 2000

    def test_accepts_str_path(self, tmp_path: Path):
        path = _write(tmp_path, "hold_ms: 10\n")
        assert load_config(str(path)).hold_ms == 10

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        assert load_config(_write(tmp_path, "")) == GameConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, "- 1\n- 2\n"))

    def test_invalid_yaml(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, "grid_size: [12\n"))

    def test_unknown_key(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="colour"):
            load_config(_write(tmp_path, "colour: red\n"))

    def test_unknown_enum_value(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="reveal_policy"):
            load_config(_write(tmp_path, "reveal_policy: slow\n"))

    def test_negative_hold_reported_as_config_error(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="hold_ms"):
            load_config(_write(tmp_path, "hold_ms: -5\n"))


# ---------------------------------------------------------------------------
# config_from_mapping validation
# ---------------------------------------------------------------------------

class TestConfigFromMapping:
    def test_applies_on_base(self):
        base = GameConfig(grid_size=5)
        assert config_from_mapping({"hold_ms": 1}, base) == GameConfig(grid_size=5, hold_ms=1)

    @pytest.mark.parametrize("value", ["12", 1.5, True, None])
    def test_integer_fields_reject_other_types(self, value):
        with pytest.raises(ConfigError):
            config_from_mapping({"grid_size": value})

    def test_enum_field_rejects_non_string(self):
        with pytest.raises(ConfigError):
            config_from_mapping({"fixed_direction": 3})

    @pytest.mark.parametrize("name", ["hold_ms", "step_delay_ms", "flash_delay_ms"])
    def test_negative_delay_rejected(self, name):
        with pytest.raises(ConfigError, match=name):
            config_from_mapping({name: -5})

    def test_default_length_outside_bounds(self):
        with pytest.raises(ConfigError):
            config_from_mapping({"default_length": 30})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            config_from_mapping({"bogus": 1})


# ---------------------------------------------------------------------------
# coerce_length
# ---------------------------------------------------------------------------

class TestCoerceLength:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("5", 5),
            (" 12 ", 12),
            (7, 7),
            ("", 8),
            ("abc", 8),
            (None, 8),
            (0, 8),
            ("0", 8),
            ("-3", -3),
            ("3.7", 3),
            ("5 cells", 5),
            ("+4", 4),
        ],
    )
    def test_values(self, value, expected):
        assert coerce_length(value, 8) == expected
