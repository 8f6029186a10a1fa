"""Tests for antdefense.simulation.config - presets and YAML loading."""

from pathlib import Path

import pytest

from antdefense.simulation.config import (
    COLONY_PRESETS,
    ColonyConfig,
    GameConfig,
    HiveConfig,
)


class TestPresets:
    """Tests for the named colony and hive presets."""

    def test_colony_presets(self) -> None:
        assert ColonyConfig.preset("default") == ColonyConfig(food=2, tunnels=1)
        assert ColonyConfig.preset("test").food == 10
        assert ColonyConfig.preset("full").tunnels == 3
        wet = ColonyConfig.preset("wet")
        assert (wet.food, wet.tunnels, wet.moat_frequency) == (10, 3, 3)

    def test_preset_is_a_copy(self) -> None:
        config = ColonyConfig.preset("test")
        config.food = 999
        assert COLONY_PRESETS["test"].food == 10

    def test_hive_presets(self) -> None:
        assert HiveConfig.preset("test").waves == {2: 1, 3: 1}
        full = HiveConfig.preset("full")
        assert full.waves[15] == 8
        assert [t for t, n in full.waves.items() if n == 1] == [2, 3, 5, 7, 9, 11, 13]
        insane = HiveConfig.preset("insane")
        assert insane.bee_armor == 4
        assert insane.waves[1] == 2
        assert insane.waves[15] == 20

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError):
            GameConfig.from_presets(colony="swamp")

    def test_game_defaults(self) -> None:
        config = GameConfig()
        assert config.seed is None
        assert config.colony == ColonyConfig()
        assert config.hive == HiveConfig()


class TestFromYaml:
    """Tests for YAML config loading."""

    def test_preset_names(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "game.yaml"
        yaml_file.write_text("seed: 5\ncolony: wet\nhive: insane\n")
        config = GameConfig.from_yaml(yaml_file)
        assert config.seed == 5
        assert config.colony.moat_frequency == 3
        assert config.hive.bee_armor == 4

    def test_explicit_values(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "game.yaml"
        yaml_file.write_text(
            "colony:\n"
            "  food: 7\n"
            "  tunnels: 2\n"
            "hive:\n"
            "  bee_armor: 2\n"
            "  waves:\n"
            "    1: 3\n"
            "    4: 1\n",
        )
        config = GameConfig.from_yaml(yaml_file)
        assert config.seed is None
        assert config.colony == ColonyConfig(food=7, tunnels=2)
        assert config.hive == HiveConfig(bee_armor=2, waves={1: 3, 4: 1})

    def test_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        config = GameConfig.from_yaml(yaml_file)
        assert config.colony == ColonyConfig()
        assert config.hive == HiveConfig()

    def test_blank_sections_use_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "blank.yaml"
        yaml_file.write_text("seed: 1\ncolony:\nhive: test\n")
        config = GameConfig.from_yaml(yaml_file)
        assert config.colony == ColonyConfig()
        assert config.hive == HiveConfig.preset("test")

        yaml_file.write_text("colony: wet\nhive:\n")
        config = GameConfig.from_yaml(yaml_file)
        assert config.colony == ColonyConfig.preset("wet")
        assert config.hive == HiveConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GameConfig.from_yaml(tmp_path / "nope.yaml")

    def test_shipped_default(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        config = GameConfig.from_yaml(path)
        assert config.seed == 42
        assert config.colony == ColonyConfig.preset("test")
        assert config.hive == HiveConfig.preset("test")
