"""Config -- colony and hive parameters, loaded from YAML or presets.

A game is fully described by a colony layout, a hive wave schedule and
an RNG seed.  The named presets reproduce the classic scenarios; a YAML
file may refer to a preset by name or spell the values out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class ColonyConfig:
    """Colony layout.

    Attributes:
        food: Starting food.
        tunnels: Number of tunnels.
        tunnel_length: Places per tunnel (capped at 8 by the colony).
        moat_frequency: Every n-th step is water (0 = no water).
    """

    food: int = 2
    tunnels: int = 1
    tunnel_length: int = 8
    moat_frequency: int = 0

    @classmethod
    def preset(cls, name: str) -> ColonyConfig:
        """Return a copy of the named colony preset.

        Raises:
            KeyError: If ``name`` is not a known preset.
        """
        base = COLONY_PRESETS[name]
        return cls(
            food=base.food,
            tunnels=base.tunnels,
            tunnel_length=base.tunnel_length,
            moat_frequency=base.moat_frequency,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColonyConfig:
        return cls(
            food=data.get("food", cls.food),
            tunnels=data.get("tunnels", cls.tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
        )


@dataclass
class HiveConfig:
    """Hive wave schedule.

    Attributes:
        bee_armor: Armor of every bee.
        waves: Number of bees released, keyed by turn.
    """

    bee_armor: int = 3
    waves: dict[int, int] = field(default_factory=dict)

    @classmethod
    def preset(cls, name: str) -> HiveConfig:
        """Return a copy of the named hive preset.

        Raises:
            KeyError: If ``name`` is not a known preset.
        """
        base = HIVE_PRESETS[name]
        return cls(bee_armor=base.bee_armor, waves=dict(base.waves))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HiveConfig:
        waves = data.get("waves") or {}
        return cls(
            bee_armor=data.get("bee_armor", cls.bee_armor),
            waves={int(turn): int(count) for turn, count in waves.items()},
        )


def _escalating_waves(opening: dict[int, int], finale: int) -> dict[int, int]:
    """One bee on every odd turn from 3 to 13, framed by opening and finale."""
    waves = dict(opening)
    for turn in range(3, 15, 2):
        waves[turn] = 1
    waves[15] = finale
    return waves


COLONY_PRESETS: dict[str, ColonyConfig] = {
    "default": ColonyConfig(food=2, tunnels=1),
    "test": ColonyConfig(food=10, tunnels=1),
    "full": ColonyConfig(food=2, tunnels=3),
    "wet": ColonyConfig(food=10, tunnels=3, moat_frequency=3),
}

HIVE_PRESETS: dict[str, HiveConfig] = {
    "test": HiveConfig(bee_armor=3, waves={2: 1, 3: 1}),
    "full": HiveConfig(bee_armor=3, waves=_escalating_waves({2: 1}, 8)),
    "insane": HiveConfig(bee_armor=4, waves=_escalating_waves({1: 2}, 20)),
}


@dataclass
class GameConfig:
    """Everything needed to set up a game.

    Attributes:
        seed: RNG seed for deterministic replay (None = fresh entropy).
        colony: Colony layout.
        hive: Hive wave schedule.
    """

    seed: int | None = None
    colony: ColonyConfig = field(default_factory=ColonyConfig)
    hive: HiveConfig = field(default_factory=HiveConfig)

    @classmethod
    def from_presets(
        cls,
        colony: str = "test",
        hive: str = "test",
        seed: int | None = None,
    ) -> GameConfig:
        """Build a config from named colony and hive presets.

        Raises:
            KeyError: If either preset name is unknown.
        """
        return cls(
            seed=seed,
            colony=ColonyConfig.preset(colony),
            hive=HiveConfig.preset(hive),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        ``colony`` and ``hive`` may each be a preset name or a mapping of
        explicit values; missing keys fall back to the defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            KeyError: If a preset name is unknown.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        colony = data.get("colony") or {}
        hive = data.get("hive") or {}
        return cls(
            seed=data.get("seed"),
            colony=(
                ColonyConfig.preset(colony)
                if isinstance(colony, str)
                else ColonyConfig.from_dict(colony)
            ),
            hive=(
                HiveConfig.preset(hive)
                if isinstance(hive, str)
                else HiveConfig.from_dict(hive)
            ),
        )
