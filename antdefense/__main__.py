"""Entry point for ``python -m antdefense``.

Builds a game from the default YAML config (or named presets) and hands
it to the text client.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antdefense.simulation.config import (
    COLONY_PRESETS,
    HIVE_PRESETS,
    ColonyConfig,
    GameConfig,
    HiveConfig,
)
from antdefense.simulation.game import Game
from antdefense.ui.text_client import TextClient

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="antdefense",
        description="Antdefense - defend the queen against waves of bees",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--colony",
        choices=sorted(COLONY_PRESETS),
        help="Colony preset, overriding the config file",
    )
    parser.add_argument(
        "--hive",
        choices=sorted(HIVE_PRESETS),
        help="Hive preset, overriding the config file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="RNG seed, overriding the config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every throw, sting and death",
    )
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    """Read the config file and apply CLI overrides.

    Falls back to the presets only when the default config is not shipped.

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist.
    """
    if args.config == _DEFAULT_CONFIG and not args.config.exists():
        config = GameConfig.from_presets()
    else:
        config = GameConfig.from_yaml(args.config)
    if args.colony is not None:
        config.colony = ColonyConfig.preset(args.colony)
    if args.hive is not None:
        config.hive = HiveConfig.preset(args.hive)
    if args.seed is not None:
        config.seed = args.seed
    return config


def main() -> None:
    """Parse CLI args, build the game, launch the text client."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )
    game = Game.from_config(load_config(args))
    TextClient(game).run()


if __name__ == "__main__":
    main()
