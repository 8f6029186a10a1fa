"""Game status and the reasons a player command can be rejected."""

from __future__ import annotations

from enum import Enum, auto


class Status(Enum):
    """Overall state of a game."""

    ONGOING = auto()
    WON = auto()
    LOST = auto()


class Rejection(Enum):
    """Why a deploy or remove command did not take effect."""

    UNKNOWN_UNIT = auto()
    MALFORMED_LOCATION = auto()
    OUT_OF_BOUNDS = auto()
    INSUFFICIENT_FOOD = auto()
    INCOMPATIBLE_TERRAIN = auto()
    OCCUPIED = auto()
    EMPTY_PLACE = auto()
    IMMOVABLE = auto()
