"""Game -- the turn loop and the player's command surface.

One call to ``advance_turn`` runs a whole turn in the canonical order:

1. Every ant on the board acts
2. Every bee on the board acts
3. The hive releases the wave scheduled for this turn
4. The turn counter advances

Both acting phases work from a snapshot taken at the start of the
phase, so an insect acts at most once per turn and insects arriving
mid-phase wait for the next turn.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from antdefense.colony.colony import Colony
from antdefense.colony.hive import Hive
from antdefense.insects.catalog import UNIT_TYPES, make_ant
from antdefense.simulation.config import GameConfig
from antdefense.simulation.outcome import Rejection, Status
from antdefense.world.place import Place

logger = logging.getLogger(__name__)

_LOCATION = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


class LocationError(ValueError):
    """A location string that does not name a colony place."""

    def __init__(self, location: str, rejection: Rejection) -> None:
        super().__init__(f"invalid location {location!r}: {rejection.name}")
        self.location = location
        self.rejection = rejection


@dataclass(eq=False)
class Game:
    """A battle between one colony and one hive.

    Attributes:
        colony: The defending colony.
        hive: The attacking hive.
        turn: Number of completed turns.
        last_rejection: Why the most recent deploy/remove failed, or None
            if it succeeded.
    """

    colony: Colony
    hive: Hive
    turn: int = 0
    last_rejection: Rejection | None = None

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        """Build a seeded colony and hive from ``config``."""
        colony = Colony(
            food=config.colony.food,
            tunnels=config.colony.tunnels,
            tunnel_length=config.colony.tunnel_length,
            moat_frequency=config.colony.moat_frequency,
            rng=np.random.default_rng(config.seed),
        )
        hive = Hive(bee_armor=config.hive.bee_armor)
        for turn, count in sorted(config.hive.waves.items()):
            hive.schedule_wave(turn, count)
        return cls(colony=colony, hive=hive)

    # -- Turn loop --

    def advance_turn(self) -> None:
        """Play one full turn."""
        for ant in self.colony.ants:
            if ant.place is not None:
                ant.act(self.colony)

        for bee in self.colony.bees:
            bee.act(self.colony)

        self.hive.invade(self.colony, self.turn)
        self.turn += 1

    def run(self, turns: int) -> Status:
        """Advance up to ``turns`` turns, stopping early once decided.

        Args:
            turns: Maximum number of turns to play.

        Returns:
            The status after the last turn played.
        """
        for _ in range(turns):
            if self.status() is not Status.ONGOING:
                break
            self.advance_turn()
        return self.status()

    def status(self) -> Status:
        """Report whether the game is lost, won or still going.

        Loss takes precedence: a queen reached by bees is a loss even if
        no other bees remain.
        """
        if self.colony.queen_has_bees:
            return Status.LOST
        if not self.colony.bees and self.hive.remaining == 0:
            return Status.WON
        return Status.ONGOING

    # -- Player commands --

    def deploy(self, unit_type: str, location: str) -> bool:
        """Deploy an ant of ``unit_type`` at ``location`` (``"tunnel,step"``).

        Returns:
            True if the ant was placed.  On False, ``last_rejection``
            says why.
        """
        if unit_type not in UNIT_TYPES:
            return self._reject(Rejection.UNKNOWN_UNIT, unit_type, location)
        try:
            place = self.resolve(location)
        except LocationError as e:
            return self._reject(e.rejection, unit_type, location)
        ant = make_ant(unit_type, self.colony.leader)
        rejection = self.colony.try_deploy(place, ant)
        if rejection is not None:
            return self._reject(rejection, unit_type, location)
        self.last_rejection = None
        return True

    def remove(self, location: str) -> bool:
        """Remove the ant at ``location``.

        Returns:
            True if an ant was removed.  On False, ``last_rejection``
            says why.
        """
        try:
            place = self.resolve(location)
        except LocationError as e:
            return self._reject(e.rejection, "remove", location)
        rejection = self.colony.try_remove(place)
        if rejection is not None:
            return self._reject(rejection, "remove", location)
        self.last_rejection = None
        return True

    def resolve(self, location: str) -> Place:
        """Parse ``"tunnel,step"`` into a colony place.

        Raises:
            LocationError: If the string is malformed or out of range.
        """
        match = _LOCATION.match(location)
        if match is None:
            raise LocationError(location, Rejection.MALFORMED_LOCATION)
        tunnel, step = int(match.group(1)), int(match.group(2))
        if not (
            0 <= tunnel < len(self.colony.places)
            and 0 <= step < self.colony.tunnel_length
        ):
            raise LocationError(location, Rejection.OUT_OF_BOUNDS)
        return self.colony.place_at(tunnel, step)

    def _reject(self, rejection: Rejection, command: str, location: str) -> bool:
        self.last_rejection = rejection
        logger.info("Rejected %s at %r: %s", command, location, rejection.name)
        return False
