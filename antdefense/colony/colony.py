"""Colony -- the tunnels, the food supply and the deployment rules.

A Colony builds its tunnel graph once at construction.  Every tunnel is
a chain of places running from the shared queen place out to a bee
entrance; every ``moat_frequency``-th step is water.  Deployment is
gated on food and terrain, then left to the ant's placement strategy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import Generator

from antdefense.colony.leader import LeaderRegistry
from antdefense.simulation.outcome import Rejection
from antdefense.world.place import Place

if TYPE_CHECKING:
    from antdefense.insects.insect import Ant, Bee

logger = logging.getLogger(__name__)

MAX_TUNNEL_LENGTH = 8


@dataclass(eq=False)
class Colony:
    """The defending side of a game.

    Attributes:
        food: Food available for deployments (never negative).
        tunnels: Number of tunnels.
        tunnel_length: Places per tunnel, capped at ``MAX_TUNNEL_LENGTH``.
        moat_frequency: Every n-th step of a tunnel is water (0 = none).
        rng: Random source for target and entrance selection.
        leader: Queen registry for this game.
        places: Places indexed as ``places[tunnel][step]``.
        entrances: The last place of each tunnel, where bees arrive.
        queen_place: The place every tunnel exits into.
    """

    food: int
    tunnels: int = 1
    tunnel_length: int = MAX_TUNNEL_LENGTH
    moat_frequency: int = 0
    rng: Generator = field(default_factory=np.random.default_rng, repr=False)
    leader: LeaderRegistry = field(default_factory=LeaderRegistry, repr=False)
    places: list[list[Place]] = field(init=False, repr=False)
    entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate parameters and lay out the tunnels."""
        if self.food < 0:
            msg = f"starting food must be non-negative, got {self.food}"
            raise ValueError(msg)
        if self.tunnels < 1 or self.tunnel_length < 1:
            msg = (
                f"need at least one tunnel of length 1, got "
                f"{self.tunnels}x{self.tunnel_length}"
            )
            raise ValueError(msg)
        if self.moat_frequency < 0:
            msg = f"moat frequency must be non-negative, got {self.moat_frequency}"
            raise ValueError(msg)
        self.tunnel_length = min(self.tunnel_length, MAX_TUNNEL_LENGTH)
        self.queen_place = Place("Ant Queen")
        self.places = []
        self.entrances = []
        for tunnel in range(self.tunnels):
            self.places.append(self._dig_tunnel(tunnel))
            self.entrances.append(self.places[tunnel][-1])

    def _dig_tunnel(self, tunnel: int) -> list[Place]:
        """Build one chain of places, exiting into the queen place."""
        row: list[Place] = []
        previous = self.queen_place
        for step in range(self.tunnel_length):
            water = self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
            kind = "water" if water else "tunnel"
            place = Place(f"{kind}[{tunnel},{step}]", exit=previous, is_water=water)
            previous.entrance = place
            row.append(place)
            previous = place
        return row

    # -- Queries --

    def place_at(self, tunnel: int, step: int) -> Place:
        """Return the place at ``places[tunnel][step]``.

        Raises:
            IndexError: If either index is out of range.
        """
        if not (0 <= tunnel < len(self.places) and 0 <= step < self.tunnel_length):
            msg = (
                f"({tunnel}, {step}) out of bounds for "
                f"{len(self.places)}x{self.tunnel_length}"
            )
            raise IndexError(msg)
        return self.places[tunnel][step]

    @property
    def ants(self) -> list[Ant]:
        """Every ant on the board, carried ants included."""
        return [ant for row in self.places for place in row for ant in place.defenders()]

    @property
    def bees(self) -> list[Bee]:
        """Every bee in the tunnels and at the queen place."""
        found = [bee for row in self.places for place in row for bee in place.bees]
        found.extend(self.queen_place.bees)
        return found

    @property
    def queen_has_bees(self) -> bool:
        """True once a bee reaches the queen place or the real queen."""
        if self.queen_place.bees:
            return True
        leader_place = self.leader.place
        return leader_place is not None and bool(leader_place.bees)

    # -- Mutations --

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def check_deploy(self, place: Place, ant: Ant) -> Rejection | None:
        """Return why deploying ``ant`` at ``place`` would fail up front."""
        if self.food < ant.food_cost:
            return Rejection.INSUFFICIENT_FOOD
        if place.is_water and not ant.water_safe:
            return Rejection.INCOMPATIBLE_TERRAIN
        return None

    def try_deploy(self, place: Place, ant: Ant) -> Rejection | None:
        """Pay for ``ant`` and place it.

        Food is debited before the placement is attempted and is not
        refunded if the place then refuses the ant.

        Returns:
            None on success, otherwise the reason for refusal.
        """
        rejection = self.check_deploy(place, ant)
        if rejection is not None:
            logger.debug("Cannot deploy %s at %s: %s", ant.name, place.name, rejection.name)
            return rejection
        self.food -= ant.food_cost
        ant.set_location(place)
        if ant.place is not place:
            logger.debug("%s refused %s", place, ant.name)
            return Rejection.OCCUPIED
        logger.debug("Deployed %s", ant)
        return None

    def deploy(self, place: Place, ant: Ant) -> bool:
        """Deploy ``ant`` at ``place``; return True if it is now there."""
        return self.try_deploy(place, ant) is None

    def try_remove(self, place: Place) -> Rejection | None:
        """Take the primary ant off ``place`` via its placement strategy."""
        ant = place.ant
        if ant is None:
            return Rejection.EMPTY_PLACE
        if not ant.set_location(None):
            return Rejection.IMMOVABLE
        logger.debug("Removed %s from %s", ant.name, place.name)
        return None

    def remove(self, place: Place) -> bool:
        return self.try_remove(place) is None
