"""Hive -- where bees wait until their wave is released.

The hive is itself a Place: scheduled bees are parked in its bee list so
they count as remaining attackers until ``invade`` moves them into the
colony's entrances.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.insects.insect import Bee
from antdefense.world.place import Place

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Hive(Place):
    """Spawn reservoir with a wave schedule.

    Attributes:
        bee_armor: Armor given to every bee the hive creates.
        waves: Bees still to be released, keyed by turn number.
    """

    name: str = "Hive"
    bee_armor: int = 3
    waves: dict[int, list[Bee]] = field(default_factory=dict, repr=False)

    def schedule_wave(self, turn: int, count: int) -> Hive:
        """Create ``count`` bees to be released on ``turn``.

        Scheduling a turn that already has a wave replaces it; the old
        bees are dropped from the hive.

        Returns:
            The hive itself, so calls can be chained.

        Raises:
            ValueError: If ``turn`` or ``count`` is negative.
        """
        if turn < 0 or count < 0:
            msg = f"invalid wave: turn={turn}, count={count}"
            raise ValueError(msg)
        for bee in self.waves.pop(turn, []):
            bee.detach()
        wave: list[Bee] = []
        for _ in range(count):
            bee = Bee(armor=self.bee_armor)
            bee.set_location(self)
            wave.append(bee)
        self.waves[turn] = wave
        return self

    def invade(self, colony: Colony, turn: int) -> list[Bee]:
        """Release the wave scheduled for exactly ``turn``.

        Each bee goes to a uniformly chosen colony entrance.  A wave is
        released at most once.

        Returns:
            The released bees (empty if nothing was scheduled).
        """
        wave = self.waves.pop(turn, None)
        if wave is None:
            return []
        for bee in wave:
            index = int(colony.rng.integers(len(colony.entrances)))
            bee.set_location(colony.entrances[index])
        if wave:
            logger.debug("Turn %d: %d bees invade", turn, len(wave))
        return wave

    @property
    def remaining(self) -> int:
        """Bees still waiting in the hive."""
        return len(self.bees)
