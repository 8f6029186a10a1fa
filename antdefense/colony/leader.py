"""LeaderRegistry -- which queen is the real one.

Owned by a Colony and handed to every queen's strategies when the ant is
built, so separate games never share leadership state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antdefense.insects.insect import Ant, Insect
    from antdefense.world.place import Place


@dataclass(eq=False)
class LeaderRegistry:
    """Per-game queen record.

    Attributes:
        place: Where the true queen was first placed.  Set once.
        leader: The ant that claimed the place.
        boosted: Ants whose damage the queen has already doubled.
    """

    place: Place | None = None
    leader: Insect | None = None
    boosted: set[Ant] = field(default_factory=set)

    @property
    def has_leader(self) -> bool:
        return self.place is not None

    def claim(self, insect: Insect) -> bool:
        """Record ``insect`` as the queen if no queen exists yet.

        Returns:
            True if ``insect`` stands on the queen place; False for an
            impostor.
        """
        if self.has_leader:
            return insect.place is self.place
        self.place = insect.place
        self.leader = insect
        return True

    def grant_bonus(self, ant: Ant) -> bool:
        """Mark ``ant`` as boosted.

        Returns:
            True the first time for a given ant, False afterwards.
        """
        if ant in self.boosted:
            return False
        self.boosted.add(ant)
        return True
