"""Place -- one node of the tunnel graph.

Places are linked into chains: ``exit`` points toward the queen and
``entrance`` toward the side bees arrive from.  A place holds at most one
primary ant (which may carry one contained ant) and any number of bees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.insects.insect import Ant, Bee

if TYPE_CHECKING:
    from numpy.random import Generator

    from antdefense.insects.insect import Insect


@dataclass(eq=False)
class Place:
    """A location on the board.  Compared by identity.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]``.
        exit: Neighbour toward the queen (None at the end of the line).
        entrance: Neighbour toward the bee side.
        is_water: Whether only water-safe ants may be deployed here.
        ant: The primary ant occupying the place.
        bees: Bees currently in the place, in arrival order.
    """

    name: str
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    is_water: bool = False
    ant: Ant | None = field(default=None, repr=False)
    bees: list[Bee] = field(default_factory=list, repr=False)

    def try_occupy(self, insect: Insect) -> bool:
        """Admit ``insect`` if the occupancy rules allow it.

        Bees are always admitted.  An ant takes an empty slot, wraps the
        current occupant if it is a container, or slips into a container
        that has room.  Anything else is refused without side effects.

        Returns:
            True if the insect now occupies this place.
        """
        if isinstance(insect, Bee):
            self.bees.append(insect)
            return True
        if not isinstance(insect, Ant):
            return False

        current = self.ant
        if current is None:
            self.ant = insect
            return True
        if current.is_container and not insect.is_container:
            if current.contained is not None:
                return False
            current.contained = insect
            return True
        if insect.is_container and not current.is_container:
            insect.contained = current
            self.ant = insect
            return True
        return False

    def release(self, insect: Insect) -> None:
        """Remove ``insect`` from this place.

        A departing container hands its slot to the ant it carried.
        """
        if isinstance(insect, Bee):
            if insect in self.bees:
                self.bees.remove(insect)
            return

        current = self.ant
        if current is insect:
            held = current.contained
            if held is not None:
                current.contained = None
            self.ant = held
        elif current is not None and current.contained is insect:
            current.contained = None

    def defenders(self) -> list[Ant]:
        """Return the primary ant and the ant it carries, if any."""
        if self.ant is None:
            return []
        if self.ant.contained is not None:
            return [self.ant, self.ant.contained]
        return [self.ant]

    def closest_bee(
        self,
        min_distance: int,
        max_distance: int,
        rng: Generator,
    ) -> Bee | None:
        """Find a bee between ``min_distance`` and ``max_distance`` ahead.

        Walks entrance-ward from this place (distance 0).  At the first
        distance in range holding bees, one of them is picked uniformly.

        Args:
            min_distance: Nearest distance to consider.
            max_distance: Farthest distance to consider.
            rng: Random source for choosing among bees at one distance.

        Returns:
            A bee, or None if no place in range has any.
        """
        place: Place | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.bees:
                return place.bees[int(rng.integers(len(place.bees)))]
            place = place.entrance
            distance += 1
        return None

    def __str__(self) -> str:
        return f"Place[{self.name}]"
