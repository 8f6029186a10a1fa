"""Capability strategies -- the behaviour axes an insect is composed from.

Every insect holds exactly one strategy per capability and delegates to
it.  A unit type is therefore just a choice of strategies (see
``catalog.py``) rather than a subclass:

- **Action**: what the insect does on its turn.
- **WaterSafety**: whether it may stand in a water place.
- **Invisibility**: whether bees see (and are blocked by) it.
- **ArmorReduction**: how incoming damage is applied.
- **Containment**: whether it can carry another ant in its slot.
- **Placement**: how it moves between places.

Strategies that hold no per-unit state are shared module-level
instances; stateful ones (``EatAndDigest``, ``Containment``) must be
created per ant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony
    from antdefense.colony.leader import LeaderRegistry
    from antdefense.insects.insect import Ant, Bee, Insect
    from antdefense.world.place import Place

logger = logging.getLogger(__name__)

# -- Constants ---------------------------------------------------------------

_THROW_MIN_RANGE = 0
_THROW_MAX_RANGE = 3
_DIGEST_TURNS = 3
_FOOD_PER_TURN = 1


# -- Interfaces --------------------------------------------------------------


class Action(Protocol):
    """Per-turn behaviour."""

    def perform(self, insect: Insect, colony: Colony) -> None: ...


class ArmorReduction(Protocol):
    """Applies incoming damage to an insect."""

    def apply(self, amount: int, target: Insect) -> None: ...


# -- Action ------------------------------------------------------------------


class NoAction:
    """Does nothing."""

    def perform(self, insect: Insect, colony: Colony) -> None:
        return None


@dataclass(frozen=True)
class ProduceFood:
    """Adds food to the colony every turn."""

    amount: int = _FOOD_PER_TURN

    def perform(self, insect: Insect, colony: Colony) -> None:
        colony.increase_food(self.amount)


@dataclass(frozen=True)
class ThrowLeaves:
    """Hit the closest bee within ``[min_range, max_range]`` places.

    Attributes:
        min_range: Nearest distance (in places, entrance-ward) to target.
        max_range: Farthest distance to target.
    """

    min_range: int = _THROW_MIN_RANGE
    max_range: int = _THROW_MAX_RANGE

    def perform(self, insect: Insect, colony: Colony) -> None:
        if insect.place is None:
            return
        target = insect.place.closest_bee(self.min_range, self.max_range, colony.rng)
        if target is not None:
            logger.debug("%s throws a leaf at %s", insect, target)
            target.reduce_armor(insect.damage)


class EatAndDigest:
    """Swallow a co-located bee whole, then spend turns digesting it.

    Holds the stomach counter, so every ant needs its own instance.
    """

    def __init__(self, digest_turns: int = _DIGEST_TURNS) -> None:
        self.digest_turns = digest_turns
        self.stomach = 0

    def perform(self, insect: Insect, colony: Colony) -> None:
        if self.stomach > 0:
            logger.debug("%s is digesting, %d more turns to go", insect, self.stomach)
            self.stomach -= 1
            return
        if insect.place is None:
            return
        target = insect.place.closest_bee(0, 0, colony.rng)
        if target is not None:
            logger.debug("%s has eaten %s", insect, target)
            target.reduce_armor(target.armor)
            self.stomach = self.digest_turns


class StrikeAll:
    """Damage every bee sharing the insect's place."""

    def perform(self, insect: Insect, colony: Colony) -> None:
        if insect.place is None:
            return
        for bee in list(insect.place.bees):
            logger.debug("%s strikes %s", insect, bee)
            bee.reduce_armor(insect.damage)


class BeeAction:
    """Sting whatever blocks the way, otherwise advance toward the queen."""

    def perform(self, insect: Bee, colony: Colony) -> None:
        place = insect.place
        if place is None:
            return
        if insect.blocked:
            logger.debug("%s stings %s", insect, place.ant)
            place.ant.reduce_armor(insect.damage)
        elif insect.armor > 0 and place.exit is not None:
            insect.set_location(place.exit)


class LeaderAction:
    """Queen behaviour.

    An ant standing anywhere other than the registered queen place is an
    impostor and destroys itself.  The true queen runs ``inner`` and then
    doubles the damage of each ant in the adjacent places, once per ant.
    """

    def __init__(self, registry: LeaderRegistry, inner: Action | None = None) -> None:
        self.registry = registry
        self.inner = inner if inner is not None else NoAction()

    def perform(self, insect: Insect, colony: Colony) -> None:
        place = insect.place
        if place is None:
            return
        if place is not self.registry.place:
            logger.debug("%s is an impostor and expires", insect)
            insect.reduce_armor(insect.armor)
            return
        self.inner.perform(insect, colony)
        for neighbour in (place.entrance, place.exit):
            if neighbour is None:
                continue
            for ant in neighbour.defenders():
                if self.registry.grant_bonus(ant):
                    ant.damage *= 2
                    logger.debug("%s doubles the damage of %s", insect, ant)


# -- WaterSafety / Invisibility ----------------------------------------------


@dataclass(frozen=True)
class WaterSafety:
    """Whether the insect survives in water places."""

    water_safe: bool = False


@dataclass(frozen=True)
class Invisibility:
    """Whether bees can see the insect."""

    invisible: bool = False


WATER_SAFE = WaterSafety(water_safe=True)
NOT_WATER_SAFE = WaterSafety(water_safe=False)
INVISIBLE = Invisibility(invisible=True)
VISIBLE = Invisibility(invisible=False)


# -- ArmorReduction ----------------------------------------------------------


class DefaultArmorReduction:
    """Subtract the damage; an insect out of armor leaves the board."""

    def apply(self, amount: int, target: Insect) -> None:
        target.armor -= amount
        if target.armor <= 0:
            logger.debug("%s ran out of armor and expired", target)
            target.detach()


class Martyrdom:
    """Decorator: on a lethal hit, first burn every bee in the same place."""

    def __init__(self, inner: ArmorReduction | None = None) -> None:
        self.inner = inner if inner is not None else DefaultArmorReduction()

    def apply(self, amount: int, target: Insect) -> None:
        if target.armor - amount <= 0 and target.place is not None:
            for bee in list(target.place.bees):
                logger.debug("%s burns %s", target, bee)
                bee.reduce_armor(target.damage)
        self.inner.apply(amount, target)


# -- Containment -------------------------------------------------------------


class Containment:
    """Non-container: the slot is always empty and cannot be filled."""

    container = False

    @property
    def contained(self) -> Ant | None:
        return None

    @contained.setter
    def contained(self, ant: Ant | None) -> None:
        if ant is not None:
            msg = "cannot place an ant inside a non-container"
            raise TypeError(msg)


class Container(Containment):
    """Container: one slot that can hold another ant."""

    container = True

    def __init__(self) -> None:
        self._contained: Ant | None = None

    @property
    def contained(self) -> Ant | None:
        return self._contained

    @contained.setter
    def contained(self, ant: Ant | None) -> None:
        self._contained = ant


# -- Placement ---------------------------------------------------------------


class Placement:
    """Standard movement between places.

    Moving to ``None`` detaches the insect.  Moving to a place first asks
    that place to accept the insect; only then is the old place released.
    """

    def set_location(self, insect: Insect, place: Place | None) -> bool:
        if place is None:
            insect.detach()
            return True
        if not place.try_occupy(insect):
            return False
        if insect.place is not None:
            insect.place.release(insect)
        insect.place = place
        return True


class LeaderPlacement(Placement):
    """Placement for queens.

    The first queen to land claims the registry's leader place for the
    rest of the game.  A queen standing on that place refuses to be
    removed from it.
    """

    def __init__(self, registry: LeaderRegistry) -> None:
        self.registry = registry

    def set_location(self, insect: Insect, place: Place | None) -> bool:
        if place is None:
            if self.registry.has_leader and insect.place is self.registry.place:
                logger.debug("%s cannot be removed", insect)
                return False
            return super().set_location(insect, place)
        moved = super().set_location(insect, place)
        if moved and not self.registry.claim(insect):
            logger.debug("%s lands away from the queen place", insect)
        return moved
