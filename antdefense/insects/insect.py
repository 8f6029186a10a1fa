"""Insect, Ant and Bee -- the units on the board.

An insect owns almost no behaviour of its own.  Each capability (acting,
water safety, visibility, taking damage, carrying another ant, moving)
is delegated to a strategy object from ``strategies.py``, chosen when
the unit is built.  Ants and bees differ only in their extra state and
their default strategies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.insects.strategies import (
    NOT_WATER_SAFE,
    VISIBLE,
    WATER_SAFE,
    Action,
    ArmorReduction,
    BeeAction,
    Containment,
    DefaultArmorReduction,
    Invisibility,
    NoAction,
    Placement,
    WaterSafety,
)

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony
    from antdefense.world.place import Place


@dataclass(eq=False)
class Insect:
    """Base unit.  Compared by identity.

    Attributes:
        armor: Remaining armor; the insect leaves the board at 0.
        damage: Damage dealt by the insect's attacks.
        name: Display name.
        place: Current location, or None when off the board.
        action: Per-turn behaviour.
        water_safety: Water capability.
        invisibility: Visibility capability.
        armor_reduction: How incoming damage is applied.
        containment: Container capability and slot.
        placement: Movement rule.
    """

    armor: int = 1
    damage: int = 0
    name: str = "Insect"
    place: Place | None = field(default=None, repr=False)
    action: Action = field(default_factory=NoAction, repr=False)
    water_safety: WaterSafety = field(default=NOT_WATER_SAFE, repr=False)
    invisibility: Invisibility = field(default=VISIBLE, repr=False)
    armor_reduction: ArmorReduction = field(
        default_factory=DefaultArmorReduction,
        repr=False,
    )
    containment: Containment = field(default_factory=Containment, repr=False)
    placement: Placement = field(default_factory=Placement, repr=False)

    @property
    def is_alive(self) -> bool:
        """Return True while the insect has armor left."""
        return self.armor > 0

    @property
    def water_safe(self) -> bool:
        return self.water_safety.water_safe

    @property
    def invisible(self) -> bool:
        return self.invisibility.invisible

    @property
    def is_container(self) -> bool:
        return self.containment.container

    def act(self, colony: Colony) -> None:
        """Take one turn."""
        self.action.perform(self, colony)

    def reduce_armor(self, amount: int) -> None:
        """Apply ``amount`` damage through the armor-reduction strategy."""
        self.armor_reduction.apply(amount, self)

    def set_location(self, place: Place | None) -> bool:
        """Move to ``place`` (or off the board for None).

        Returns:
            True if the move happened.
        """
        return self.placement.set_location(self, place)

    def detach(self) -> None:
        """Leave the current place unconditionally."""
        if self.place is not None:
            self.place.release(self)
            self.place = None

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"


@dataclass(eq=False)
class Ant(Insect):
    """A colony defender.

    Attributes:
        food_cost: Food debited from the colony on deployment.
    """

    damage: int = 3
    name: str = "Ant"
    food_cost: int = 0

    @property
    def contained(self) -> Ant | None:
        """The ant carried in this ant's slot (containers only)."""
        return self.containment.contained

    @contained.setter
    def contained(self, ant: Ant | None) -> None:
        self.containment.contained = ant


@dataclass(eq=False)
class Bee(Insect):
    """A hive attacker.  Water-safe, and walks toward the queen."""

    damage: int = 1
    name: str = "Bee"
    action: Action = field(default_factory=BeeAction, repr=False)
    water_safety: WaterSafety = field(default=WATER_SAFE, repr=False)

    @property
    def blocked(self) -> bool:
        """True if a visible ant stands in the bee's place."""
        if self.place is None or self.place.ant is None:
            return False
        return not self.place.ant.invisible
