"""Catalog -- the table of deployable ant types.

Each entry lists an ant type's stats and the strategy for each
capability.  ``make_ant`` turns an entry into a fresh Ant, building new
strategy instances so that per-ant state (a stomach, a container slot)
is never shared.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.insects.insect import Ant
from antdefense.insects.strategies import (
    INVISIBLE,
    NOT_WATER_SAFE,
    VISIBLE,
    WATER_SAFE,
    Action,
    ArmorReduction,
    Container,
    Containment,
    DefaultArmorReduction,
    EatAndDigest,
    Invisibility,
    LeaderAction,
    LeaderPlacement,
    Martyrdom,
    NoAction,
    Placement,
    ProduceFood,
    StrikeAll,
    ThrowLeaves,
    WaterSafety,
)

if TYPE_CHECKING:
    from antdefense.colony.leader import LeaderRegistry


@dataclass(frozen=True)
class UnitType:
    """One row of the catalog.

    Factories receive the game's leader registry; most ignore it.

    Attributes:
        name: Type name used in commands (e.g. ``"Thrower"``).
        armor: Starting armor.
        food_cost: Deployment cost.
        damage: Starting damage.
        action: Builds the action strategy.
        water_safety: Water capability.
        invisibility: Visibility capability.
        armor_reduction: Builds the armor-reduction strategy.
        containment: Builds the containment strategy.
        placement: Builds the placement strategy.
    """

    name: str
    armor: int
    food_cost: int
    damage: int = 3
    action: Callable[[LeaderRegistry], Action] = lambda _: NoAction()
    water_safety: WaterSafety = NOT_WATER_SAFE
    invisibility: Invisibility = VISIBLE
    armor_reduction: Callable[[LeaderRegistry], ArmorReduction] = (
        lambda _: DefaultArmorReduction()
    )
    containment: Callable[[LeaderRegistry], Containment] = lambda _: Containment()
    placement: Callable[[LeaderRegistry], Placement] = lambda _: Placement()
    description: str = field(default="", compare=False)


UNIT_TYPES: dict[str, UnitType] = {
    unit.name: unit
    for unit in (
        UnitType(
            "Grower",
            armor=1,
            food_cost=2,
            action=lambda _: ProduceFood(),
            description="Produces 1 food per turn.",
        ),
        UnitType(
            "Thrower",
            armor=1,
            food_cost=4,
            damage=1,
            action=lambda _: ThrowLeaves(),
            description="Throws leaves at the nearest bee up to 3 places away.",
        ),
        UnitType(
            "Wall",
            armor=4,
            food_cost=4,
            description="Does nothing but has lots of armor.",
        ),
        UnitType(
            "Hungry",
            armor=1,
            food_cost=4,
            action=lambda _: EatAndDigest(),
            description="Eats a bee in its place, then digests for 3 turns.",
        ),
        UnitType(
            "Fire",
            armor=1,
            food_cost=4,
            armor_reduction=lambda _: Martyrdom(DefaultArmorReduction()),
            description="Burns every bee in its place when it dies.",
        ),
        UnitType(
            "Scuba",
            armor=1,
            food_cost=5,
            damage=1,
            action=lambda _: ThrowLeaves(),
            water_safety=WATER_SAFE,
            description="A thrower that can be deployed in water.",
        ),
        UnitType(
            "Ninja",
            armor=1,
            food_cost=6,
            damage=1,
            action=lambda _: StrikeAll(),
            invisibility=INVISIBLE,
            description="Unseen by bees; strikes every bee passing through.",
        ),
        UnitType(
            "Bodyguard",
            armor=2,
            food_cost=4,
            containment=lambda _: Container(),
            description="Shares its place with one other ant and shields it.",
        ),
        UnitType(
            "Queen",
            armor=1,
            food_cost=6,
            damage=1,
            action=lambda registry: LeaderAction(registry, ThrowLeaves()),
            water_safety=WATER_SAFE,
            placement=lambda registry: LeaderPlacement(registry),
            description="Throws leaves and doubles the damage of adjacent ants.",
        ),
    )
}


def make_ant(type_name: str, registry: LeaderRegistry) -> Ant:
    """Build a new ant of the named type.

    Args:
        type_name: A key of ``UNIT_TYPES``.
        registry: The game's leader registry.

    Raises:
        KeyError: If ``type_name`` is not a known ant type.
    """
    unit = UNIT_TYPES[type_name]
    return Ant(
        armor=unit.armor,
        damage=unit.damage,
        name=unit.name,
        food_cost=unit.food_cost,
        action=unit.action(registry),
        water_safety=unit.water_safety,
        invisibility=unit.invisibility,
        armor_reduction=unit.armor_reduction(registry),
        containment=unit.containment(registry),
        placement=unit.placement(registry),
    )
