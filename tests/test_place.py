"""Tests for antdefense.world.place - occupancy rules and bee search."""

from numpy.random import Generator

from antdefense.colony.leader import LeaderRegistry
from antdefense.insects.catalog import make_ant
from antdefense.insects.insect import Ant, Bee
from antdefense.world.place import Place

_REGISTRY = LeaderRegistry()


def _ant(name: str) -> Ant:
    return make_ant(name, _REGISTRY)


class TestOccupancy:
    """Tests for Place.try_occupy."""

    def test_bees_always_admitted(self) -> None:
        place = Place("p")
        bees = [Bee(), Bee(), Bee()]
        assert all(place.try_occupy(bee) for bee in bees)
        assert place.bees == bees

    def test_empty_slot_is_taken(self) -> None:
        place = Place("p")
        thrower = _ant("Thrower")
        assert place.try_occupy(thrower)
        assert place.ant is thrower

    def test_two_plain_ants_conflict(self) -> None:
        place = Place("p")
        first, second = _ant("Thrower"), _ant("Wall")
        place.try_occupy(first)
        assert not place.try_occupy(second)
        assert place.ant is first
        assert place.defenders() == [first]

    def test_container_wraps_existing_ant(self) -> None:
        place = Place("p")
        thrower, guard = _ant("Thrower"), _ant("Bodyguard")
        place.try_occupy(thrower)
        assert place.try_occupy(guard)
        assert place.ant is guard
        assert guard.contained is thrower

    def test_ant_enters_existing_container(self) -> None:
        place = Place("p")
        guard, thrower = _ant("Bodyguard"), _ant("Thrower")
        place.try_occupy(guard)
        assert place.try_occupy(thrower)
        assert place.ant is guard
        assert guard.contained is thrower

    def test_two_containers_conflict(self) -> None:
        place = Place("p")
        first, second = _ant("Bodyguard"), _ant("Bodyguard")
        place.try_occupy(first)
        assert not place.try_occupy(second)
        assert place.ant is first
        assert first.contained is None

    def test_full_container_refuses(self) -> None:
        place = Place("p")
        guard, inner, extra = _ant("Bodyguard"), _ant("Thrower"), _ant("Wall")
        place.try_occupy(guard)
        place.try_occupy(inner)
        assert not place.try_occupy(extra)
        assert guard.contained is inner
        assert place.defenders() == [guard, inner]


class TestRelease:
    """Tests for Place.release."""

    def test_release_bee(self) -> None:
        place = Place("p")
        stays, leaves = Bee(), Bee()
        place.try_occupy(stays)
        place.try_occupy(leaves)
        place.release(leaves)
        assert place.bees == [stays]

    def test_release_plain_ant_empties_slot(self) -> None:
        place = Place("p")
        wall = _ant("Wall")
        place.try_occupy(wall)
        place.release(wall)
        assert place.ant is None

    def test_release_container_promotes_contained(self) -> None:
        place = Place("p")
        thrower, guard = _ant("Thrower"), _ant("Bodyguard")
        place.try_occupy(thrower)
        place.try_occupy(guard)
        place.release(guard)
        assert place.ant is thrower
        assert guard.contained is None

    def test_release_contained_keeps_container(self) -> None:
        place = Place("p")
        guard, thrower = _ant("Bodyguard"), _ant("Thrower")
        place.try_occupy(guard)
        place.try_occupy(thrower)
        place.release(thrower)
        assert place.ant is guard
        assert guard.contained is None


class TestClosestBee:
    """Tests for the entrance-ward bee search."""

    def test_out_of_window(self, chain: list[Place], rng: Generator) -> None:
        Bee().set_location(chain[3])
        assert chain[0].closest_bee(0, 2, rng) is None

    def test_in_window(self, chain: list[Place], rng: Generator) -> None:
        bees = [Bee(), Bee()]
        for bee in bees:
            bee.set_location(chain[3])
        assert chain[0].closest_bee(2, 4, rng) in bees

    def test_min_distance_skips_near_bees(
        self,
        chain: list[Place],
        rng: Generator,
    ) -> None:
        near, far = Bee(), Bee()
        near.set_location(chain[0])
        far.set_location(chain[2])
        assert chain[0].closest_bee(1, 3, rng) is far

    def test_nearest_distance_wins(self, chain: list[Place], rng: Generator) -> None:
        near, far = Bee(), Bee()
        near.set_location(chain[1])
        far.set_location(chain[2])
        assert chain[0].closest_bee(0, 4, rng) is near

    def test_search_stops_at_chain_end(
        self,
        chain: list[Place],
        rng: Generator,
    ) -> None:
        assert chain[2].closest_bee(0, 100, rng) is None

    def test_random_pick_among_same_distance(
        self,
        chain: list[Place],
        rng: Generator,
    ) -> None:
        bees = [Bee(), Bee(), Bee()]
        for bee in bees:
            bee.set_location(chain[1])
        picked = {id(chain[0].closest_bee(0, 3, rng)) for _ in range(60)}
        assert picked <= {id(bee) for bee in bees}
        assert len(picked) > 1
