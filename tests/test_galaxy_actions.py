import pytest

from conftest import ScriptedRandom
from stellar_legacy.core.enums import PlanetType, ResourceType, SystemStatus
from stellar_legacy.entities import Resources

TWO_PLANETS = (2, PlanetType.ROCKY, 1, "minerals", PlanetType.GAS_GIANT, 2, "energy", "food")


@pytest.fixture()
def funded_resources():
    return Resources(credits=1000, energy=100, minerals=500, food=80, influence=25)


# ── Selection ──────────────────────────────────────────────────────────────

def test_select_known_system(game):
    outcome = game.select_system("Vega Outpost")
    assert outcome.succeeded
    assert game.selected_system.name == "Vega Outpost"
    assert game.active_notifications == []


def test_select_unknown_system(game):
    outcome = game.select_system("Andromeda")
    assert outcome.data["error_code"] == "SYSTEM_NOT_FOUND"
    assert game.selected_system is None
    assert len(game.active_notifications) == 1


# ── Exploration ────────────────────────────────────────────────────────────

def test_explore_requires_selection(game):
    outcome = game.explore_system()
    assert outcome.reason == "No system selected"
    assert game.resources.energy == 100


def test_explore_replaces_placeholder(make_game):
    game = make_game(rng=ScriptedRandom(*TWO_PLANETS))
    game.select_system("Kepler Station")
    outcome = game.explore_system()

    system = game.selected_system
    assert outcome.succeeded
    assert outcome.message == "Explored Kepler Station. Discovered 2 planets"
    assert system.status == SystemStatus.EXPLORED
    assert [p.name for p in system.planets] == ["Planet A", "Planet B"]
    assert system.planets[1].resources == ("energy", "food")
    assert game.resources.energy == 50


def test_exploring_twice_is_rejected(make_game):
    game = make_game(rng=ScriptedRandom(*TWO_PLANETS))
    game.select_system("Kepler Station")
    game.explore_system()
    planets = game.selected_system.planets

    outcome = game.explore_system()
    assert outcome.reason == "Kepler Station has already been explored"
    assert game.resources.energy == 50
    assert game.selected_system.planets == planets


def test_energy_is_checked_before_explored_status(make_game):
    game = make_game(resources=Resources(credits=1000, energy=40))
    game.select_system("Sol Alpha")
    assert game.explore_system().reason == "Need 50 energy to explore"


def test_exploration_ranges(game):
    for name in ("Kepler Station", "Vega Outpost"):
        game.select_system(name)
        assert game.explore_system().succeeded
        system = game.selected_system
        assert 1 <= len(system.planets) <= 3
        assert all(1 <= len(p.resources) <= 2 for p in system.planets)
    assert game.resources.energy == 0


# ── Colonization ───────────────────────────────────────────────────────────

def test_colony_develops_first_undeveloped_planet(make_game, funded_resources):
    game = make_game(resources=funded_resources)
    game.select_system("Sol Alpha")
    before = len(game.selected_system.undeveloped_planets)

    outcome = game.establish_colony()

    system = game.selected_system
    assert outcome.succeeded
    assert len(system.undeveloped_planets) == before - 1
    assert system.planets[1].developed
    assert game.resources.credits == 800
    assert game.resources.minerals == 400
    assert game.generation_rates.energy == pytest.approx(1.5)
    assert game.generation_rates.food == pytest.approx(1.5)
    assert game.generation_rates.minerals == 1


def test_colony_without_undeveloped_planets(make_game, funded_resources):
    game = make_game(resources=funded_resources)
    game.select_system("Sol Alpha")
    game.establish_colony()

    outcome = game.establish_colony()
    assert outcome.reason == "No undeveloped planets available in Sol Alpha"
    assert game.resources.credits == 800


def test_colony_needs_minerals(game):
    game.select_system("Sol Alpha")
    outcome = game.establish_colony()
    assert outcome.reason == "Need 100 minerals to establish colony"
    assert game.resources.credits == 1000


def test_colony_on_unexplored_system_develops_placeholder(make_game, funded_resources):
    game = make_game(resources=funded_resources)
    game.select_system("Vega Outpost")
    rates_before = game.generation_rates

    outcome = game.establish_colony()

    planet = game.selected_system.planets[0]
    assert outcome.succeeded
    assert planet.is_placeholder
    assert planet.developed
    assert game.selected_system.undeveloped_planets == ()
    assert game.resources.credits == 800
    assert game.resources.minerals == 400
    assert game.generation_rates == rates_before
    assert outcome.data["boosted_resources"] == []


def test_colony_funds_checked_on_unexplored_system(game):
    game.select_system("Vega Outpost")
    assert game.establish_colony().reason == "Need 100 minerals to establish colony"


def test_colony_boosts_stack(make_game, funded_resources):
    rng = ScriptedRandom(2, PlanetType.ICE, 1, "energy", PlanetType.DESERT, 1, "energy")
    game = make_game(rng=rng, resources=funded_resources)
    game.select_system("Kepler Station")
    game.explore_system()

    assert game.establish_colony().succeeded
    assert game.establish_colony().succeeded
    assert game.generation_rates.get(ResourceType.ENERGY) == pytest.approx(2.0)
    assert game.get_empire_summary()["active_colonies"] == 3
