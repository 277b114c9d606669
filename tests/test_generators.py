import random

from conftest import ScriptedRandom
from stellar_legacy.core.constants import RECRUITABLE_ROLES
from stellar_legacy.core.enums import CrewRole, PlanetType, SkillType
from stellar_legacy.game.settings import GameSettings
from stellar_legacy.utils.generators import EntityGenerator, new_crew_id


def make_generator(rng, ids=None):
    ids = iter(ids or ["crew-new"])
    return EntityGenerator(GameSettings(), rng, id_factory=lambda: next(ids))


def test_crew_member_uses_draws_in_order():
    rng = ScriptedRandom(3, 4, 5, 6, 7, "Sam", "Kim", CrewRole.MEDIC, 70,
                         "Academy graduate seeking adventure", 30)
    member = make_generator(rng).generate_crew_member()

    assert member.id == "crew-new"
    assert member.name == "Sam Kim"
    assert member.role == CrewRole.MEDIC
    assert [member.skills.get(s) for s in SkillType] == [3, 4, 5, 6, 7]
    assert member.morale == 70
    assert member.age == 30
    assert member.background == "Academy graduate seeking adventure"
    assert member.is_heir is False


def test_crew_member_stays_inside_configured_ranges():
    generator = make_generator(random.Random(7), ids=[f"crew-{i}" for i in range(200)])
    for _ in range(200):
        member = generator.generate_crew_member()
        assert all(2 <= member.skills.get(s) <= 10 for s in SkillType)
        assert 60 <= member.morale <= 90
        assert 25 <= member.age <= 45
        assert member.role in RECRUITABLE_ROLES
        assert not member.is_captain


def test_recruits_never_arrive_as_diplomats_or_captains():
    generator = make_generator(random.Random(11), ids=[f"crew-{i}" for i in range(300)])
    roles = {generator.generate_crew_member().role for _ in range(300)}
    assert roles == {CrewRole.ENGINEER, CrewRole.PILOT, CrewRole.GUNNER,
                     CrewRole.SCIENTIST, CrewRole.MEDIC}


def test_planets_are_named_by_position():
    rng = ScriptedRandom(2, PlanetType.ROCKY, 1, "minerals", PlanetType.ICE, 2, "food", "energy")
    planets = make_generator(rng).generate_planets()

    assert [p.name for p in planets] == ["Planet A", "Planet B"]
    assert planets[0].planet_type == PlanetType.ROCKY
    assert planets[0].resources == ("minerals",)
    assert planets[1].resources == ("food", "energy")
    assert not any(p.developed for p in planets)


def test_duplicate_tag_draw_is_dropped_not_redrawn():
    rng = ScriptedRandom(1, PlanetType.DESERT, 2, "energy", "energy")
    planets = make_generator(rng).generate_planets()
    assert planets[0].resources == ("energy",)
    assert not rng.values


def test_planet_generation_ranges():
    generator = make_generator(random.Random(3))
    for _ in range(200):
        planets = generator.generate_planets()
        assert 1 <= len(planets) <= 3
        for planet in planets:
            assert 1 <= len(planet.resources) <= 2
            assert planet.planet_type != PlanetType.UNKNOWN


def test_crew_ids_are_unique():
    ids = {new_crew_id() for _ in range(500)}
    assert len(ids) == 500
    assert all(i.startswith("crew-") for i in ids)
