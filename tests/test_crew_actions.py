from dataclasses import replace

import pytest

from conftest import ScriptedRandom
from stellar_legacy.core.enums import CrewRole, NotificationType, SkillType
from stellar_legacy.core.exceptions import InvalidGameStateError
from stellar_legacy.data import starting_crew
from stellar_legacy.entities import Resources


def crew_by_id(game, crew_id):
    return game.snapshot.crew_member(crew_id)


# ── Training ───────────────────────────────────────────────────────────────

def test_training_four_times_costs_four_hundred(game):
    for _ in range(4):
        assert game.train_crew().succeeded
    assert game.resources.credits == 600


def test_training_raises_the_drawn_skill(make_game):
    game = make_game(rng=ScriptedRandom(1, SkillType.ENGINEERING))
    outcome = game.train_crew()

    assert outcome.succeeded
    assert crew_by_id(game, "crew-002").skills.engineering == 10
    assert outcome.data == {"crew_id": "crew-002", "skill": "engineering", "level": 10}


def test_training_at_max_is_still_charged(make_game):
    game = make_game(rng=ScriptedRandom(2, SkillType.NAVIGATION, 2, SkillType.NAVIGATION))
    game.train_crew()
    outcome = game.train_crew()

    assert outcome.succeeded
    assert "mastery" in outcome.message
    assert crew_by_id(game, "crew-003").skills.navigation == 10
    assert game.resources.credits == 800


def test_training_never_exceeds_max(game):
    for _ in range(9):
        game.train_crew()
    for member in game.crew:
        assert all(member.skills.get(s) <= 10 for s in SkillType)


def test_training_without_funds(make_game):
    game = make_game(resources=Resources(credits=99, energy=100))
    outcome = game.train_crew()

    assert not outcome.succeeded
    assert outcome.reason == "Need 100 credits for training"
    assert game.resources.credits == 99
    assert game.crew == starting_crew()


def test_training_without_crew(make_game):
    game = make_game(crew=())
    outcome = game.train_crew()
    assert outcome.data["error_code"] == "NO_CREW"
    assert game.resources.credits == 1000


# ── Morale ─────────────────────────────────────────────────────────────────

def test_morale_boost_is_clamped(game):
    game.boost_morale()
    assert [m.morale for m in game.crew] == [95, 100, 90, 85]
    game.boost_morale()
    assert [m.morale for m in game.crew] == [100, 100, 100, 95]
    assert game.resources.credits == 900


def test_morale_boost_without_funds(make_game):
    game = make_game(resources=Resources(credits=49))
    outcome = game.boost_morale()
    assert outcome.reason == "Need 50 credits to boost morale"
    assert [m.morale for m in game.crew] == [85, 90, 80, 75]


# ── Recruitment ────────────────────────────────────────────────────────────

def test_recruit_appends_generated_member(game):
    outcome = game.recruit_crew()

    assert outcome.succeeded
    assert game.resources.credits == 800
    assert len(game.crew) == 5
    recruit = game.crew[-1]
    assert recruit.id == "recruit-1"
    assert recruit.role != CrewRole.CAPTAIN
    assert not recruit.is_heir
    assert outcome.message == f"Recruited {recruit.name}"


def test_recruit_at_capacity_fails(game):
    assert game.recruit_crew().succeeded
    assert game.recruit_crew().succeeded
    outcome = game.recruit_crew()

    assert not outcome.succeeded
    assert outcome.reason == "Ship at crew capacity! Upgrade living quarters."
    assert len(game.crew) == 6
    assert game.resources.credits == 600


def test_recruit_reports_funds_before_capacity(make_game, game):
    full = make_game(
        crew=game.crew + tuple(replace(m, id=f"extra-{i}", role=CrewRole.MEDIC)
                               for i, m in enumerate(game.crew[:2])),
        resources=Resources(credits=100),
    )
    assert full.snapshot.crew_count == 6
    assert full.recruit_crew().reason == "Need 200 credits to recruit crew"


def test_more_quarters_allow_more_recruits(game):
    game.recruit_crew()
    game.recruit_crew()
    assert game.purchase_component("quarters", "Crew Quarters").succeeded
    assert game.ship.crew_capacity == 7
    assert game.recruit_crew().succeeded
    assert len(game.crew) == 7
    assert game.resources.credits == 150


# ── Heir selection ─────────────────────────────────────────────────────────

def test_selecting_heir_flags_only_that_member(game):
    outcome = game.select_heir("crew-003")

    assert outcome.succeeded
    assert [m.id for m in game.crew if m.is_heir] == ["crew-003"]
    assert game.heir.name == "Navigator Zara Chen"
    assert game.resources == Resources(credits=1000, energy=100, minerals=50, food=80, influence=25)


def test_selecting_another_heir_moves_the_flag(game):
    game.select_heir("crew-003")
    game.select_heir("crew-002")
    assert [m.id for m in game.crew if m.is_heir] == ["crew-002"]


def test_captain_cannot_be_heir(game):
    outcome = game.select_heir("crew-001")
    assert outcome.data["error_code"] == "HEIR_IS_CAPTAIN"
    assert game.heir is None


def test_unknown_heir_id(game):
    outcome = game.select_heir("crew-999")
    assert outcome.data["error_code"] == "CREW_NOT_FOUND"
    assert outcome.notification_type == NotificationType.ERROR


def test_heir_must_be_under_age_ceiling(make_game):
    crew = starting_crew()
    older = replace(crew[3], age=50)
    game = make_game(crew=crew[:3] + (older,))

    assert game.select_heir("crew-004").data["error_code"] == "HEIR_TOO_OLD"
    assert game.select_heir("crew-003").succeeded


def test_two_heirs_are_rejected_not_repaired(make_game):
    crew = tuple(replace(m, is_heir=m.id in ("crew-002", "crew-003")) for m in starting_crew())
    with pytest.raises(InvalidGameStateError):
        make_game(crew=crew)
