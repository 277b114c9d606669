import pytest

from stellar_legacy.core.enums import NotificationType, ResourceType
from stellar_legacy.core.exceptions import ActionSequenceError, InvalidConfigurationError
from stellar_legacy.entities import Resources
from stellar_legacy.game.game_state import create_game
from stellar_legacy.game.settings import GameSettings


def test_create_game_starting_position():
    game = create_game()
    assert game.resources == Resources(credits=1000, energy=100, minerals=50, food=80, influence=25)
    assert game.ship.name == "Pioneer's Dream"
    assert len(game.crew) == 4
    assert [s.name for s in game.star_systems] == ["Sol Alpha", "Kepler Station", "Vega Outpost"]
    assert game.selected_system is None
    assert game.legacy.family_name == "Voss"
    assert game.market.price_of(ResourceType.MINERALS) == 15


def test_create_game_validates_settings():
    with pytest.raises(InvalidConfigurationError):
        create_game(GameSettings(trade_amount=0))


def test_snapshots_are_never_modified(game):
    before = game.snapshot
    game.train_crew()
    assert before.resources.credits == 1000
    assert game.snapshot is not before


def test_each_outcome_posts_one_notification(game):
    game.boost_morale()
    game.explore_system()
    notes = game.active_notifications

    assert [n.type for n in notes] == [NotificationType.SUCCESS, NotificationType.ERROR]
    assert notes[0].message == "Crew morale improved!"
    assert notes[1].message == "No system selected"


def test_notification_cap_drops_oldest(game):
    for _ in range(6):
        game.explore_system()
    notes = game.active_notifications
    assert len(notes) == 5
    assert notes[0].id == "note-2"


def test_notifications_expire_and_can_be_dismissed(game, clock):
    game.explore_system()
    clock.advance(1000)
    game.boost_morale()
    first, second = game.active_notifications

    assert game.dismiss_notification(second.id)
    assert not game.dismiss_notification(second.id)
    clock.advance(2000)
    assert game.active_notifications == []


def test_tick_applies_generation_without_notification(game):
    resources = game.tick()
    assert resources.credits == 1002
    assert resources.energy == 101
    assert resources.influence == pytest.approx(25.2)
    assert game.active_notifications == []
    assert len(game.action_log) == 0


def test_tick_saturates_at_maximum(make_game):
    game = make_game(resources=Resources(credits=999_999, influence=10_000))
    resources = game.tick()
    assert resources.credits == 1_000_000
    assert resources.influence == 10_000


def test_action_log_records_attempts(game):
    game.train_crew()
    game.select_heir("crew-001")

    entries = list(game.action_log)
    assert [(e["action_type"], e["result"]) for e in entries] == [
        ("train_crew", "success"),
        ("select_heir", "invalid"),
    ]


def test_action_log_is_bounded(make_game):
    game = make_game(settings=GameSettings(action_log_limit=3))
    for _ in range(5):
        game.explore_system()
    assert len(game.action_log) == 3


def test_listeners_receive_committed_snapshot(game):
    seen = []
    unsubscribe = game.subscribe(seen.append)

    game.boost_morale()
    game.explore_system()
    assert seen == [game.snapshot]

    unsubscribe()
    game.boost_morale()
    assert len(seen) == 1


def test_reentrant_intent_is_refused(game):
    game.subscribe(lambda snapshot: game.train_crew())
    with pytest.raises(ActionSequenceError):
        game.boost_morale()
    assert not game.in_transaction
    assert game.resources.credits == 950


def test_can_afford(game):
    assert game.can_afford({ResourceType.CREDITS: 1000})
    assert not game.can_afford({ResourceType.CREDITS: 1001})
    assert game.can_afford(Resources(credits=200, minerals=50))


def test_empire_summary(game):
    summary = game.get_empire_summary()
    assert summary["explored_systems"] == 1
    assert summary["total_systems"] == 3
    assert summary["active_colonies"] == 1
    assert summary["trade_routes"] == 0
    assert summary["crew_count"] == 4
    assert summary["average_morale"] == 82.5
    assert summary["generation"] == 1
    assert summary["heir"] is None


def test_export_leaves_out_notifications(game):
    game.explore_system()
    exported = game.export_state()
    assert "notifications" not in exported["state"]
    assert exported["state"]["resources"]["credits"] == 1000
    assert len(exported["action_log"]) == 1
