import pytest

from stellar_legacy.core.exceptions import GameStateError, InvalidInputError
from stellar_legacy.game.game_loop import GameLoop
from stellar_legacy.game.game_state import create_game


@pytest.fixture()
def loop(game):
    return GameLoop(game)


def test_ticks_fire_on_interval(loop, game):
    assert loop.advance(2999) == 0
    assert loop.advance(3000) == 1
    assert game.resources.credits == 1002
    assert loop.advance(9000) == 2
    assert loop.ticks_run == 3
    assert loop.next_tick_at == 12000


def test_intents_run_in_submission_order(loop, game):
    loop.submit("select_system", "Kepler Station")
    loop.submit("explore_system")
    loop.submit(game.train_crew)
    assert loop.pending == 3

    loop.advance(0)
    assert loop.pending == 0
    assert game.selected_system.is_explored
    assert game.resources.credits == 900
    assert game.resources.energy == 50


def test_run_pending_returns_outcomes(loop):
    loop.submit("boost_morale")
    loop.submit("explore_system")
    outcomes = loop.run_pending()
    assert [o.succeeded for o in outcomes] == [True, False]


def test_unknown_intent(loop):
    with pytest.raises(GameStateError):
        loop.submit("fly_to_the_moon")


def test_listener_can_queue_follow_up_work(loop, game):
    queued = []

    def follow_up(snapshot):
        if not queued:
            queued.append(loop.submit("boost_morale"))

    game.subscribe(follow_up)
    loop.submit("train_crew")
    loop.advance(0)
    assert game.resources.credits == 850


def test_time_cannot_go_backwards(loop):
    loop.advance(5000)
    with pytest.raises(InvalidInputError):
        loop.advance(4000)


def test_pause_and_resume(loop, game):
    loop.pause()
    assert not loop.is_running
    assert loop.advance(10_000) == 0
    loop.resume()
    assert loop.next_tick_at == 13_000
    assert loop.advance(13_000) == 1
    assert game.resources.credits == 1002


def test_tick_callbacks(loop):
    seen = []
    loop.register_tick_callback(lambda state: seen.append(state.resources.credits))
    loop.advance(6000)
    assert seen == [1002, 1004]


def test_advance_expires_notifications(loop, game, clock):
    game.explore_system()
    assert game.notifications.next_expiry() == 3000
    clock.advance(3000)
    loop.advance(3000)
    assert game.notifications.next_expiry() is None


def test_expiry_follows_the_store_clock_not_loop_time(loop, game, clock):
    game.train_crew()
    loop.advance(10_000)
    assert game.notifications.next_expiry() == 3000

    clock.advance(3000)
    loop.advance(10_001)
    assert game.notifications.next_expiry() is None


def test_default_clock_game_expires_through_loop():
    game = create_game()
    loop = GameLoop(game)
    game.train_crew()
    stamped_expiry = game.notifications.next_expiry()

    loop.advance(1000)
    assert game.notifications.next_expiry() == stamped_expiry

    game.notifications.clock = lambda: stamped_expiry
    loop.advance(10_000)
    assert game.notifications.next_expiry() is None


def test_custom_interval(game):
    loop = GameLoop(game, tick_interval_ms=1000)
    assert loop.advance(3500) == 3
