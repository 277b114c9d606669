from conftest import ManualClock, sequential_ids
from stellar_legacy.core.enums import NotificationType
from stellar_legacy.game.notifications import (
    NotificationCenter, crew_message, resource_message, system_message
)


def make_center(clock, **kwargs):
    return NotificationCenter(clock=clock, id_factory=sequential_ids("n"), **kwargs)


def test_push_records_type_and_time():
    clock = ManualClock(500)
    center = make_center(clock)
    note = center.push("Hello", NotificationType.WARNING)

    assert note.id == "n-1"
    assert note.timestamp == 500
    assert center.active == [note]


def test_expiry_at_timeout():
    clock = ManualClock()
    center = make_center(clock, timeout_ms=3000)
    center.push("first")
    clock.advance(1000)
    center.push("second")

    assert center.next_expiry() == 3000
    expired = center.expire(3000)
    assert [n.message for n in expired] == ["first"]
    assert [n.message for n in center.active] == ["second"]


def test_reading_the_feed_drops_stale_entries():
    clock = ManualClock()
    center = make_center(clock, timeout_ms=100)
    center.push("stale")
    clock.advance(100)
    assert center.active == []
    assert len(center) == 0


def test_cap_keeps_newest():
    center = make_center(ManualClock(), max_notifications=2)
    for message in ("a", "b", "c"):
        center.push(message)
    assert [n.message for n in center.active] == ["b", "c"]


def test_dismiss_and_clear():
    center = make_center(ManualClock())
    note = center.push("bye")
    center.push("stay")
    assert center.dismiss(note.id)
    assert not center.dismiss("missing")
    center.clear()
    assert center.next_expiry() is None


def test_message_templates():
    assert resource_message("bought", 10, "minerals", 150) == "Bought 10 minerals for 150 credits"
    assert resource_message("sold", 10, "food") == "Sold 10 food"
    assert crew_message("recruited", "Sam Kim") == "Recruited Sam Kim"
    assert crew_message("trained", "Sam Kim", "trade is now 5") == "Trained Sam Kim: trade is now 5"
    assert system_message("explored", "Vega", "Discovered 3 planets") == "Explored Vega. Discovered 3 planets"
    assert system_message("colonized", "Vega") == "Established colony in Vega"
