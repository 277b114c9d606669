import pytest

from stellar_legacy.core.enums import ComponentCategory, ComponentSlot, ResourceType, TradeAction
from stellar_legacy.data import SHIP_COMPONENTS, get_component
from stellar_legacy.entities import Market, Resources
from stellar_legacy.game.settings import GameSettings


# ── Shipyard ───────────────────────────────────────────────────────────────

def test_engine_replaces_slot_and_adds_stats(game):
    outcome = game.purchase_component(ComponentCategory.ENGINES, "Ion Drive")

    assert outcome.succeeded
    assert outcome.message == "Installed Ion Drive!"
    assert game.ship.components.engine == "Ion Drive"
    assert game.ship.stats.speed == 6
    assert game.resources.credits == 200
    assert game.resources.energy == 0


def test_category_may_be_given_by_value(game):
    assert game.purchase_component("weapons", "Light Laser").succeeded
    assert game.ship.components.get(ComponentSlot.WEAPONS) == "Light Laser"
    assert game.ship.stats.combat == 4
    assert game.resources.credits == 700


def test_hull_replaces_all_stats(make_game, rich_resources):
    game = make_game(resources=rich_resources)
    assert game.purchase_component("hulls", "Heavy Frigate").succeeded

    stats = game.ship.stats
    assert game.ship.hull == "Heavy Frigate"
    assert (stats.speed, stats.cargo, stats.combat, stats.research, stats.crew_capacity) == (2, 200, 5, 0, 10)
    assert game.resources.credits == 8_500
    assert game.resources.minerals == 800


def test_unaffordable_component(game):
    outcome = game.purchase_component("hulls", "Heavy Frigate")
    assert outcome.reason == "Need 1500 credits to install Heavy Frigate"
    assert game.ship.hull == "Light Corvette"


def test_unknown_category_and_component(game):
    assert game.purchase_component("shields", "Aegis").data["error_code"] == "UNKNOWN_CATEGORY"
    assert game.purchase_component("engines", "Aegis").data["error_code"] == "UNKNOWN_COMPONENT"
    assert game.resources.credits == 1000


def test_every_non_hull_category_maps_to_a_slot():
    for category in ComponentCategory:
        if category == ComponentCategory.HULLS:
            assert category.slot is None
        else:
            assert isinstance(category.slot, ComponentSlot)
        assert SHIP_COMPONENTS[category]


def test_catalog_lookup():
    quarters = get_component(ComponentCategory.QUARTERS, "Habitat Ring")
    assert quarters.stats == {"crew_capacity": 4}
    assert get_component(ComponentCategory.QUARTERS, "Nope") is None


# ── Trading ────────────────────────────────────────────────────────────────

def test_buy_then_sell_restores_credits(game):
    bought = game.trade_resource(ResourceType.MINERALS, TradeAction.BUY)
    assert bought.message == "Bought 10 minerals for 150 credits"
    assert game.resources.credits == 850
    assert game.resources.minerals == 60

    sold = game.trade_resource("minerals", "sell")
    assert sold.succeeded
    assert game.resources.credits == 1000
    assert game.resources.minerals == 50


def test_buy_needs_credits(make_game):
    game = make_game(resources=Resources(credits=100))
    outcome = game.trade_resource("influence", "buy")
    assert outcome.reason == "Need 250 credits to buy 10 influence"
    assert game.resources.influence == 0


def test_sell_needs_stock(make_game):
    game = make_game(resources=Resources(credits=100, food=5))
    assert game.trade_resource("food", "sell").reason == "Need 10 food to sell"


def test_credits_are_not_tradable(game):
    assert game.trade_resource("credits", "buy").data["error_code"] == "NOT_TRADABLE"


def test_invalid_trade_direction(game):
    assert game.trade_resource("food", "hoard").data["error_code"] == "INVALID_TRADE_ACTION"


def test_buy_that_overflows_is_rejected(make_game):
    game = make_game(resources=Resources(credits=1000, minerals=99_995))
    outcome = game.trade_resource("minerals", "buy")

    assert not outcome.succeeded
    assert outcome.data["error_code"] == "ABOVE_MAXIMUM"
    assert game.resources.credits == 1000
    assert game.resources.minerals == 99_995


def test_sale_overflow_clamps_credits(make_game):
    game = make_game(resources=Resources(credits=999_990, minerals=50))
    outcome = game.trade_resource("minerals", "sell")

    assert outcome.succeeded
    assert game.resources.credits == 1_000_000
    assert game.resources.minerals == 40
    assert outcome.data["credits_forfeited"] == 140


def test_fractional_sale_below_cap_forfeits_nothing(make_game):
    game = make_game(
        settings=GameSettings(trade_amount=1),
        resources=Resources(credits=0.1, minerals=5),
        market=Market(prices={ResourceType.MINERALS: 0.7}),
    )
    outcome = game.trade_resource("minerals", "sell")

    assert outcome.succeeded
    assert "credits_forfeited" not in outcome.data
    assert "lost to the credit cap" not in outcome.message
    assert game.resources.credits == pytest.approx(0.8)


@pytest.mark.parametrize("resource, price", [("minerals", 15), ("energy", 12), ("food", 8)])
def test_buy_cost_follows_market_price(game, resource, price):
    game.trade_resource(resource, "buy")
    assert game.resources.credits == 1000 - price * 10
