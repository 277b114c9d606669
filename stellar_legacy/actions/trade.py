"""Market trades."""

from typing import Any

from ..core.enums import DeltaMode, ResourceType, TradeAction
from ..game.notifications import resource_message
from ..game.snapshot import GameSnapshot, StateChanges
from .base_action import ActionOutcome, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator, resolve_enum


class TradeResourceAction(BaseAction):
    """Buy or sell a fixed lot of a resource at the listed price.

    Buying is strict: if the bought resource would pass its maximum the
    trade is rejected. Selling takes the goods strictly but pays out with
    saturation, so credits beyond the cap are forfeited rather than blocking
    the sale.
    """

    def __init__(self, resource: Any, action: Any):
        super().__init__("trade_resource")
        self.resource = resource
        self.action = action

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_trade(snapshot, context.settings, self.resource, self.action)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resource = resolve_enum(ResourceType, self.resource)
        direction = resolve_enum(TradeAction, self.action)
        amount = context.settings.trade_amount
        price = snapshot.market.price_of(resource)
        total = price * amount
        ledger = context.ledger

        if direction == TradeAction.BUY:
            resources = ledger.apply_delta(
                snapshot.resources,
                {ResourceType.CREDITS: -total, resource: amount},
                DeltaMode.ADD,
            )
            message = resource_message("bought", amount, resource.value, total)
            forfeited = 0
        else:
            paid = ledger.apply_delta(snapshot.resources, {resource: amount}, DeltaMode.SUBTRACT)
            resources = ledger.apply_saturating(paid, {ResourceType.CREDITS: total}, DeltaMode.ADD)
            _, credit_cap = ledger.bounds_for(ResourceType.CREDITS)
            forfeited = max(0, paid.credits + total - credit_cap)
            message = resource_message("sold", amount, resource.value, total)

        data = {
            "resource": resource.value,
            "action": direction.value,
            "amount": amount,
            "price": price,
            "total": total,
        }
        if forfeited > 0:
            data["credits_forfeited"] = forfeited
            message = f"{message} ({forfeited:g} lost to the credit cap)"

        return ActionOutcome.success(message, StateChanges(resources=resources), data)

    def get_action_data(self):
        data = super().get_action_data()
        data.update({"resource": getattr(self.resource, "value", self.resource),
                     "trade_action": getattr(self.action, "value", self.action)})
        return data
