"""Ship component purchases."""

from typing import Any

from ..core.enums import ComponentCategory, DeltaMode
from ..data import get_component
from ..game.snapshot import GameSnapshot, StateChanges
from .base_action import ActionOutcome, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator, resolve_enum


class PurchaseComponentAction(BaseAction):
    """Buy a catalog component and fit it to the ship.

    A hull replaces the ship's frame and with it the whole stats record.
    Anything else goes into its slot and adds its bonuses to the current
    stats.
    """

    def __init__(self, category: Any, component_name: str):
        super().__init__("purchase_component")
        self.category = category
        self.component_name = component_name

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_component_purchase(
            snapshot, context.ledger, self.category, self.component_name)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        category = resolve_enum(ComponentCategory, self.category)
        component = get_component(category, self.component_name)
        resources = context.ledger.apply_delta(snapshot.resources, component.cost, DeltaMode.SUBTRACT)

        if category == ComponentCategory.HULLS:
            ship = snapshot.ship.with_hull(component.name, component.stats)
        else:
            ship = snapshot.ship.with_component(category.slot, component.name, component.stats)

        return ActionOutcome.success(
            f"Installed {component.name}!",
            StateChanges(resources=resources, ship=ship),
            {"category": category.value, "component": component.name},
        )

    def get_action_data(self):
        data = super().get_action_data()
        data.update({"category": getattr(self.category, "value", self.category),
                     "component": self.component_name})
        return data
