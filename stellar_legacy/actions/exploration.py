"""Exploration of star systems."""

from ..core.enums import DeltaMode
from ..game.notifications import system_message
from ..game.snapshot import GameSnapshot, StateChanges, replace_system
from .base_action import ActionOutcome, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator


class ExploreSystemAction(BaseAction):
    """Spend energy to survey the selected system.

    The placeholder planet list is replaced by freshly generated planets and
    the system becomes explored for good.
    """

    def __init__(self):
        super().__init__("explore_system")

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_system_exploration(snapshot, context.settings, context.ledger)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resources = context.ledger.apply_delta(
            snapshot.resources, context.settings.exploration_cost, DeltaMode.SUBTRACT)

        system = snapshot.selected_star_system
        planets = tuple(context.generator.generate_planets())
        explored = system.explored_with(planets)

        return ActionOutcome.success(
            system_message("explored", system.name, f"Discovered {len(planets)} planets"),
            StateChanges(resources=resources,
                         star_systems=replace_system(snapshot.star_systems, explored)),
            {
                "system": system.name,
                "planets_discovered": len(planets),
                "planet_details": [
                    {"name": p.name, "type": p.planet_type.value, "resources": list(p.resources)}
                    for p in planets
                ],
            },
        )
