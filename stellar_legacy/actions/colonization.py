"""Colony establishment."""

from ..core.enums import DeltaMode
from ..game.notifications import system_message
from ..game.snapshot import GameSnapshot, StateChanges, replace_system
from .base_action import ActionOutcome, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator


class EstablishColonyAction(BaseAction):
    """Develop the first undeveloped planet of the selected system.

    Every resource tag on that planet that the ledger tracks permanently
    raises the matching generation rate. Repeated colonies stack.
    """

    def __init__(self):
        super().__init__("establish_colony")

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_colony_establishment(snapshot, context.settings, context.ledger)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resources = context.ledger.apply_delta(
            snapshot.resources, context.settings.colony_cost, DeltaMode.SUBTRACT)

        system = snapshot.selected_star_system
        planet = system.first_undeveloped_planet()
        index = system.planets.index(planet)
        colonized = system.with_developed_planet(index)

        boost = context.settings.colony_generation_boost
        boosted = planet.tracked_resources()
        rates = snapshot.generation_rates.with_amounts({
            resource: snapshot.generation_rates.get(resource) + boost for resource in boosted
        })

        return ActionOutcome.success(
            system_message("colonized", system.name, f"{planet.name} is now developed"),
            StateChanges(
                resources=resources,
                star_systems=replace_system(snapshot.star_systems, colonized),
                generation_rates=rates,
            ),
            {
                "system": system.name,
                "planet": planet.name,
                "boosted_resources": [r.value for r in boosted],
            },
        )
