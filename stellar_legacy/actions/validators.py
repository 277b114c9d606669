"""Precondition checks for every player transaction.

Each validator is a pure function of a snapshot and its inputs. When several
conditions fail, the first one in the order written here is reported, so the
messages players see are deterministic.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from ..core.enums import ComponentCategory, ResourceType, TradeAction
from ..core.exceptions import (
    CrewCapacityExceededError, CrewMemberNotFoundError, IneligibleHeirError, InvalidTradeError,
    NoCrewError, NoSystemSelectedError, NoUndevelopedPlanetError, StarSystemNotFoundError,
    SystemAlreadyExploredError, UnknownComponentError,
    insufficient_resources
)
from ..data import get_component
from ..game.ledger import ResourceLedger
from ..game.snapshot import GameSnapshot
from .base_action import ValidationResult

E = TypeVar("E")


def resolve_enum(enum_class: Type[E], value: Any) -> Optional[E]:
    """Accept an enum member or its value; None when neither matches."""
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        return None


def check_funds(snapshot: GameSnapshot, ledger: ResourceLedger,
                cost: Mapping[ResourceType, float], purpose: str) -> ValidationResult:
    """Fail on the first resource, in ledger order, that cannot cover ``cost``."""
    shortfall = ledger.first_shortfall(snapshot.resources, cost)
    if shortfall is None:
        return ValidationResult.ok()
    resource, required, available = shortfall
    return ValidationResult.fail(insufficient_resources(required, available, resource.value, purpose))


class ActionValidator:
    """Validators for each transaction."""

    @staticmethod
    def validate_crew_training(snapshot: GameSnapshot, settings, ledger: ResourceLedger) -> ValidationResult:
        funds = check_funds(snapshot, ledger, settings.training_cost, "for training")
        if not funds:
            return funds
        if not snapshot.crew:
            return ValidationResult.fail(NoCrewError(
                "No crew members to train",
                error_code="NO_CREW"
            ))
        return ValidationResult.ok()

    @staticmethod
    def validate_morale_boost(snapshot: GameSnapshot, settings, ledger: ResourceLedger) -> ValidationResult:
        return check_funds(snapshot, ledger, settings.morale_boost_cost, "to boost morale")

    @staticmethod
    def validate_crew_recruitment(snapshot: GameSnapshot, settings, ledger: ResourceLedger) -> ValidationResult:
        funds = check_funds(snapshot, ledger, settings.recruitment_cost, "to recruit crew")
        if not funds:
            return funds
        capacity = snapshot.ship.stats.crew_capacity
        if snapshot.crew_count >= capacity:
            return ValidationResult.fail(CrewCapacityExceededError(
                "Ship at crew capacity! Upgrade living quarters.",
                error_code="CREW_CAPACITY",
                context={"crew": snapshot.crew_count, "capacity": capacity}
            ))
        return ValidationResult.ok()

    @staticmethod
    def validate_system_selection(snapshot: GameSnapshot, system_name: str) -> ValidationResult:
        if snapshot.star_system(system_name) is None:
            return ValidationResult.fail(StarSystemNotFoundError(
                f"Unknown star system: {system_name}",
                error_code="SYSTEM_NOT_FOUND",
                context={"system": system_name}
            ))
        return ValidationResult.ok()

    @staticmethod
    def _require_selected_system(snapshot: GameSnapshot) -> ValidationResult:
        if snapshot.selected_system is None:
            return ValidationResult.fail(NoSystemSelectedError(
                "No system selected",
                error_code="NO_SELECTION"
            ))
        return ActionValidator.validate_system_selection(snapshot, snapshot.selected_system)

    @staticmethod
    def validate_system_exploration(snapshot: GameSnapshot, settings, ledger: ResourceLedger) -> ValidationResult:
        selected = ActionValidator._require_selected_system(snapshot)
        if not selected:
            return selected
        funds = check_funds(snapshot, ledger, settings.exploration_cost, "to explore")
        if not funds:
            return funds
        system = snapshot.selected_star_system
        if system.is_explored:
            return ValidationResult.fail(SystemAlreadyExploredError(
                f"{system.name} has already been explored",
                error_code="ALREADY_EXPLORED",
                context={"system": system.name}
            ))
        return ValidationResult.ok()

    @staticmethod
    def validate_colony_establishment(snapshot: GameSnapshot, settings, ledger: ResourceLedger) -> ValidationResult:
        selected = ActionValidator._require_selected_system(snapshot)
        if not selected:
            return selected
        funds = check_funds(snapshot, ledger, settings.colony_cost, "to establish colony")
        if not funds:
            return funds
        system = snapshot.selected_star_system
        if system.first_undeveloped_planet() is None:
            return ValidationResult.fail(NoUndevelopedPlanetError(
                f"No undeveloped planets available in {system.name}",
                error_code="NO_UNDEVELOPED_PLANET",
                context={"system": system.name}
            ))
        return ValidationResult.ok()

    @staticmethod
    def validate_component_purchase(snapshot: GameSnapshot, ledger: ResourceLedger,
                                    category: Any, component_name: str) -> ValidationResult:
        resolved = resolve_enum(ComponentCategory, category)
        if resolved is None:
            return ValidationResult.fail(UnknownComponentError(
                f"Unknown component category: {category}",
                error_code="UNKNOWN_CATEGORY",
                context={"category": category, "valid": [c.value for c in ComponentCategory]}
            ))
        component = get_component(resolved, component_name)
        if component is None:
            return ValidationResult.fail(UnknownComponentError(
                f"No {resolved.value} component named {component_name}",
                error_code="UNKNOWN_COMPONENT",
                context={"category": resolved.value, "name": component_name}
            ))
        return check_funds(snapshot, ledger, component.cost, f"to install {component.name}")

    @staticmethod
    def validate_trade(snapshot: GameSnapshot, settings, resource: Any, action: Any) -> ValidationResult:
        resolved = resolve_enum(ResourceType, resource)
        if resolved is None or not resolved.is_tradable or not snapshot.market.lists(resolved):
            return ValidationResult.fail(InvalidTradeError(
                f"The market does not trade {getattr(resource, 'value', resource)}",
                error_code="NOT_TRADABLE",
                context={"resource": getattr(resource, "value", resource)}
            ))
        direction = resolve_enum(TradeAction, action)
        if direction is None:
            return ValidationResult.fail(InvalidTradeError(
                f"Unknown trade action: {action}",
                error_code="INVALID_TRADE_ACTION",
                context={"action": action}
            ))

        amount = settings.trade_amount
        if direction == TradeAction.BUY:
            cost = snapshot.market.price_of(resolved) * amount
            if snapshot.resources.credits < cost:
                return ValidationResult.fail(insufficient_resources(
                    cost, snapshot.resources.credits, "credits", f"to buy {amount} {resolved.value}"))
        else:
            available = snapshot.resources.get(resolved)
            if available < amount:
                return ValidationResult.fail(insufficient_resources(
                    amount, available, resolved.value, "to sell"))
        return ValidationResult.ok()

    @staticmethod
    def validate_heir_selection(snapshot: GameSnapshot, settings, crew_id: str) -> ValidationResult:
        member = snapshot.crew_member(crew_id)
        if member is None:
            return ValidationResult.fail(CrewMemberNotFoundError(
                f"No crew member with id {crew_id}",
                error_code="CREW_NOT_FOUND",
                context={"crew_id": crew_id}
            ))
        if member.is_captain:
            return ValidationResult.fail(IneligibleHeirError(
                f"{member.name} is the captain and cannot be named heir",
                error_code="HEIR_IS_CAPTAIN",
                context={"crew_id": crew_id}
            ))
        if member.age >= settings.heir_max_age:
            return ValidationResult.fail(IneligibleHeirError(
                f"{member.name} is too old to be heir (must be under {settings.heir_max_age})",
                error_code="HEIR_TOO_OLD",
                context={"crew_id": crew_id, "age": member.age}
            ))
        return ValidationResult.ok()
