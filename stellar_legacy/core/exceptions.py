"""Custom exceptions for the Stellar Legacy economy engine."""


class StellarLegacyError(Exception):
    """Base exception for all Stellar Legacy errors."""

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self):
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


# Game State Exceptions
class GameStateError(StellarLegacyError):
    """Errors related to game state management."""
    pass


class InvalidGameStateError(GameStateError):
    """Game state is in an invalid condition."""
    pass


# Action Exceptions
class ActionError(StellarLegacyError):
    """Errors related to action execution."""
    pass


class ActionSequenceError(ActionError):
    """Action dispatched while another transaction was still running."""
    pass


class PreconditionFailure(ActionError):
    """A player action was rejected before any state changed."""
    pass


class InsufficientResourcesError(PreconditionFailure):
    """Not enough resources to pay for the action."""
    pass


class CrewCapacityExceededError(PreconditionFailure):
    """Ship quarters are full."""
    pass


class CrewMemberNotFoundError(PreconditionFailure):
    """No crew member with the given id."""
    pass


class NoCrewError(PreconditionFailure):
    """Action needs at least one crew member."""
    pass


class IneligibleHeirError(PreconditionFailure):
    """Crew member cannot be named heir."""
    pass


class NoSystemSelectedError(PreconditionFailure):
    """Action needs a selected star system."""
    pass


class StarSystemNotFoundError(PreconditionFailure):
    """No star system with the given name."""
    pass


class SystemAlreadyExploredError(PreconditionFailure):
    """System has already been explored."""
    pass


class NoUndevelopedPlanetError(PreconditionFailure):
    """Every planet in the system is already developed."""
    pass


class UnknownComponentError(PreconditionFailure):
    """Component category or name is not in the catalog."""
    pass


class InvalidTradeError(PreconditionFailure):
    """Trade request names something the market does not deal in."""
    pass


# Validation Exceptions
class ValidationError(StellarLegacyError):
    """Errors related to input validation."""
    pass


class InvalidInputError(ValidationError):
    """Invalid input provided."""
    pass


class RangeValidationError(ValidationError):
    """Value outside valid range."""
    pass


class TypeValidationError(ValidationError):
    """Invalid type provided."""
    pass


class ConstraintViolationError(ValidationError):
    """A resource change would leave its bound."""
    pass


# Data/Configuration Exceptions
class DataError(StellarLegacyError):
    """Errors related to game data."""
    pass


class InvalidConfigurationError(DataError):
    """Invalid configuration data."""
    pass


# File I/O Exceptions
class FileOperationError(StellarLegacyError):
    """Errors related to file operations."""
    pass


class SaveGameError(FileOperationError):
    """Error saving game state."""
    pass


class LoadGameError(FileOperationError):
    """Error loading game state."""
    pass


# Simulation Exceptions
class SimulationError(StellarLegacyError):
    """Errors related to simulation execution."""
    pass


class SimulationConfigError(SimulationError):
    """Invalid simulation configuration."""
    pass


# Utility functions for exception handling
def insufficient_resources(required: float, available: float, resource_type: str,
                           purpose: str) -> InsufficientResourcesError:
    """Build the standard error for a failed affordability check."""
    return InsufficientResourcesError(
        f"Need {_format_amount(required)} {resource_type} {purpose}",
        error_code="INSUFFICIENT_RESOURCES",
        context={"required": required, "available": available, "resource_type": resource_type}
    )


def _format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
