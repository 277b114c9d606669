"""Core engine components."""

from .enums import *
from .exceptions import *
from .constants import *

__all__ = [
    # Enums
    "ResourceType", "SkillType", "CrewRole", "SystemStatus", "PlanetType", "MarketTrend",
    "TradeAction", "ComponentCategory", "ComponentSlot", "NotificationType", "DeltaMode",
    # Exceptions
    "StellarLegacyError", "ValidationError", "GameStateError", "PreconditionFailure",
    "ConstraintViolationError",
    # Constants
    "RESOURCE_BOUNDS", "BASE_GENERATION_RATES", "TRADE_AMOUNT", "TICK_INTERVAL_MS",
]
