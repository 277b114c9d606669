"""Core enumerations for the Stellar Legacy economy engine."""

from enum import Enum


class ResourceType(Enum):
    """Resources tracked by the ledger."""
    CREDITS = "credits"
    ENERGY = "energy"
    MINERALS = "minerals"
    FOOD = "food"
    INFLUENCE = "influence"

    @property
    def is_tradable(self) -> bool:
        """Credits are the currency of the market, everything else can be traded."""
        return self != ResourceType.CREDITS


class SkillType(Enum):
    """Crew skills, each an integer level."""
    ENGINEERING = "engineering"
    NAVIGATION = "navigation"
    COMBAT = "combat"
    DIPLOMACY = "diplomacy"
    TRADE = "trade"


class CrewRole(Enum):
    """Roles a crew member can hold aboard the ship."""
    CAPTAIN = "Captain"
    ENGINEER = "Engineer"
    PILOT = "Pilot"
    DIPLOMAT = "Diplomat"
    GUNNER = "Gunner"
    SCIENTIST = "Scientist"
    MEDIC = "Medic"


class SystemStatus(Enum):
    """Exploration status of a star system."""
    EXPLORED = "explored"
    UNEXPLORED = "unexplored"


class PlanetType(Enum):
    """Planet classifications."""
    ROCKY = "Rocky"
    GAS_GIANT = "Gas Giant"
    ICE = "Ice"
    DESERT = "Desert"
    UNKNOWN = "Unknown"


class MarketTrend(Enum):
    """Qualitative price direction shown on the market board."""
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class TradeAction(Enum):
    """Direction of a market trade."""
    BUY = "buy"
    SELL = "sell"


class ComponentCategory(Enum):
    """Catalog categories of purchasable ship components."""
    HULLS = "hulls"
    ENGINES = "engines"
    WEAPONS = "weapons"
    CARGO_BAYS = "cargo_bays"
    SENSORS = "sensors"
    QUARTERS = "quarters"

    @property
    def slot(self) -> "ComponentSlot":
        """Ship component slot a purchase in this category replaces.

        Hulls have no slot; buying one swaps the whole frame.
        """
        return CATEGORY_SLOTS.get(self)


class ComponentSlot(Enum):
    """Component slots on a ship."""
    ENGINE = "engine"
    CARGO = "cargo"
    WEAPONS = "weapons"
    RESEARCH = "research"
    QUARTERS = "quarters"


CATEGORY_SLOTS = {
    ComponentCategory.ENGINES: ComponentSlot.ENGINE,
    ComponentCategory.WEAPONS: ComponentSlot.WEAPONS,
    ComponentCategory.CARGO_BAYS: ComponentSlot.CARGO,
    ComponentCategory.SENSORS: ComponentSlot.RESEARCH,
    ComponentCategory.QUARTERS: ComponentSlot.QUARTERS,
}


class NotificationType(Enum):
    """Severity of a notification."""
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DeltaMode(Enum):
    """How a resource delta is applied to the ledger."""
    ADD = "add"
    SUBTRACT = "subtract"
