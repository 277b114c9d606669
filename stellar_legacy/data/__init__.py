"""Game data: starting state and the ship component catalog."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.enums import (
    ComponentCategory, CrewRole, MarketTrend, PlanetType, ResourceType, SystemStatus
)
from ..entities import (
    Coordinates, CrewMember, CrewSkills, Legacy, Market, Planet, Resources, Ship,
    ShipComponents, ShipStats, StarSystem
)

VALID_STAT_NAMES = ("speed", "cargo", "combat", "research", "crew_capacity")


@dataclass(frozen=True)
class ComponentData:
    """Data structure for a purchasable ship component."""
    name: str
    category: ComponentCategory
    cost: Dict[ResourceType, int] = field(default_factory=dict)
    stats: Dict[str, int] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self):
        """Validate component data."""
        if not self.cost:
            raise ValueError(f"Component {self.name} has no cost")
        if any(amount <= 0 for amount in self.cost.values()):
            raise ValueError(f"Invalid cost for {self.name}: {self.cost}")
        unknown = set(self.stats) - set(VALID_STAT_NAMES)
        if unknown:
            raise ValueError(f"Unknown stats for {self.name}: {sorted(unknown)}")
        if self.category == ComponentCategory.HULLS and "crew_capacity" not in self.stats:
            raise ValueError(f"Hull {self.name} must define crew_capacity")


# Ship Component Catalog
SHIP_COMPONENTS: Dict[ComponentCategory, Tuple[ComponentData, ...]] = {
    ComponentCategory.HULLS: (
        ComponentData("Light Corvette", ComponentCategory.HULLS,
                      {ResourceType.CREDITS: 500},
                      {"speed": 3, "cargo": 100, "combat": 2, "research": 1, "crew_capacity": 6},
                      "Nimble starter frame"),
        ComponentData("Heavy Frigate", ComponentCategory.HULLS,
                      {ResourceType.CREDITS: 1500, ResourceType.MINERALS: 200},
                      {"speed": 2, "cargo": 200, "combat": 5, "research": 0, "crew_capacity": 10},
                      "Armoured workhorse with room for a larger crew"),
        ComponentData("Exploration Vessel", ComponentCategory.HULLS,
                      {ResourceType.CREDITS: 1200, ResourceType.ENERGY: 150},
                      {"speed": 4, "cargo": 150, "combat": 0, "research": 3, "crew_capacity": 8},
                      "Long-range survey frame"),
    ),
    ComponentCategory.ENGINES: (
        ComponentData("Basic Thruster", ComponentCategory.ENGINES,
                      {ResourceType.CREDITS: 200}, {"speed": 1}),
        ComponentData("Ion Drive", ComponentCategory.ENGINES,
                      {ResourceType.CREDITS: 800, ResourceType.ENERGY: 100}, {"speed": 3}),
        ComponentData("Warp Core", ComponentCategory.ENGINES,
                      {ResourceType.CREDITS: 2000, ResourceType.ENERGY: 300, ResourceType.MINERALS: 100},
                      {"speed": 5}),
    ),
    ComponentCategory.WEAPONS: (
        ComponentData("Light Laser", ComponentCategory.WEAPONS,
                      {ResourceType.CREDITS: 300}, {"combat": 2}),
        ComponentData("Pulse Cannon", ComponentCategory.WEAPONS,
                      {ResourceType.CREDITS: 800, ResourceType.MINERALS: 50}, {"combat": 4}),
        ComponentData("Plasma Artillery", ComponentCategory.WEAPONS,
                      {ResourceType.CREDITS: 1500, ResourceType.MINERALS: 150, ResourceType.ENERGY: 100},
                      {"combat": 7}),
    ),
    ComponentCategory.CARGO_BAYS: (
        ComponentData("Standard Bay", ComponentCategory.CARGO_BAYS,
                      {ResourceType.CREDITS: 150}, {"cargo": 25}),
        ComponentData("Expanded Hold", ComponentCategory.CARGO_BAYS,
                      {ResourceType.CREDITS: 600, ResourceType.MINERALS: 40}, {"cargo": 75}),
    ),
    ComponentCategory.SENSORS: (
        ComponentData("Basic Scanner", ComponentCategory.SENSORS,
                      {ResourceType.CREDITS: 150}, {"research": 1}),
        ComponentData("Deep Space Array", ComponentCategory.SENSORS,
                      {ResourceType.CREDITS: 900, ResourceType.ENERGY: 80}, {"research": 3}),
    ),
    ComponentCategory.QUARTERS: (
        ComponentData("Crew Quarters", ComponentCategory.QUARTERS,
                      {ResourceType.CREDITS: 250}, {"crew_capacity": 1}),
        ComponentData("Habitat Ring", ComponentCategory.QUARTERS,
                      {ResourceType.CREDITS: 1000, ResourceType.MINERALS: 120, ResourceType.FOOD: 50},
                      {"crew_capacity": 4}),
    ),
}


# Starting State
STARTING_RESOURCES = {
    ResourceType.CREDITS: 1000,
    ResourceType.ENERGY: 100,
    ResourceType.MINERALS: 50,
    ResourceType.FOOD: 80,
    ResourceType.INFLUENCE: 25,
}

MARKET_PRICES = {
    ResourceType.MINERALS: 15,
    ResourceType.ENERGY: 12,
    ResourceType.FOOD: 8,
    ResourceType.INFLUENCE: 25,
}

MARKET_TRENDS = {
    ResourceType.MINERALS: MarketTrend.RISING,
    ResourceType.ENERGY: MarketTrend.STABLE,
    ResourceType.FOOD: MarketTrend.FALLING,
    ResourceType.INFLUENCE: MarketTrend.RISING,
}


# Utility functions for data access
def get_component(category: ComponentCategory, name: str) -> Optional[ComponentData]:
    """Look up a catalog entry by category and name."""
    for component in SHIP_COMPONENTS.get(category, ()):
        if component.name == name:
            return component
    return None


def get_components_by_category(category: ComponentCategory) -> List[ComponentData]:
    """Get all catalog entries of a category."""
    return list(SHIP_COMPONENTS.get(category, ()))


def starting_resources() -> Resources:
    return Resources.from_mapping(STARTING_RESOURCES)


def starting_ship() -> Ship:
    return Ship(
        name="Pioneer's Dream",
        hull="Light Corvette",
        components=ShipComponents(
            engine="Basic Thruster",
            cargo="Standard Bay",
            weapons="Light Laser",
            research="Basic Scanner",
            quarters="Crew Quarters",
        ),
        stats=ShipStats(speed=3, cargo=100, combat=2, research=1, crew_capacity=6),
    )


def starting_crew() -> Tuple[CrewMember, ...]:
    return (
        CrewMember(
            id="crew-001", name="Captain Elena Voss", role=CrewRole.CAPTAIN,
            skills=CrewSkills(engineering=6, navigation=8, combat=7, diplomacy=9, trade=5),
            morale=85, background="Former military officer turned explorer", age=35,
        ),
        CrewMember(
            id="crew-002", name="Chief Engineer Marcus Cole", role=CrewRole.ENGINEER,
            skills=CrewSkills(engineering=9, navigation=4, combat=5, diplomacy=3, trade=2),
            morale=90, background="Shipyard veteran with decades of experience", age=28,
        ),
        CrewMember(
            id="crew-003", name="Navigator Zara Chen", role=CrewRole.PILOT,
            skills=CrewSkills(engineering=3, navigation=9, combat=6, diplomacy=5, trade=4),
            morale=80, background="Ace pilot from the outer colonies", age=26,
        ),
        CrewMember(
            id="crew-004", name="Trader Kex Thorne", role=CrewRole.DIPLOMAT,
            skills=CrewSkills(engineering=2, navigation=3, combat=4, diplomacy=8, trade=9),
            morale=75, background="Smooth-talking merchant with connections", age=32,
        ),
    )


def starting_star_systems() -> Tuple[StarSystem, ...]:
    return (
        StarSystem(
            name="Sol Alpha",
            status=SystemStatus.EXPLORED,
            planets=(
                Planet("Terra Prime", PlanetType.ROCKY, ("minerals", "energy"), developed=True),
                Planet("Gas Giant Beta", PlanetType.GAS_GIANT, ("energy", "food")),
            ),
            coordinates=Coordinates(100, 100),
        ),
        StarSystem.unexplored("Kepler Station", 200, 150),
        StarSystem.unexplored("Vega Outpost", 150, 250),
    )


def starting_market() -> Market:
    return Market(prices=dict(MARKET_PRICES), trends=dict(MARKET_TRENDS))


def starting_legacy() -> Legacy:
    return Legacy(
        generation=1,
        family_name="Voss",
        achievements=("First Command", "System Explorer"),
        traits=("Natural Leader", "Tech Savvy"),
        reputation={"military": 20, "traders": 15, "scientists": 10},
    )
