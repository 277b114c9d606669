"""Star systems, planets and trade routes."""

from dataclasses import dataclass, field, replace
from typing import Dict, Any, Optional, Tuple

from ..core.enums import PlanetType, ResourceType, SystemStatus
from ..core.constants import UNKNOWN_PLANET_NAME, UNKNOWN_RESOURCE_TAG
from ..utils.validation import Validator
from .base import BaseEntity


@dataclass(frozen=True)
class Planet(BaseEntity):
    """A planet inside a star system."""

    name: str
    planet_type: PlanetType = PlanetType.UNKNOWN
    resources: Tuple[str, ...] = ()
    developed: bool = False

    def validate(self) -> None:
        Validator.validate_non_empty_string(self.name, "name")
        Validator.validate_enum(self.planet_type, PlanetType, "planet_type")
        Validator.validate_type(self.resources, tuple, "resources")
        Validator.validate_unique_list(list(self.resources), "resources")
        Validator.validate_type(self.developed, bool, "developed")

    @property
    def is_placeholder(self) -> bool:
        return self.planet_type == PlanetType.UNKNOWN

    def tracked_resources(self) -> Tuple[ResourceType, ...]:
        """Resource tags that match a resource the ledger tracks."""
        known = {r.value: r for r in ResourceType}
        return tuple(known[tag] for tag in self.resources if tag in known)

    def developed_copy(self) -> "Planet":
        return replace(self, developed=True)

    @classmethod
    def placeholder(cls) -> "Planet":
        """The stand-in planet shown for unexplored systems."""
        return cls(
            name=UNKNOWN_PLANET_NAME,
            planet_type=PlanetType.UNKNOWN,
            resources=(UNKNOWN_RESOURCE_TAG,),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Planet":
        return cls(
            name=data["name"],
            planet_type=PlanetType(data["planet_type"]),
            resources=tuple(data.get("resources", ())),
            developed=data.get("developed", False),
        )


@dataclass(frozen=True)
class TradeRoute(BaseEntity):
    """An established trade link from a system."""

    id: str
    destination: str
    resource: str
    volume: int = 0
    profit_margin: float = 0.0

    def validate(self) -> None:
        Validator.validate_non_empty_string(self.id, "id")
        Validator.validate_non_empty_string(self.destination, "destination")
        Validator.validate_non_negative(self.volume, "volume")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TradeRoute":
        return cls(**data)


@dataclass(frozen=True)
class Coordinates(BaseEntity):
    """Fixed map position of a star system."""

    x: float = 0
    y: float = 0

    def validate(self) -> None:
        Validator.validate_number(self.x, "x")
        Validator.validate_number(self.y, "y")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinates":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class StarSystem(BaseEntity):
    """A star system on the galaxy map."""

    name: str
    status: SystemStatus = SystemStatus.UNEXPLORED
    planets: Tuple[Planet, ...] = field(default_factory=lambda: (Planet.placeholder(),))
    trade_routes: Tuple[TradeRoute, ...] = ()
    coordinates: Coordinates = field(default_factory=Coordinates)

    def validate(self) -> None:
        Validator.validate_non_empty_string(self.name, "name")
        Validator.validate_enum(self.status, SystemStatus, "status")
        Validator.validate_type(self.planets, tuple, "planets")
        Validator.validate_type(self.trade_routes, tuple, "trade_routes")
        Validator.validate_type(self.coordinates, Coordinates, "coordinates")

    @property
    def is_explored(self) -> bool:
        return self.status == SystemStatus.EXPLORED

    @property
    def undeveloped_planets(self) -> Tuple[Planet, ...]:
        return tuple(p for p in self.planets if not p.developed)

    @property
    def developed_planets(self) -> Tuple[Planet, ...]:
        return tuple(p for p in self.planets if p.developed)

    def first_undeveloped_planet(self) -> Optional[Planet]:
        """First undeveloped planet in list order."""
        for planet in self.planets:
            if not planet.developed:
                return planet
        return None

    def explored_with(self, planets: Tuple[Planet, ...]) -> "StarSystem":
        """Replace the placeholder list with discovered planets."""
        return replace(self, status=SystemStatus.EXPLORED, planets=tuple(planets))

    def with_developed_planet(self, index: int) -> "StarSystem":
        planets = list(self.planets)
        planets[index] = planets[index].developed_copy()
        return replace(self, planets=tuple(planets))

    @classmethod
    def unexplored(cls, name: str, x: float, y: float) -> "StarSystem":
        return cls(name=name, coordinates=Coordinates(x, y))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StarSystem":
        return cls(
            name=data["name"],
            status=SystemStatus(data["status"]),
            planets=tuple(Planet.from_dict(p) for p in data.get("planets", ())),
            trade_routes=tuple(TradeRoute.from_dict(r) for r in data.get("trade_routes", ())),
            coordinates=Coordinates.from_dict(data["coordinates"]),
        )
