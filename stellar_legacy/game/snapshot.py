"""Immutable game snapshots and the fragments transactions produce."""

from dataclasses import dataclass, fields, replace
from typing import Dict, Any, List, Optional, Tuple

from ..core.enums import ResourceType
from ..entities import CrewMember, Legacy, Market, Resources, Ship, StarSystem


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the economy knows at one instant.

    Snapshots are never modified; the store swaps in a new one on each
    commit, so a reference handed to a renderer or to persistence stays
    consistent.
    """

    resources: Resources
    generation_rates: Resources
    ship: Ship
    crew: Tuple[CrewMember, ...]
    star_systems: Tuple[StarSystem, ...]
    market: Market
    legacy: Legacy
    selected_system: Optional[str] = None

    def crew_member(self, crew_id: str) -> Optional[CrewMember]:
        for member in self.crew:
            if member.id == crew_id:
                return member
        return None

    def star_system(self, name: str) -> Optional[StarSystem]:
        for system in self.star_systems:
            if system.name == name:
                return system
        return None

    @property
    def selected_star_system(self) -> Optional[StarSystem]:
        if self.selected_system is None:
            return None
        return self.star_system(self.selected_system)

    @property
    def heirs(self) -> Tuple[CrewMember, ...]:
        return tuple(m for m in self.crew if m.is_heir)

    @property
    def heir(self) -> Optional[CrewMember]:
        heirs = self.heirs
        return heirs[0] if heirs else None

    @property
    def crew_count(self) -> int:
        return len(self.crew)

    def invariant_violations(self) -> List[str]:
        """Describe every broken structural invariant; empty when healthy."""
        problems = []
        heirs = self.heirs
        if len(heirs) > 1:
            problems.append(f"{len(heirs)} crew members flagged as heir: "
                            f"{', '.join(m.id for m in heirs)}")
        crew_ids = [m.id for m in self.crew]
        if len(crew_ids) != len(set(crew_ids)):
            problems.append("duplicate crew ids")
        names = [s.name for s in self.star_systems]
        if len(names) != len(set(names)):
            problems.append("duplicate star system names")
        if self.selected_system is not None and self.star_system(self.selected_system) is None:
            problems.append(f"selected system {self.selected_system} does not exist")
        return problems

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resources": self.resources.to_dict(),
            "generation_rates": self.generation_rates.to_dict(),
            "ship": self.ship.to_dict(),
            "crew": [m.to_dict() for m in self.crew],
            "star_systems": [s.to_dict() for s in self.star_systems],
            "market": self.market.to_dict(),
            "legacy": self.legacy.to_dict(),
            "selected_system": self.selected_system,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSnapshot":
        return cls(
            resources=Resources.from_dict(data["resources"]),
            generation_rates=Resources.from_dict(data["generation_rates"]),
            ship=Ship.from_dict(data["ship"]),
            crew=tuple(CrewMember.from_dict(m) for m in data["crew"]),
            star_systems=tuple(StarSystem.from_dict(s) for s in data["star_systems"]),
            market=Market.from_dict(data["market"]),
            legacy=Legacy.from_dict(data["legacy"]),
            selected_system=data.get("selected_system"),
        )


@dataclass(frozen=True)
class StateChanges:
    """New values for the parts of a snapshot a transaction touched.

    ``None`` means untouched. The store applies all fragments in a single
    replacement.
    """

    resources: Optional[Resources] = None
    generation_rates: Optional[Resources] = None
    ship: Optional[Ship] = None
    crew: Optional[Tuple[CrewMember, ...]] = None
    star_systems: Optional[Tuple[StarSystem, ...]] = None

    def touched(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def apply_to(self, snapshot: GameSnapshot) -> GameSnapshot:
        updates = {name: getattr(self, name) for name in self.touched()}
        if not updates:
            return snapshot
        return replace(snapshot, **updates)

    def resource_delta(self, before: Resources) -> Dict[ResourceType, float]:
        """Per-resource change relative to ``before``; zero entries omitted."""
        if self.resources is None:
            return {}
        delta = {}
        for resource in ResourceType:
            change = self.resources.get(resource) - before.get(resource)
            if change:
                delta[resource] = change
        return delta


def replace_system(systems: Tuple[StarSystem, ...], updated: StarSystem) -> Tuple[StarSystem, ...]:
    """Swap the system sharing ``updated``'s name."""
    return tuple(updated if s.name == updated.name else s for s in systems)


def replace_crew_member(crew: Tuple[CrewMember, ...], updated: CrewMember) -> Tuple[CrewMember, ...]:
    return tuple(updated if m.id == updated.id else m for m in crew)
