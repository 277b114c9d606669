"""Ship entity for Stellar Legacy."""

from dataclasses import dataclass, field, replace
from typing import Dict, Any, Mapping

from ..core.enums import ComponentSlot
from ..utils.validation import GameValidator, Validator
from .base import BaseEntity

STAT_NAMES = ("speed", "cargo", "combat", "research", "crew_capacity")


@dataclass(frozen=True)
class ShipStats(BaseEntity):
    """Performance figures of a ship. All non-negative integers."""

    speed: int = 0
    cargo: int = 0
    combat: int = 0
    research: int = 0
    crew_capacity: int = 0

    def validate(self) -> None:
        for stat in STAT_NAMES:
            GameValidator.validate_stat(getattr(self, stat), stat)

    def plus(self, deltas: Mapping[str, int]) -> "ShipStats":
        """Return stats with component deltas added. Unknown stat names are ignored."""
        updates = {
            stat: getattr(self, stat) + amount
            for stat, amount in deltas.items()
            if stat in STAT_NAMES
        }
        return replace(self, **updates)

    @classmethod
    def from_mapping(cls, stats: Mapping[str, int]) -> "ShipStats":
        """Build a full stats record; stats the mapping leaves out are zero."""
        return cls(**{stat: stats.get(stat, 0) for stat in STAT_NAMES})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShipStats":
        return cls.from_mapping(data)


@dataclass(frozen=True)
class ShipComponents(BaseEntity):
    """Installed component names, one per slot."""

    engine: str = ""
    cargo: str = ""
    weapons: str = ""
    research: str = ""
    quarters: str = ""

    def validate(self) -> None:
        for slot in ComponentSlot:
            Validator.validate_type(self.get(slot), str, slot.value)

    def get(self, slot: ComponentSlot) -> str:
        return getattr(self, slot.value)

    def with_slot(self, slot: ComponentSlot, component_name: str) -> "ShipComponents":
        return replace(self, **{slot.value: component_name})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShipComponents":
        return cls(**{slot.value: data.get(slot.value, "") for slot in ComponentSlot})


@dataclass(frozen=True)
class Ship(BaseEntity):
    """The player's starship."""

    name: str
    hull: str
    components: ShipComponents = field(default_factory=ShipComponents)
    stats: ShipStats = field(default_factory=ShipStats)

    def validate(self) -> None:
        Validator.validate_non_empty_string(self.name, "name")
        Validator.validate_non_empty_string(self.hull, "hull")
        Validator.validate_type(self.components, ShipComponents, "components")
        Validator.validate_type(self.stats, ShipStats, "stats")

    @property
    def crew_capacity(self) -> int:
        return self.stats.crew_capacity

    def with_hull(self, hull_name: str, hull_stats: Mapping[str, int]) -> "Ship":
        """Swap the frame. The hull's stats become the new baseline."""
        return replace(self, hull=hull_name, stats=ShipStats.from_mapping(hull_stats))

    def with_component(self, slot: ComponentSlot, component_name: str,
                       stat_deltas: Mapping[str, int]) -> "Ship":
        """Install a component into one slot and add its stat bonuses."""
        return replace(
            self,
            components=self.components.with_slot(slot, component_name),
            stats=self.stats.plus(stat_deltas),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ship":
        return cls(
            name=data["name"],
            hull=data["hull"],
            components=ShipComponents.from_dict(data.get("components", {})),
            stats=ShipStats.from_dict(data.get("stats", {})),
        )
