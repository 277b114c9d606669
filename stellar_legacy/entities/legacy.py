"""Dynasty legacy record."""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple

from ..utils.validation import Validator
from .base import BaseEntity


@dataclass(frozen=True)
class Legacy(BaseEntity):
    """Multi-generational record of the ruling family."""

    generation: int = 1
    family_name: str = ""
    achievements: Tuple[str, ...] = ()
    traits: Tuple[str, ...] = ()
    reputation: Dict[str, int] = field(default_factory=dict)

    def validate(self) -> None:
        Validator.validate_integer(self.generation, "generation")
        Validator.validate_positive(self.generation, "generation")
        Validator.validate_type(self.family_name, str, "family_name")
        Validator.validate_type(self.achievements, tuple, "achievements")
        Validator.validate_type(self.traits, tuple, "traits")
        for faction, standing in self.reputation.items():
            Validator.validate_integer(standing, f"{faction} reputation")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Legacy":
        return cls(
            generation=data.get("generation", 1),
            family_name=data.get("family_name", ""),
            achievements=tuple(data.get("achievements", ())),
            traits=tuple(data.get("traits", ())),
            reputation=dict(data.get("reputation", {})),
        )
