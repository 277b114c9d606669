"""Resource quantities held by the player."""

from dataclasses import dataclass, replace
from typing import Dict, Any, Mapping, Union

from ..core.enums import ResourceType
from ..utils.validation import GameValidator
from .base import BaseEntity

Number = Union[int, float]


@dataclass(frozen=True)
class Resources(BaseEntity):
    """One snapshot of the five tracked resources.

    Also used for per-tick generation rates. Bounds are the ledger's
    business; an instance only guarantees non-negative numbers.
    """

    credits: Number = 0
    energy: Number = 0
    minerals: Number = 0
    food: Number = 0
    influence: Number = 0

    def validate(self) -> None:
        for resource in ResourceType:
            GameValidator.validate_resource_amount(self.get(resource), resource)

    def get(self, resource: ResourceType) -> Number:
        return getattr(self, resource.value)

    def with_amounts(self, amounts: Mapping[ResourceType, Number]) -> "Resources":
        """Return a copy with the given resources replaced."""
        return replace(self, **{resource.value: amount for resource, amount in amounts.items()})

    def as_mapping(self) -> Dict[ResourceType, Number]:
        return {resource: self.get(resource) for resource in ResourceType}

    @classmethod
    def from_mapping(cls, amounts: Mapping[ResourceType, Number]) -> "Resources":
        """Build from a partial mapping; missing resources are zero."""
        return cls(**{resource.value: amount for resource, amount in amounts.items()})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resources":
        return cls(**{resource.value: data.get(resource.value, 0) for resource in ResourceType})

    def __str__(self) -> str:
        return ", ".join(f"{r.value}={self.get(r):g}" for r in ResourceType)
