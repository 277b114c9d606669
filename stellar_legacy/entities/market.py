"""Commodity market prices."""

from dataclasses import dataclass, field
from typing import Dict, Any

from ..core.enums import MarketTrend, ResourceType
from ..core.exceptions import InvalidInputError
from ..utils.validation import Validator
from .base import BaseEntity


@dataclass(frozen=True)
class Market(BaseEntity):
    """Per-resource price and trend. Prices are fixed parameters."""

    prices: Dict[ResourceType, float] = field(default_factory=dict)
    trends: Dict[ResourceType, MarketTrend] = field(default_factory=dict)

    def validate(self) -> None:
        for resource, price in self.prices.items():
            Validator.validate_enum(resource, ResourceType, "resource")
            if not resource.is_tradable:
                raise InvalidInputError(
                    f"{resource.value} cannot be listed on the market",
                    error_code="NOT_TRADABLE",
                    context={"resource": resource.value}
                )
            Validator.validate_number(price, f"{resource.value} price")
            Validator.validate_positive(price, f"{resource.value} price")
        for resource, trend in self.trends.items():
            Validator.validate_enum(trend, MarketTrend, f"{resource.value} trend")

    def lists(self, resource: ResourceType) -> bool:
        return resource in self.prices

    def price_of(self, resource: ResourceType) -> float:
        return self.prices[resource]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Market":
        return cls(
            prices={ResourceType(k): v for k, v in data.get("prices", {}).items()},
            trends={ResourceType(k): MarketTrend(v) for k, v in data.get("trends", {}).items()},
        )
