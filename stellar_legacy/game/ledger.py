"""Resource ledger: bound enforcement for resource changes."""

from typing import Dict, Mapping, Optional, Tuple, Union

from ..core.constants import RESOURCE_BOUNDS
from ..core.enums import DeltaMode, ResourceType
from ..core.exceptions import ConstraintViolationError
from ..entities.resources import Resources

Number = Union[int, float]
Delta = Union[Resources, Mapping[ResourceType, Number]]


def _as_mapping(delta: Delta) -> Dict[ResourceType, Number]:
    if isinstance(delta, Resources):
        return delta.as_mapping()
    return dict(delta)


class ResourceLedger:
    """Applies resource deltas while keeping every resource inside its bounds.

    ``apply_delta`` is all-or-nothing: the whole projected snapshot is
    computed first and the change is rejected if any resource would leave its
    range. ``apply_saturating`` clamps instead and never fails; passive
    generation uses it.
    """

    def __init__(self, bounds: Optional[Mapping[ResourceType, Tuple[Number, Number]]] = None):
        self.bounds: Dict[ResourceType, Tuple[Number, Number]] = dict(bounds or RESOURCE_BOUNDS)

    def bounds_for(self, resource: ResourceType) -> Tuple[Number, Number]:
        return self.bounds[resource]

    def within_bounds(self, resources: Resources) -> bool:
        """True when every resource lies inside its closed range."""
        for resource in ResourceType:
            low, high = self.bounds[resource]
            if not low <= resources.get(resource) <= high:
                return False
        return True

    def project(self, resources: Resources, delta: Delta,
                mode: DeltaMode = DeltaMode.ADD) -> Dict[ResourceType, Number]:
        """Raw resulting amounts, without any bound handling."""
        sign = 1 if mode == DeltaMode.ADD else -1
        projected = resources.as_mapping()
        for resource, amount in _as_mapping(delta).items():
            projected[resource] = projected[resource] + sign * amount
        return projected

    def apply_delta(self, resources: Resources, delta: Delta,
                    mode: DeltaMode = DeltaMode.ADD) -> Resources:
        """Apply a delta, rejecting the whole change if any bound breaks.

        Raises ConstraintViolationError naming the first offending resource in
        ledger order; ``resources`` is never modified.
        """
        projected = self.project(resources, delta, mode)
        for resource in ResourceType:
            low, high = self.bounds[resource]
            value = projected[resource]
            if value < low:
                raise ConstraintViolationError(
                    f"{resource.value} would fall to {value:g}, below the minimum of {low:g}",
                    error_code="BELOW_MINIMUM",
                    context={"resource": resource.value, "projected": value, "min": low}
                )
            if value > high:
                raise ConstraintViolationError(
                    f"{resource.value} would reach {value:g}, above the maximum of {high:g}",
                    error_code="ABOVE_MAXIMUM",
                    context={"resource": resource.value, "projected": value, "max": high}
                )
        return Resources.from_mapping(projected)

    def apply_saturating(self, resources: Resources, delta: Delta,
                         mode: DeltaMode = DeltaMode.ADD) -> Resources:
        """Apply a delta, clamping each resource to its bound."""
        projected = self.project(resources, delta, mode)
        clamped = {}
        for resource, value in projected.items():
            low, high = self.bounds[resource]
            clamped[resource] = min(high, max(low, value))
        return Resources.from_mapping(clamped)

    def can_afford(self, resources: Resources, cost: Delta) -> bool:
        """True when paying ``cost`` keeps every resource at or above its minimum."""
        projected = self.project(resources, cost, DeltaMode.SUBTRACT)
        return all(projected[r] >= self.bounds[r][0] for r in ResourceType)

    def first_shortfall(self, resources: Resources,
                        cost: Delta) -> Optional[Tuple[ResourceType, Number, Number]]:
        """First resource in ledger order that cannot cover ``cost``.

        Returns (resource, required, available) or None.
        """
        cost_map = _as_mapping(cost)
        for resource in ResourceType:
            required = cost_map.get(resource, 0)
            if not required:
                continue
            available = resources.get(resource)
            if available - required < self.bounds[resource][0]:
                return resource, required, available
        return None
