"""Tunable configuration for a Stellar Legacy game."""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, Tuple, Union

from ..core import constants as C
from ..core.enums import ResourceType
from ..core.exceptions import InvalidConfigurationError, LoadGameError, ValidationError
from ..utils.validation import Validator

CostTable = Dict[ResourceType, float]
Interval = Tuple[int, int]


@dataclass
class GameSettings:
    """Configuration settings for a game.

    Every number the economy uses lives here so that balance runs and tests
    can override it without touching the constants module.
    """

    # Action costs
    training_cost: CostTable = field(default_factory=lambda: dict(C.CREW_TRAINING_COST))
    morale_boost_cost: CostTable = field(default_factory=lambda: dict(C.MORALE_BOOST_COST))
    recruitment_cost: CostTable = field(default_factory=lambda: dict(C.CREW_RECRUITMENT_COST))
    exploration_cost: CostTable = field(default_factory=lambda: dict(C.EXPLORATION_COST))
    colony_cost: CostTable = field(default_factory=lambda: dict(C.COLONY_COST))

    # Effects
    morale_boost_amount: int = C.MORALE_BOOST_AMOUNT
    colony_generation_boost: float = C.COLONY_GENERATION_BOOST
    trade_amount: int = C.TRADE_AMOUNT
    heir_max_age: int = C.HEIR_MAX_AGE

    # Ledger
    resource_bounds: Dict[ResourceType, Tuple[float, float]] = field(
        default_factory=lambda: dict(C.RESOURCE_BOUNDS))
    base_generation_rates: CostTable = field(
        default_factory=lambda: dict(C.BASE_GENERATION_RATES))

    # Generation ranges (inclusive)
    recruit_skill_range: Interval = C.RECRUIT_SKILL_RANGE
    recruit_morale_range: Interval = C.RECRUIT_MORALE_RANGE
    recruit_age_range: Interval = C.RECRUIT_AGE_RANGE
    planets_per_system_range: Interval = C.PLANETS_PER_SYSTEM_RANGE
    resources_per_planet_range: Interval = C.RESOURCES_PER_PLANET_RANGE

    # Timing and feed
    tick_interval_ms: int = C.TICK_INTERVAL_MS
    notification_timeout_ms: int = C.NOTIFICATION_TIMEOUT_MS
    autosave_interval_ms: int = C.AUTOSAVE_INTERVAL_MS
    max_notifications: int = C.MAX_NOTIFICATIONS
    action_log_limit: int = C.ACTION_LOG_LIMIT

    def validate(self) -> None:
        """Validate game settings."""
        try:
            for name in ("training_cost", "morale_boost_cost", "recruitment_cost",
                         "exploration_cost", "colony_cost"):
                for resource, amount in getattr(self, name).items():
                    Validator.validate_enum(resource, ResourceType, name)
                    Validator.validate_non_negative(amount, f"{name}.{resource.value}")

            for resource in ResourceType:
                if resource not in self.resource_bounds:
                    raise InvalidConfigurationError(
                        f"Missing bounds for {resource.value}",
                        error_code="MISSING_BOUNDS",
                        context={"resource": resource.value}
                    )
                low, high = self.resource_bounds[resource]
                Validator.validate_non_negative(low, f"{resource.value} minimum")
                Validator.validate_interval((low, high), f"{resource.value} bounds")

            for resource, rate in self.base_generation_rates.items():
                Validator.validate_enum(resource, ResourceType, "base_generation_rates")
                Validator.validate_non_negative(rate, f"{resource.value} generation rate")

            Validator.validate_positive(self.morale_boost_amount, "morale_boost_amount")
            Validator.validate_non_negative(self.colony_generation_boost, "colony_generation_boost")
            Validator.validate_positive(self.trade_amount, "trade_amount")
            Validator.validate_positive(self.heir_max_age, "heir_max_age")

            Validator.validate_interval(self.recruit_skill_range, "recruit_skill_range")
            Validator.validate_range(self.recruit_skill_range[0], C.MIN_SKILL_LEVEL,
                                     C.MAX_SKILL_LEVEL, "recruit_skill_range")
            Validator.validate_range(self.recruit_skill_range[1], C.MIN_SKILL_LEVEL,
                                     C.MAX_SKILL_LEVEL, "recruit_skill_range")
            Validator.validate_interval(self.recruit_morale_range, "recruit_morale_range")
            Validator.validate_range(self.recruit_morale_range[0], C.MIN_MORALE,
                                     C.MAX_MORALE, "recruit_morale_range")
            Validator.validate_range(self.recruit_morale_range[1], C.MIN_MORALE,
                                     C.MAX_MORALE, "recruit_morale_range")
            Validator.validate_interval(self.recruit_age_range, "recruit_age_range")
            Validator.validate_positive(self.recruit_age_range[0], "recruit_age_range")
            Validator.validate_interval(self.planets_per_system_range, "planets_per_system_range")
            Validator.validate_positive(self.planets_per_system_range[0], "planets_per_system_range")
            Validator.validate_range(self.planets_per_system_range[1], 1, 26,
                                     "planets_per_system_range")
            Validator.validate_interval(self.resources_per_planet_range, "resources_per_planet_range")
            Validator.validate_positive(self.resources_per_planet_range[0],
                                        "resources_per_planet_range")

            Validator.validate_positive(self.tick_interval_ms, "tick_interval_ms")
            Validator.validate_positive(self.notification_timeout_ms, "notification_timeout_ms")
            Validator.validate_positive(self.autosave_interval_ms, "autosave_interval_ms")
            Validator.validate_positive(self.max_notifications, "max_notifications")
            Validator.validate_positive(self.action_log_limit, "action_log_limit")
        except InvalidConfigurationError:
            raise
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid game settings: {e.message}",
                error_code="INVALID_SETTINGS",
                context=e.context
            ) from e

    def bounds_for(self, resource: ResourceType) -> Tuple[float, float]:
        return self.resource_bounds[resource]

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible representation."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, dict):
                value = {k.value: (list(v) if isinstance(v, tuple) else v) for k, v in value.items()}
            elif isinstance(value, tuple):
                value = list(value)
            result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSettings":
        """Build settings from a partial override document.

        Keys the document leaves out keep their defaults; unknown keys are an
        error so that typos do not silently fall back to defaults.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown settings: {', '.join(sorted(unknown))}",
                error_code="UNKNOWN_SETTINGS",
                context={"keys": sorted(unknown)}
            )

        kwargs = {}
        for key, value in data.items():
            if isinstance(value, dict):
                try:
                    value = {
                        ResourceType(k): (tuple(v) if isinstance(v, list) else v)
                        for k, v in value.items()
                    }
                except ValueError as e:
                    raise InvalidConfigurationError(
                        f"Invalid resource in {key}: {e}",
                        error_code="INVALID_RESOURCE",
                        context={"setting": key}
                    ) from e
                if key in ("resource_bounds", "base_generation_rates"):
                    value = {**getattr(cls(), key), **value}
            elif isinstance(value, list):
                value = tuple(value)
            kwargs[key] = value

        settings = cls(**kwargs)
        settings.validate()
        return settings


def load_settings(path: Union[str, Path]) -> GameSettings:
    """Load settings overrides from a JSON file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        raise LoadGameError(
            f"Could not read settings from {path}: {e}",
            error_code="SETTINGS_UNREADABLE",
            context={"path": str(path)}
        ) from e
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Settings file {path} must contain a JSON object",
            error_code="INVALID_SETTINGS",
            context={"path": str(path)}
        )
    return GameSettings.from_dict(data)
