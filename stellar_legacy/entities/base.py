"""Base entity classes for Stellar Legacy domain objects."""

from abc import ABC, abstractmethod
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Dict, Any


class BaseEntity(ABC):
    """Base class for immutable game values.

    Subclasses are frozen dataclasses. Every change goes through
    ``dataclasses.replace`` so a snapshot handed out earlier never changes
    underneath its holder.
    """

    def __post_init__(self):
        """Post-initialization validation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate entity state. Must be implemented by subclasses."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {f.name: serialize_value(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseEntity":
        """Create entity from dictionary representation."""
        raise NotImplementedError("Subclasses must implement from_dict")


def serialize_value(value: Any) -> Any:
    """Turn entity fields into plain JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if is_dataclass(value):
        return {f.name: serialize_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple, set)):
        return [serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    return value
