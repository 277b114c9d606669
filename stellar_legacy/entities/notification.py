"""Notification entity."""

from dataclasses import dataclass

from ..core.enums import NotificationType
from ..utils.validation import Validator
from .base import BaseEntity


@dataclass(frozen=True)
class Notification(BaseEntity):
    """A message shown to the player for a limited time."""

    id: str
    message: str
    type: NotificationType = NotificationType.INFO
    timestamp: float = 0.0  # milliseconds

    def validate(self) -> None:
        Validator.validate_non_empty_string(self.id, "id")
        Validator.validate_type(self.message, str, "message")
        Validator.validate_enum(self.type, NotificationType, "type")
        Validator.validate_number(self.timestamp, "timestamp")

    def is_expired(self, now: float, timeout_ms: float) -> bool:
        return now - self.timestamp >= timeout_ms
