"""Base action class for the command pattern implementation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional

from ..core.enums import NotificationType
from ..core.exceptions import ConstraintViolationError, StellarLegacyError
from ..game.ledger import ResourceLedger
from ..game.snapshot import GameSnapshot, StateChanges
from ..utils.generators import EntityGenerator


class ActionResult(Enum):
    """Result types for action execution."""
    SUCCESS = "success"
    INVALID = "invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Pass/fail verdict of a validator, with the typed error on failure."""
    valid: bool
    error: Optional[StellarLegacyError] = None

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error else None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, error: StellarLegacyError) -> "ValidationResult":
        return cls(False, error)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class ActionOutcome:
    """Result of executing an action."""
    result: ActionResult
    message: str
    changes: StateChanges = field(default_factory=StateChanges)
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[StellarLegacyError] = None
    notification_type: NotificationType = NotificationType.SUCCESS

    @property
    def succeeded(self) -> bool:
        return self.result == ActionResult.SUCCESS

    @property
    def reason(self) -> Optional[str]:
        """Failure reason; None on success."""
        return self.error.message if self.error else None

    @classmethod
    def success(cls, message: str, changes: StateChanges,
                data: Optional[Dict[str, Any]] = None) -> "ActionOutcome":
        return cls(ActionResult.SUCCESS, message, changes, data or {})

    @classmethod
    def rejected(cls, error: StellarLegacyError) -> "ActionOutcome":
        return cls(
            ActionResult.INVALID,
            error.message,
            error=error,
            data={"error_code": error.error_code, **error.context},
            notification_type=NotificationType.ERROR,
        )


@dataclass
class TransactionContext:
    """Collaborators an action may use while computing its changes."""
    settings: Any
    ledger: ResourceLedger
    generator: EntityGenerator


class BaseAction(ABC):
    """Base class for all player transactions using Command pattern.

    ``execute`` never touches the store: it validates against a snapshot and
    packages the resulting fragments in an ActionOutcome for the store to
    commit in one step.
    """

    def __init__(self, action_type: str):
        self.action_type = action_type
        self.executed = False
        self.outcome: Optional[ActionOutcome] = None

    @abstractmethod
    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        """Check if this action can be executed against the snapshot."""
        pass

    @abstractmethod
    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        """Compute the outcome of a validated action."""
        pass

    def execute(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        """Validate, then compute the outcome of this action."""
        validation = self.validate(snapshot, context)
        if not validation.valid:
            outcome = ActionOutcome.rejected(validation.error)
        else:
            try:
                outcome = self.apply(snapshot, context)
            except ConstraintViolationError as e:
                outcome = ActionOutcome.rejected(e)

        self.executed = True
        self.outcome = outcome
        return outcome

    def get_action_data(self) -> Dict[str, Any]:
        """Get serializable data about this action."""
        return {
            "action_type": self.action_type,
            "executed": self.executed,
            "outcome": self.outcome.result.value if self.outcome else None
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.action_type})"
