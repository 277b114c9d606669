"""Player transactions."""

from .base_action import ActionOutcome, ActionResult, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator
from .crew import BoostMoraleAction, RecruitCrewAction, SelectHeirAction, TrainCrewAction
from .exploration import ExploreSystemAction
from .colonization import EstablishColonyAction
from .shipyard import PurchaseComponentAction
from .trade import TradeResourceAction

__all__ = [
    "ActionOutcome", "ActionResult", "BaseAction", "TransactionContext", "ValidationResult",
    "ActionValidator",
    "TrainCrewAction", "BoostMoraleAction", "RecruitCrewAction", "SelectHeirAction",
    "ExploreSystemAction", "EstablishColonyAction", "PurchaseComponentAction",
    "TradeResourceAction",
]
