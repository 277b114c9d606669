"""Central game state management for Stellar Legacy."""

import logging
import random
import uuid
from collections import deque
from dataclasses import replace
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from ..actions.base_action import ActionOutcome, BaseAction, TransactionContext
from ..actions.colonization import EstablishColonyAction
from ..actions.crew import BoostMoraleAction, RecruitCrewAction, SelectHeirAction, TrainCrewAction
from ..actions.exploration import ExploreSystemAction
from ..actions.shipyard import PurchaseComponentAction
from ..actions.trade import TradeResourceAction
from ..actions.validators import ActionValidator
from ..core.enums import DeltaMode, NotificationType
from ..core.exceptions import ActionSequenceError, InvalidGameStateError
from ..data import (
    starting_crew, starting_legacy, starting_market, starting_resources, starting_ship,
    starting_star_systems
)
from ..entities import CrewMember, Legacy, Market, Notification, Resources, Ship, StarSystem
from ..utils.generators import EntityGenerator, new_crew_id
from .ledger import Delta, ResourceLedger
from .notifications import Clock, NotificationCenter, new_notification_id, wall_clock_ms
from .settings import GameSettings
from .snapshot import GameSnapshot, StateChanges

Listener = Callable[[GameSnapshot], None]


class GameState:
    """Owner of the canonical game snapshot.

    Every change goes through one of the intent methods below. Each intent
    runs to completion, commits its whole result in a single snapshot
    replacement and posts exactly one notification. Calling an intent while
    another one is still running (for example from a commit listener) raises
    ActionSequenceError; such calls belong on a GameLoop queue.
    """

    def __init__(self, snapshot: GameSnapshot, settings: Optional[GameSettings] = None,
                 rng: Optional[random.Random] = None, clock: Clock = wall_clock_ms,
                 crew_id_factory: Callable[[], str] = new_crew_id,
                 notification_id_factory: Callable[[], str] = new_notification_id):
        self.settings = settings or GameSettings()
        self.settings.validate()

        self.clock = clock
        self.ledger = ResourceLedger(self.settings.resource_bounds)
        self.generator = EntityGenerator(self.settings, rng, crew_id_factory)
        self.notifications = NotificationCenter(
            timeout_ms=self.settings.notification_timeout_ms,
            max_notifications=self.settings.max_notifications,
            clock=clock,
            id_factory=notification_id_factory,
        )
        self.action_log: Deque[Dict[str, Any]] = deque(maxlen=self.settings.action_log_limit)

        self._listeners: List[Listener] = []
        self._in_transaction = False

        self._check_invariants(snapshot)
        self._snapshot = snapshot

    @property
    def context(self) -> TransactionContext:
        return TransactionContext(self.settings, self.ledger, self.generator)

    # Read accessors
    @property
    def snapshot(self) -> GameSnapshot:
        return self._snapshot

    @property
    def resources(self) -> Resources:
        return self._snapshot.resources

    @property
    def generation_rates(self) -> Resources:
        return self._snapshot.generation_rates

    @property
    def ship(self) -> Ship:
        return self._snapshot.ship

    @property
    def crew(self) -> Tuple[CrewMember, ...]:
        return self._snapshot.crew

    @property
    def star_systems(self) -> Tuple[StarSystem, ...]:
        return self._snapshot.star_systems

    @property
    def selected_system(self) -> Optional[StarSystem]:
        return self._snapshot.selected_star_system

    @property
    def market(self) -> Market:
        return self._snapshot.market

    @property
    def legacy(self) -> Legacy:
        return self._snapshot.legacy

    @property
    def heir(self) -> Optional[CrewMember]:
        return self._snapshot.heir

    @property
    def active_notifications(self) -> List[Notification]:
        return self.notifications.active

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    # Listeners
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new snapshot after every commit.

        Returns a function that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Intents
    def train_crew(self) -> ActionOutcome:
        return self.dispatch(TrainCrewAction())

    def boost_morale(self) -> ActionOutcome:
        return self.dispatch(BoostMoraleAction())

    def recruit_crew(self) -> ActionOutcome:
        return self.dispatch(RecruitCrewAction())

    def explore_system(self) -> ActionOutcome:
        return self.dispatch(ExploreSystemAction())

    def establish_colony(self) -> ActionOutcome:
        return self.dispatch(EstablishColonyAction())

    def purchase_component(self, category: Any, component_name: str) -> ActionOutcome:
        return self.dispatch(PurchaseComponentAction(category, component_name))

    def trade_resource(self, resource: Any, action: Any) -> ActionOutcome:
        return self.dispatch(TradeResourceAction(resource, action))

    def select_heir(self, crew_id: str) -> ActionOutcome:
        return self.dispatch(SelectHeirAction(crew_id))

    def select_system(self, system_name: str) -> ActionOutcome:
        """Point the selection at a known system.

        A successful selection is silent; only an unknown name produces a
        notification.
        """
        self._begin("select_system")
        try:
            validation = ActionValidator.validate_system_selection(self._snapshot, system_name)
            if not validation.valid:
                outcome = ActionOutcome.rejected(validation.error)
                self._reject("select_system", outcome)
                return outcome

            self._commit(replace(self._snapshot, selected_system=system_name))
            outcome = ActionOutcome.success(f"Selected {system_name}", StateChanges(),
                                            {"system": system_name})
            self._log_action("select_system", outcome)
            self._notify_listeners()
            return outcome
        finally:
            self._end()

    def dispatch(self, action: BaseAction) -> ActionOutcome:
        """Run one transaction and commit its result."""
        self._begin(action.action_type)
        try:
            outcome = action.execute(self._snapshot, self.context)
            if not outcome.succeeded:
                self._reject(action.action_type, outcome)
                return outcome

            self._commit(outcome.changes.apply_to(self._snapshot))
            logging.info(f"{action.action_type}: {outcome.message}")
            self.notifications.push(outcome.message, outcome.notification_type)
            self._log_action(action.action_type, outcome)
            self._notify_listeners()
            return outcome
        finally:
            self._end()

    def tick(self) -> Resources:
        """Add one round of passive generation, clamped at the maximums."""
        self._begin("tick")
        try:
            snapshot = self._snapshot
            resources = self.ledger.apply_saturating(
                snapshot.resources, snapshot.generation_rates, DeltaMode.ADD)
            self._commit(replace(snapshot, resources=resources))
            logging.debug(f"Tick: {resources}")
            self._notify_listeners()
            return resources
        finally:
            self._end()

    def dismiss_notification(self, notification_id: str) -> bool:
        return self.notifications.dismiss(notification_id)

    # Queries
    def can_afford(self, cost: Delta) -> bool:
        return self.ledger.can_afford(self._snapshot.resources, cost)

    def get_empire_summary(self) -> Dict[str, Any]:
        """Overview of the dynasty's holdings."""
        snapshot = self._snapshot
        crew = snapshot.crew
        average_morale = round(sum(m.morale for m in crew) / len(crew), 1) if crew else 0
        heir = snapshot.heir
        return {
            "family_name": snapshot.legacy.family_name,
            "generation": snapshot.legacy.generation,
            "explored_systems": sum(1 for s in snapshot.star_systems if s.is_explored),
            "total_systems": len(snapshot.star_systems),
            "active_colonies": sum(len(s.developed_planets) for s in snapshot.star_systems),
            "trade_routes": sum(len(s.trade_routes) for s in snapshot.star_systems),
            "crew_count": len(crew),
            "crew_capacity": snapshot.ship.crew_capacity,
            "average_morale": average_morale,
            "heir": heir.name if heir else None,
            "resources": snapshot.resources.to_dict(),
            "generation_rates": snapshot.generation_rates.to_dict(),
        }

    # Persistence
    def export_state(self) -> Dict[str, Any]:
        """Full snapshot as a JSON-compatible document.

        Notifications are left out; they are transient and start empty on
        restore.
        """
        return {
            "state": self._snapshot.to_dict(),
            "summary": self.get_empire_summary(),
            "action_log": list(self.action_log),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], settings: Optional[GameSettings] = None,
                  **kwargs) -> "GameState":
        game_state = cls(GameSnapshot.from_dict(data["state"]), settings, **kwargs)
        game_state.action_log.extend(data.get("action_log", []))
        return game_state

    # Internals
    def _begin(self, action_type: str) -> None:
        if self._in_transaction:
            raise ActionSequenceError(
                f"Cannot start {action_type} while another transaction is running",
                error_code="REENTRANT_DISPATCH",
                context={"action_type": action_type}
            )
        self._in_transaction = True

    def _end(self) -> None:
        self._in_transaction = False

    def _check_invariants(self, snapshot: GameSnapshot) -> None:
        problems = snapshot.invariant_violations()
        if not self.ledger.within_bounds(snapshot.resources):
            problems.append(f"resources out of bounds: {snapshot.resources}")
        if problems:
            logging.error(f"Game state invariants violated: {'; '.join(problems)}")
            raise InvalidGameStateError(
                f"Game state invariants violated: {'; '.join(problems)}",
                error_code="INVARIANT_VIOLATION",
                context={"problems": problems}
            )

    def _commit(self, snapshot: GameSnapshot) -> None:
        self._check_invariants(snapshot)
        self._snapshot = snapshot

    def _reject(self, action_type: str, outcome: ActionOutcome) -> None:
        logging.warning(f"{action_type} rejected: {outcome.message}")
        self.notifications.push(outcome.message, NotificationType.ERROR)
        self._log_action(action_type, outcome)

    def _notify_listeners(self) -> None:
        for listener in list(self._listeners):
            listener(self._snapshot)

    def _log_action(self, action_type: str, outcome: ActionOutcome) -> None:
        """Log a game action."""
        self.action_log.append({
            "id": str(uuid.uuid4()),
            "timestamp": self.clock(),
            "action_type": action_type,
            "result": outcome.result.value,
            "message": outcome.message,
            "changed": outcome.changes.touched(),
            "data": outcome.data,
        })


def create_initial_snapshot(settings: GameSettings) -> GameSnapshot:
    """Starting position of a new dynasty."""
    return GameSnapshot(
        resources=starting_resources(),
        generation_rates=Resources.from_mapping(settings.base_generation_rates),
        ship=starting_ship(),
        crew=starting_crew(),
        star_systems=starting_star_systems(),
        market=starting_market(),
        legacy=starting_legacy(),
        selected_system=None,
    )


def create_game(settings: Optional[GameSettings] = None, **kwargs) -> GameState:
    """Create a new game with default configuration."""
    settings = settings or GameSettings()
    settings.validate()
    logging.info("Creating new Stellar Legacy game")
    return GameState(create_initial_snapshot(settings), settings, **kwargs)
