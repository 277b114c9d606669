"""Automated economy runs for balance analysis."""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..actions.base_action import ActionOutcome
from ..core.enums import ComponentCategory, ResourceType, TradeAction
from ..core.exceptions import SimulationConfigError, SimulationError, StellarLegacyError
from ..data import get_components_by_category
from ..game.game_loop import GameLoop
from ..game.game_state import GameState, create_game
from ..game.settings import GameSettings

DEFAULT_ACTION_WEIGHTS = {
    "train_crew": 1.0,
    "boost_morale": 1.0,
    "recruit_crew": 1.0,
    "explore_system": 1.0,
    "establish_colony": 1.0,
    "purchase_component": 0.5,
    "trade_resource": 2.0,
    "select_heir": 0.5,
}


@dataclass
class SimulationConfig:
    """Configuration for simulation runs."""

    max_ticks: int = 100
    actions_per_tick: int = 1
    detailed_logging: bool = False
    random_seed: Optional[int] = None
    action_weights: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_ACTION_WEIGHTS))

    def validate(self) -> None:
        """Validate simulation configuration."""
        if self.max_ticks <= 0:
            raise SimulationConfigError("max_ticks must be positive")
        if self.actions_per_tick < 0:
            raise SimulationConfigError("actions_per_tick cannot be negative")
        unknown = set(self.action_weights) - set(DEFAULT_ACTION_WEIGHTS)
        if unknown:
            raise SimulationConfigError(
                f"Unknown actions in action_weights: {', '.join(sorted(unknown))}",
                context={"actions": sorted(unknown)}
            )
        if any(weight < 0 for weight in self.action_weights.values()):
            raise SimulationConfigError("action weights cannot be negative")
        if self.actions_per_tick and not any(self.action_weights.values()):
            raise SimulationConfigError("at least one action needs a positive weight")


@dataclass
class SimulationResult:
    """Results of a simulation run."""

    config: SimulationConfig
    final_state: GameState
    total_ticks: int = 0
    total_actions: int = 0
    successful_actions: int = 0
    execution_time_seconds: float = 0.0
    action_statistics: Dict[str, Dict[str, int]] = field(default_factory=dict)
    failure_reasons: Dict[str, int] = field(default_factory=dict)

    @property
    def failed_actions(self) -> int:
        return self.total_actions - self.successful_actions

    @property
    def success_rate(self) -> float:
        return self.successful_actions / self.total_actions if self.total_actions else 0.0

    def get_summary(self) -> Dict[str, Any]:
        """Get concise simulation summary."""
        empire = self.final_state.get_empire_summary()
        return {
            "seed": self.config.random_seed,
            "total_ticks": self.total_ticks,
            "total_actions": self.total_actions,
            "success_rate": round(self.success_rate, 3),
            "execution_time": f"{self.execution_time_seconds:.2f}s",
            "final_resources": empire["resources"],
            "explored_systems": empire["explored_systems"],
            "active_colonies": empire["active_colonies"],
            "crew_count": empire["crew_count"],
        }


class EconomySimulator:
    """Plays a game with a seeded random policy over the player intents.

    Game randomness and policy randomness use separate generators derived
    from the same seed, so a run is fully reproducible.
    """

    def __init__(self, config: SimulationConfig = None, settings: Optional[GameSettings] = None):
        self.config = config or SimulationConfig()
        self.config.validate()
        self.settings = settings or GameSettings()

        # Setup logging
        if self.config.detailed_logging:
            logging.basicConfig(level=logging.INFO)

        seed = self.config.random_seed
        self.game_rng = random.Random(seed)
        self.policy_rng = random.Random(None if seed is None else f"policy-{seed}")

        self.game_state: Optional[GameState] = None
        self.loop: Optional[GameLoop] = None
        self._stats: Dict[str, Dict[str, int]] = {}
        self._failures: Dict[str, int] = {}
        self._actions = 0
        self._successes = 0

    def _clock(self) -> float:
        return self.loop.now_ms if self.loop else 0.0

    def run(self) -> SimulationResult:
        """Run one full simulation."""
        start = time.perf_counter()
        self.game_state = create_game(self.settings, rng=self.game_rng, clock=self._clock)
        self.loop = GameLoop(self.game_state)
        logging.info(f"Starting economy simulation (seed={self.config.random_seed}, "
                     f"ticks={self.config.max_ticks})")

        try:
            for _ in range(self.config.max_ticks):
                for _ in range(self.config.actions_per_tick):
                    self.loop.submit(self._perform, self._choose_intent())
                self.loop.advance(self.loop.now_ms + self.loop.tick_interval_ms)
        except StellarLegacyError as e:
            logging.error(f"Simulation failed: {str(e)}")
            raise SimulationError(f"Simulation failed after {self.loop.ticks_run} ticks: {e.message}") from e

        result = SimulationResult(
            config=self.config,
            final_state=self.game_state,
            total_ticks=self.loop.ticks_run,
            total_actions=self._actions,
            successful_actions=self._successes,
            execution_time_seconds=time.perf_counter() - start,
            action_statistics=self._stats,
            failure_reasons=self._failures,
        )
        logging.info(f"Simulation completed: {result.get_summary()}")
        return result

    def _choose_intent(self) -> str:
        names = [name for name, weight in self.config.action_weights.items() if weight > 0]
        weights = [self.config.action_weights[name] for name in names]
        return self.policy_rng.choices(names, weights=weights)[0]

    def _perform(self, intent: str) -> ActionOutcome:
        outcome = getattr(self, f"_do_{intent}")()
        self._record(intent, outcome)
        return outcome

    def _record(self, intent: str, outcome: ActionOutcome) -> None:
        stats = self._stats.setdefault(intent, {"success": 0, "failed": 0})
        self._actions += 1
        if outcome.succeeded:
            stats["success"] += 1
            self._successes += 1
        else:
            stats["failed"] += 1
            code = outcome.data.get("error_code", "UNKNOWN")
            self._failures[code] = self._failures.get(code, 0) + 1

    # Policy
    def _do_train_crew(self) -> ActionOutcome:
        return self.game_state.train_crew()

    def _do_boost_morale(self) -> ActionOutcome:
        return self.game_state.boost_morale()

    def _do_recruit_crew(self) -> ActionOutcome:
        return self.game_state.recruit_crew()

    def _do_explore_system(self) -> ActionOutcome:
        systems = self.game_state.star_systems
        targets = [s for s in systems if not s.is_explored] or list(systems)
        self.game_state.select_system(self.policy_rng.choice(targets).name)
        return self.game_state.explore_system()

    def _do_establish_colony(self) -> ActionOutcome:
        systems = self.game_state.star_systems
        targets = [s for s in systems if s.is_explored and s.undeveloped_planets] or list(systems)
        self.game_state.select_system(self.policy_rng.choice(targets).name)
        return self.game_state.establish_colony()

    def _do_purchase_component(self) -> ActionOutcome:
        category = self.policy_rng.choice(list(ComponentCategory))
        component = self.policy_rng.choice(get_components_by_category(category))
        return self.game_state.purchase_component(category, component.name)

    def _do_trade_resource(self) -> ActionOutcome:
        market = self.game_state.market
        listed = [r for r in ResourceType if r.is_tradable and market.lists(r)]
        resource = self.policy_rng.choice(listed)
        return self.game_state.trade_resource(resource, self.policy_rng.choice(list(TradeAction)))

    def _do_select_heir(self) -> ActionOutcome:
        member = self.policy_rng.choice(self.game_state.crew)
        return self.game_state.select_heir(member.id)


def run_batch(config: SimulationConfig, runs: int,
              settings: Optional[GameSettings] = None) -> Dict[str, Any]:
    """Run several simulations and average their outcomes.

    With a seed, run ``i`` uses ``seed + i``.
    """
    if runs <= 0:
        raise SimulationConfigError("runs must be positive")

    results: List[SimulationResult] = []
    for i in range(runs):
        seed = None if config.random_seed is None else config.random_seed + i
        run_config = SimulationConfig(
            max_ticks=config.max_ticks,
            actions_per_tick=config.actions_per_tick,
            detailed_logging=config.detailed_logging,
            random_seed=seed,
            action_weights=dict(config.action_weights),
        )
        results.append(EconomySimulator(run_config, settings).run())

    def average(values: List[float]) -> float:
        return sum(values) / len(values)

    summaries = [r.final_state.get_empire_summary() for r in results]
    return {
        "runs": runs,
        "average_resources": {
            resource.value: average([s["resources"][resource.value] for s in summaries])
            for resource in ResourceType
        },
        "average_explored_systems": average([s["explored_systems"] for s in summaries]),
        "average_colonies": average([s["active_colonies"] for s in summaries]),
        "average_crew": average([s["crew_count"] for s in summaries]),
        "average_success_rate": average([r.success_rate for r in results]),
        "results": results,
    }
