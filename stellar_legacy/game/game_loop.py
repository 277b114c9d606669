"""Single-writer scheduling of intents and resource ticks."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

from ..core.exceptions import GameStateError, InvalidInputError
from ..utils.validation import Validator
from .game_state import GameState


@dataclass
class QueuedIntent:
    """An intent waiting for its turn on the loop."""

    name: str
    func: Callable[..., Any]
    args: tuple = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def run(self) -> Any:
        return self.func(*self.args, **self.kwargs)


class GameLoop:
    """Drives a GameState from one logical thread.

    Intents are queued with ``submit`` and run in arrival order. Ticks fire
    every ``tick_interval_ms`` of loop time; the next tick is only scheduled
    once the previous one has returned, so ticks never overlap. Time comes
    from whoever calls ``advance``, which keeps the loop deterministic under
    test.
    """

    def __init__(self, game_state: GameState, tick_interval_ms: Optional[int] = None,
                 start_ms: float = 0):
        self.game_state = game_state
        self.tick_interval_ms = tick_interval_ms or game_state.settings.tick_interval_ms
        Validator.validate_positive(self.tick_interval_ms, "tick_interval_ms")

        self.now_ms = start_ms
        self.next_tick_at: Optional[float] = start_ms + self.tick_interval_ms
        self.ticks_run = 0
        self._queue: Deque[QueuedIntent] = deque()
        self._draining = False
        self.tick_callbacks: List[Callable[[GameState], None]] = []

    @property
    def is_running(self) -> bool:
        return self.next_tick_at is not None

    @property
    def pending(self) -> int:
        return len(self._queue)

    def register_tick_callback(self, callback: Callable[[GameState], None]) -> None:
        """Register a callback run after every tick."""
        self.tick_callbacks.append(callback)

    def submit(self, intent: Any, *args, **kwargs) -> QueuedIntent:
        """Queue an intent: a GameState method name or any callable."""
        if isinstance(intent, str):
            func = getattr(self.game_state, intent, None)
            if func is None or not callable(func):
                raise GameStateError(
                    f"Unknown intent: {intent}",
                    error_code="UNKNOWN_INTENT",
                    context={"intent": intent}
                )
            name = intent
        else:
            func = intent
            name = getattr(intent, "__name__", repr(intent))

        queued = QueuedIntent(name, func, args, kwargs)
        self._queue.append(queued)
        return queued

    def run_pending(self) -> List[Any]:
        """Run every queued intent, including ones queued while draining.

        A call made while the queue is already being drained returns
        immediately; the outer drain picks up anything new.
        """
        if self._draining:
            return []
        results = []
        self._draining = True
        try:
            while self._queue:
                results.append(self._queue.popleft().run())
        finally:
            self._draining = False
        return results

    def advance(self, now_ms: float) -> int:
        """Move loop time forward to ``now_ms`` and run whatever is due.

        Returns the number of ticks run.
        """
        if now_ms < self.now_ms:
            raise InvalidInputError(
                f"Loop time cannot move backwards: {now_ms} < {self.now_ms}",
                error_code="TIME_REVERSAL",
                context={"now_ms": now_ms, "loop_ms": self.now_ms}
            )

        self.run_pending()
        ticks = 0
        while self.next_tick_at is not None and self.next_tick_at <= now_ms:
            self.now_ms = self.next_tick_at
            self._run_tick()
            ticks += 1
            if self.next_tick_at is not None:
                self.next_tick_at = self.now_ms + self.tick_interval_ms
            self.run_pending()

        self.now_ms = now_ms
        # Notifications are stamped by the store clock, not loop time
        expired = self.game_state.notifications.expire()
        if expired:
            logging.debug(f"Expired {len(expired)} notifications")
        return ticks

    def pause(self) -> None:
        """Stop scheduling ticks. Queued intents still run on ``advance``."""
        self.next_tick_at = None
        logging.info("Game loop paused")

    def resume(self) -> None:
        """Restart ticking one interval after the current loop time."""
        if self.next_tick_at is None:
            self.next_tick_at = self.now_ms + self.tick_interval_ms
            logging.info("Game loop resumed")

    def _run_tick(self) -> None:
        self.game_state.tick()
        self.ticks_run += 1
        for callback in self.tick_callbacks:
            callback(self.game_state)
