"""Saving and loading games as JSON documents."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.constants import SAVE_FORMAT_VERSION
from ..core.exceptions import LoadGameError, SaveGameError, StellarLegacyError
from .game_state import GameState
from .notifications import Clock, wall_clock_ms
from .settings import GameSettings
from .snapshot import GameSnapshot

PathLike = Union[str, Path]


def build_save_document(game_state: GameState) -> Dict[str, Any]:
    return {
        "version": SAVE_FORMAT_VERSION,
        "settings": game_state.settings.to_dict(),
        **game_state.export_state(),
    }


def save_game(game_state: GameState, path: PathLike) -> Path:
    """Write the full game to ``path``. Notifications are not saved."""
    path = Path(path)
    document = build_save_document(game_state)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=2)
    except (OSError, TypeError, ValueError) as e:
        raise SaveGameError(
            f"Could not save game to {path}: {e}",
            error_code="SAVE_FAILED",
            context={"path": str(path)}
        ) from e
    logging.info(f"Game saved to {path}")
    return path


def load_game(path: PathLike, **kwargs) -> GameState:
    """Restore a game written by ``save_game``.

    Extra keyword arguments (rng, clock, id factories) go to the GameState
    constructor. The notification feed starts empty.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        raise LoadGameError(
            f"Could not read save file {path}: {e}",
            error_code="LOAD_FAILED",
            context={"path": str(path)}
        ) from e

    game_state = restore_game(document, **kwargs)
    logging.info(f"Game loaded from {path}")
    return game_state


def restore_game(document: Dict[str, Any], **kwargs) -> GameState:
    """Build a GameState from a save document."""
    if not isinstance(document, dict):
        raise LoadGameError("Save document must be a JSON object", error_code="INVALID_SAVE")

    version = document.get("version")
    if version != SAVE_FORMAT_VERSION:
        raise LoadGameError(
            f"Unsupported save format version: {version}",
            error_code="UNSUPPORTED_VERSION",
            context={"version": version, "supported": SAVE_FORMAT_VERSION}
        )

    try:
        settings = GameSettings.from_dict(document.get("settings", {}))
        return GameState.from_dict(document, settings, **kwargs)
    except (KeyError, TypeError, ValueError, StellarLegacyError) as e:
        raise LoadGameError(
            f"Save document is corrupt: {e}",
            error_code="CORRUPT_SAVE",
        ) from e


class AutosaveListener:
    """Commit listener that saves the game at most once per interval.

    Subscribe it with ``game_state.subscribe(listener)``. A failed save is
    logged and retried on the next commit; it never interrupts play.
    """

    def __init__(self, game_state: GameState, path: PathLike,
                 interval_ms: Optional[float] = None, clock: Clock = wall_clock_ms):
        self.game_state = game_state
        self.path = Path(path)
        self.interval_ms = (game_state.settings.autosave_interval_ms
                            if interval_ms is None else interval_ms)
        self.clock = clock
        self.last_saved_at: Optional[float] = None
        self.saves = 0
        self.last_error: Optional[SaveGameError] = None

    def is_due(self, now: float) -> bool:
        return self.last_saved_at is None or now - self.last_saved_at >= self.interval_ms

    def __call__(self, snapshot: GameSnapshot) -> None:
        now = self.clock()
        if not self.is_due(now):
            return
        try:
            save_game(self.game_state, self.path)
        except SaveGameError as e:
            logging.error(f"Autosave failed: {e}")
            self.last_error = e
            return
        self.last_saved_at = now
        self.saves += 1
        self.last_error = None
