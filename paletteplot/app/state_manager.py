"""Centralized state management for the palette and chart selection.

StateManager is the single mutation channel between views and AppState:
- Views send changes up via ``update()`` / ``update_palette()``
- Subscribers are notified per key (outside the lock)
- Per-frame refresh/rebuild flags tell the main loop what to redraw
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Any, Callable, Optional

from paletteplot.app.core import AppState

logger = logging.getLogger(__name__)

PaletteFn = Callable[[tuple[str, ...]], tuple[str, ...]]


class StateKey(enum.Enum):
    """Keys for managed state."""

    PALETTE = "palette"
    SELECTION = "selection"
    SHOW_REFERENCE = "show_reference"


class StateManager:
    """Centralized mutation and notification hub for AppState.

    Every change flows through ``update()`` (wholesale replacement) or
    ``update_palette()`` (read-modify-write of the palette under the lock).
    State is mutated immediately so reads always see the latest value.

    The manager never redraws anything itself. It sets ``_needs_refresh``
    (and ``_needs_rebuild`` when the set of charts changes); the main loop
    checks these once per frame, so a burst of drag events costs one redraw.
    """

    _ATTRS: dict[StateKey, str] = {
        StateKey.PALETTE: "palette",
        StateKey.SELECTION: "selection",
        StateKey.SHOW_REFERENCE: "show_reference",
    }

    # Keys that trigger a redraw.
    _REFRESH_KEYS: frozenset[StateKey] = frozenset({
        StateKey.PALETTE,
        StateKey.SELECTION,
        StateKey.SHOW_REFERENCE,
    })

    # Keys that change which chart views exist.
    _REBUILD_KEYS: frozenset[StateKey] = frozenset({
        StateKey.SELECTION,
    })

    def __init__(
        self,
        state: AppState,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        self._state = state
        self._lock = lock if lock is not None else threading.RLock()

        self._subscribers: dict[StateKey, list[Callable]] = {}

        self._needs_refresh: bool = False
        self._needs_rebuild: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def get(self, key: StateKey) -> Any:
        """Read the current value for *key*."""
        with self._lock:
            return getattr(self._state, self._ATTRS[key])

    def update(self, key: StateKey, value: Any) -> None:
        """Replace the value for *key* (assumed already validated)."""
        if key is not StateKey.SHOW_REFERENCE:
            value = tuple(value)
        with self._lock:
            setattr(self._state, self._ATTRS[key], value)
        self._after_update(key, value)

    def update_palette(self, fn: PaletteFn) -> tuple[str, ...]:
        """Apply *fn* to the current palette and store the result atomically.

        Used by chart interactions, which may rewrite colors but never
        change how many there are.

        Raises:
            ValueError: If *fn* returns a palette of a different length.
        """
        with self._lock:
            previous = self._state.palette
            updated = tuple(fn(previous))
            if len(updated) != len(previous):
                raise ValueError(
                    f"Palette edit changed length from {len(previous)} to {len(updated)}"
                )
            self._state.palette = updated
        self._after_update(StateKey.PALETTE, updated)
        return updated

    def subscribe(self, key: StateKey, callback: Callable) -> None:
        """Register *callback* for notifications when *key* changes.

        Callback signature: ``(key, value)``.
        """
        self._subscribers.setdefault(key, []).append(callback)

    def needs_refresh(self) -> bool:
        """Return whether anything changed since the last consume."""
        return self._needs_refresh

    def consume_refresh(self) -> bool:
        """Reset refresh flags and return whether chart views must be rebuilt."""
        rebuild = self._needs_rebuild
        self._needs_refresh = False
        self._needs_rebuild = False
        return rebuild

    def request_refresh(self, rebuild: bool = False) -> None:
        """Force a redraw on the next frame (e.g. after a viewport resize)."""
        self._needs_refresh = True
        if rebuild:
            self._needs_rebuild = True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _after_update(self, key: StateKey, value: Any) -> None:
        # Notify subscribers (outside lock to avoid deadlocks).
        self._notify(key, value)
        if key in self._REFRESH_KEYS:
            self._needs_refresh = True
            if key in self._REBUILD_KEYS:
                self._needs_rebuild = True

    def _notify(self, key: StateKey, value: Any) -> None:
        """Call all subscribers registered for *key*, isolating exceptions."""
        callbacks = self._subscribers.get(key)
        if not callbacks:
            return
        for cb in list(callbacks):
            try:
                cb(key, value)
            except Exception:
                logger.warning(
                    "Subscriber %r raised for %s", cb, key, exc_info=True,
                )
