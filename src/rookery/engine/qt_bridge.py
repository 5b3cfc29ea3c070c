"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from rookery.core.state import GameState
from rookery.engine._default import make_engine
from rookery.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and drive it through queued signal/slot
    connections; :meth:`cancel` may be called from any thread.
    """

    best_move_ready = pyqtSignal(int, object, float, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        level: int = 1,
        strategy: str = "minimax",
        time_limit_ms: int | None = None,
    ) -> None:
        super().__init__()
        self._engine = make_engine(strategy)
        self._limits = SearchLimits.for_level(level, time_limit_ms=time_limit_ms)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Search for the best move in *state_obj* and emit the result."""
        if not isinstance(state_obj, GameState):
            _LOGGER.warning(
                "Engine received %s instead of a GameState", type(state_obj)
            )
            self.search_error.emit(request_id, "Engine received invalid state")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                state_obj,
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_level(self, level: int) -> None:
        """Update the difficulty level (takes effect on the next search)."""
        self._limits = SearchLimits.for_level(
            level, time_limit_ms=self._limits.time_limit_ms
        )

    @property
    def limits(self) -> SearchLimits:
        return self._limits
