"""Game session - a chain of immutable snapshots with undo."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from rookery.core.enums import Color, GameResult
from rookery.core.move import Move
from rookery.core.notation import position_from_fen
from rookery.core.state import GameState, apply_move
from rookery.core.types import Square
from rookery.engine._default import select_move

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Tracks the current snapshot and every snapshot before it.

    Nothing is ever unmade: :meth:`undo` just drops back to the previous
    :class:`GameState`, which is exactly the board the game had then.
    This is a pure data/logic class - no threading, no UI.
    """

    state: GameState = field(default_factory=GameState.initial)
    history: list[GameState] = field(default_factory=list, init=False)

    # -- Initialisation -----------------------------------------------------

    @classmethod
    def from_fen(cls, fen: str) -> GameSession:
        return cls(position_from_fen(fen))

    def reset(self, state: GameState | None = None) -> None:
        """Start over from *state* (default: the standard start position)."""
        self.state = state if state is not None else GameState.initial()
        self.history.clear()

    # -- Move application ---------------------------------------------------

    def play(self, from_sq: Square, to_sq: Square) -> GameState:
        """Play a move for the side to move and return the new snapshot.

        Raises:
            IllegalMoveError: If the move is not legal in the current state.
        """
        new_state = apply_move(self.state, from_sq, to_sq)
        self.history.append(self.state)
        self.state = new_state
        if new_state.is_game_over:
            _LOGGER.info(
                "Game over after %s: %s", new_state.last_move, self.result.name
            )
        return new_state

    def play_uci(self, text: str) -> GameState:
        move = Move.from_uci(text)
        return self.play(move.from_sq, move.to_sq)

    def engine_move(
        self,
        level: int = 1,
        *,
        strategy: str = "minimax",
        rng: random.Random | None = None,
    ) -> Move | None:
        """Let the engine move for the side to move. None if it cannot."""
        move = select_move(self.state, level, strategy=strategy, rng=rng)
        if move is not None:
            self.play(move.from_sq, move.to_sq)
        return move

    def undo(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.history:
            return None
        undone = self.state.last_move
        self.state = self.history.pop()
        _LOGGER.info("Undid %s", undone)
        return undone

    # -- Query helpers ------------------------------------------------------

    @property
    def side_to_move(self) -> Color:
        return self.state.side_to_move

    @property
    def result(self) -> GameResult:
        return self.state.result

    @property
    def is_over(self) -> bool:
        return self.state.is_game_over

    @property
    def ply_count(self) -> int:
        """Number of half-moves played in this session."""
        return len(self.history)

    @property
    def moves(self) -> list[Move]:
        """Moves played so far, oldest first."""
        snapshots = self.history[1:] + [self.state]
        return [s.last_move for s in snapshots if s.last_move is not None]

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.state.legal_moves()
