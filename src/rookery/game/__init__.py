"""Game layer: move history on top of the immutable core."""

from rookery.game.session import GameSession

__all__ = ["GameSession"]
