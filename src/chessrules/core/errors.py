"""Exception hierarchy raised by the rules engine.

Every public failure is a :class:`ChessRulesError`; callers that only care
about "the request was rejected" can catch the base class. All errors are
raised before any state is mutated, so the game is unchanged afterwards.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all rules-engine errors."""


class IndexOutOfRange(ChessRulesError, IndexError):
    """A square argument lies outside 0–63."""

    def __init__(self, square: object) -> None:
        super().__init__(f"Square out of range (expected 0-63): {square!r}")
        self.square = square


class IllegalMove(ChessRulesError, ValueError):
    """The requested move is not legal in the current position."""


class InvalidPromotion(ChessRulesError, ValueError):
    """No promotion is pending, or the chosen piece kind is not allowed."""


class InternalConsistencyError(ChessRulesError, RuntimeError):
    """The board violates an invariant that correct play can never break."""
