"""Rule-engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.position import DEFAULT_FIFTY_MOVE_LIMIT


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Tunable thresholds for the draw rules.

    Args:
        fifty_move_limit: Starting value of the fifty-move counter. The counter
            drops by one per committed move without a capture or pawn move and
            the game is drawn when it reaches zero.
        repetition_pair_threshold: ``request_draw`` succeeds once the number of
            pairwise-equal board snapshots in the history exceeds this value.
    """

    fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT
    repetition_pair_threshold: int = 2

    def __post_init__(self) -> None:
        if self.fifty_move_limit < 1:
            raise ValueError(f"fifty_move_limit must be >= 1: {self.fifty_move_limit}")
        if self.repetition_pair_threshold < 0:
            raise ValueError(
                "repetition_pair_threshold must be >= 0: "
                f"{self.repetition_pair_threshold}"
            )

    @classmethod
    def standard(cls) -> RulesConfig:
        return cls()
