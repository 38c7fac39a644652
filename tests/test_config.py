"""Tests for RulesConfig."""

import dataclasses

import pytest

from chessrules.config import RulesConfig


class TestRulesConfig:
    def test_standard_defaults(self) -> None:
        cfg = RulesConfig.standard()
        assert cfg.fifty_move_limit == 50
        assert cfg.repetition_pair_threshold == 2
        assert cfg == RulesConfig()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RulesConfig().fifty_move_limit = 10  # type: ignore[misc]

    @pytest.mark.parametrize("limit", [0, -5])
    def test_rejects_non_positive_limit(self, limit: int) -> None:
        with pytest.raises(ValueError):
            RulesConfig(fifty_move_limit=limit)

    def test_rejects_negative_threshold(self) -> None:
        with pytest.raises(ValueError):
            RulesConfig(repetition_pair_threshold=-1)

    def test_zero_threshold_allowed(self) -> None:
        assert RulesConfig(repetition_pair_threshold=0).repetition_pair_threshold == 0
