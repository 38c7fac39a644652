"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.config import RulesConfig
from chessrules.core.legality import LegalityFilter
from chessrules.game.controller import GameController


@pytest.fixture
def controller() -> GameController:
    """A fresh game at the standard starting position."""
    return GameController()


@pytest.fixture
def legality() -> LegalityFilter:
    return LegalityFilter()


@pytest.fixture
def controller_from_fen() -> Callable[..., GameController]:
    """Factory: controller set up from a FEN, optionally with a custom config."""

    def _make(fen: str, config: RulesConfig | None = None) -> GameController:
        ctrl = GameController(config)
        ctrl.new_game(fen)
        return ctrl

    return _make
