import pytest

from fairrps.game.rules import MoveRules
from fairrps.game.transitions import GameSession


RPS = ["rock", "paper", "scissors"]


class FixedChoice:
    """Stands in for random.Random so the computer always picks ``move``."""

    def __init__(self, move: str) -> None:
        self.move = move

    def choice(self, seq):
        assert self.move in seq
        return self.move


@pytest.fixture
def rps() -> MoveRules:
    return MoveRules(RPS)


@pytest.fixture
def forced_session():
    def make(automated_move: str, moves: list[str] = RPS) -> GameSession:
        return GameSession(MoveRules(moves, rng=FixedChoice(automated_move)))
    return make
