from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class Commitment(BaseModel):
    """HMAC of the automated move. Key and move stay out of repr until revealed."""

    model_config = ConfigDict(frozen=True)

    digest: str
    key: str = Field(repr=False)
    committed_move: str = Field(repr=False)


class RoundResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    human_move: str
    automated_move: str
    outcome: Outcome


class Reveal(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: RoundResult
    digest: str
    key: str
