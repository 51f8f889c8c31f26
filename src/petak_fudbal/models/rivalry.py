"""
Head-to-head rivalry models.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class RivalryMode(str, Enum):
    """How rivalries are ranked."""

    NEMESIS = "nemesis"
    DOMINATION = "domination"


class RivalryRecord(BaseModel):
    """Player A's record in matches where player B was on the other side."""

    player_a_id: str
    player_name: str
    player_slug: str | None = None
    player_b_id: str
    opponent_name: str
    opponent_slug: str | None = None
    duels: int = 0
    a_wins: int = 0
    a_losses: int = 0
    draws: int = 0
    a_goal_diff: int = Field(default=0, description="Goals for minus against, summed")

    @computed_field
    @property
    def a_net(self) -> int:
        return self.a_wins - self.a_losses
