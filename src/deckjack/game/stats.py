# src/deckjack/game/stats.py

import math
from dataclasses import dataclass
from typing import Union

from deckjack.common.rules import Outcome

# False until at least one round was played, otherwise e.g. "25%"
WinPercentage = Union[str, bool]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def calculate_win_percentage(win_count: int, round_count: int) -> WinPercentage:
    if round_count <= 0:
        return False
    return f"{_round_half_up(win_count / round_count * 100)}%"


@dataclass(frozen=True)
class RoundTally:
    win_count: int
    round_count: int
    win_percentage: WinPercentage


def record_round(outcome: Outcome, prior_win_count: int, prior_round_count: int) -> RoundTally:
    """One completed deal: every outcome counts as a round, only True counts as a win."""
    win_count = prior_win_count + 1 if outcome is True else prior_win_count
    round_count = prior_round_count + 1
    return RoundTally(
        win_count=win_count,
        round_count=round_count,
        win_percentage=calculate_win_percentage(win_count, round_count),
    )


@dataclass
class SessionStats:
    win_count: int = 0
    round_count: int = 0
    loss_count: int = 0
    push_count: int = 0

    @property
    def win_percentage(self) -> WinPercentage:
        return calculate_win_percentage(self.win_count, self.round_count)

    def record(self, outcome: Outcome) -> RoundTally:
        tally = record_round(outcome, self.win_count, self.round_count)
        self.win_count = tally.win_count
        self.round_count = tally.round_count
        if outcome is False:
            self.loss_count += 1
        elif outcome is None:
            self.push_count += 1
        return tally

    def reset(self) -> None:
        self.win_count = 0
        self.round_count = 0
        self.loss_count = 0
        self.push_count = 0
