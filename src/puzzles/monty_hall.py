"""
Monty Hall — simulation of the three-door game

The host always opens a losing door the contestant did not pick, so
switching wins exactly when the first pick was wrong:

    P(win | stay)   = 1/3
    P(win | switch) = 2/3
"""

import logging
import random
from dataclasses import dataclass
from typing import Final, Optional

from src.core.math.big_decimal import BigDecimal
from src.core.math.numerical_safeguards import validate_positive_int

logger = logging.getLogger(__name__)

DOORS: Final[int] = 3

DEFAULT_ITERATIONS: Final[int] = 10_000


@dataclass(frozen=True)
class MontyHallResult:
    """Win counts of both strategies over a simulation run."""

    iterations: int
    stay_wins: int
    switch_wins: int

    @property
    def stay_percentage(self) -> BigDecimal:
        return BigDecimal(self.stay_wins * 100) / self.iterations

    @property
    def switch_percentage(self) -> BigDecimal:
        return BigDecimal(self.switch_wins * 100) / self.iterations


def simulate(
    iterations: int = DEFAULT_ITERATIONS, rng: Optional[random.Random] = None
) -> MontyHallResult:
    """
    Play the game `iterations` times.

    Args:
        iterations: Number of games (> 0)
        rng: Random source (default: a fresh unseeded random.Random)

    Returns:
        MontyHallResult with stay and switch win counts
    """
    validate_positive_int(iterations, "iterations")
    rng = rng or random.Random()

    stay_wins = 0
    switch_wins = 0
    for game in range(1, iterations + 1):
        winning_door = rng.randint(1, DOORS)
        first_pick = rng.randint(1, DOORS)
        if winning_door == first_pick:
            stay_wins += 1
        else:
            switch_wins += 1
        logger.debug(
            "game %d: win=%d guess=%d stay=%d switch=%d",
            game,
            winning_door,
            first_pick,
            stay_wins,
            switch_wins,
        )

    return MontyHallResult(iterations=iterations, stay_wins=stay_wins, switch_wins=switch_wins)
