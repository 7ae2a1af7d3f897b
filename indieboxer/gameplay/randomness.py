"""
Bounded random integer helpers used for spawn placement.
NO UI DEPENDENCIES.

Every helper takes an optional random.Random so a session can be seeded.
"""
import math
import random
from typing import Iterable, Optional


class CandidateSpaceExhausted(ValueError):
    """Raised when an exclusion set removes every candidate value."""

    def __init__(self, min_value: int, max_value: int, excluded: Iterable[int]):
        self.min_value = min_value
        self.max_value = max_value
        self.excluded = sorted(set(excluded))
        super().__init__(
            f"No candidates left in [{min_value}, {max_value}] "
            f"after excluding {self.excluded}"
        )


def random_int(min_value: float, max_value: float, rng: Optional[random.Random] = None) -> int:
    """Return an integer in [min, max)."""
    rng = rng or random
    low = math.ceil(min_value)
    high = math.floor(max_value)
    return math.floor(rng.random() * (high - low)) + low


def random_int_inclusive(min_value: float, max_value: float, rng: Optional[random.Random] = None) -> int:
    """Return an integer in [min, max]."""
    rng = rng or random
    low = math.ceil(min_value)
    high = math.floor(max_value)
    return math.floor(rng.random() * (high - low + 1)) + low


def random_int_excluding(
    min_value: float,
    max_value: float,
    excluded: int,
    rng: Optional[random.Random] = None
) -> int:
    """
    Return an integer in [min, max) other than `excluded`.

    A roll that lands on the excluded value is nudged one step toward min,
    or one step up when it already sits on min.
    """
    value = random_int(min_value, max_value, rng)
    if value == excluded:
        if value > math.ceil(min_value):
            value -= 1
        else:
            value += 1
    return value


def random_int_excluding_set(
    min_value: int,
    max_value: int,
    excluded: Iterable[int],
    rng: Optional[random.Random] = None
) -> int:
    """
    Return an integer in [min, max] that is not in `excluded`.

    Raises CandidateSpaceExhausted if nothing is left to pick from.
    """
    rng = rng or random
    excluded = set(excluded)
    candidates = [n for n in range(min_value, max_value + 1) if n not in excluded]
    if not candidates:
        raise CandidateSpaceExhausted(min_value, max_value, excluded)
    return candidates[math.floor(rng.random() * len(candidates))]
