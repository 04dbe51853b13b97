from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .abilities import AbilityScores

# 5e point buy: 27 points, scores 8..15, steps above 13 cost double
POOL_SIZE = 27
FLOOR = 8
CEILING = 15
THRESHOLD = 13

def step_cost(new_score: int, threshold: int = THRESHOLD) -> int:
    """Cost of the step that lands on new_score (also the refund when leaving it)."""
    return 1 if new_score <= threshold else 2

def point_cost(score: int, floor: int = FLOOR, threshold: int = THRESHOLD) -> int:
    """Cumulative cost of raising an ability from the floor to score."""
    if score <= floor:
        return 0
    cheap = min(score, threshold) - floor
    dear = max(0, score - max(threshold, floor))
    return max(0, cheap) + 2 * dear

def total_cost(scores: AbilityScores | Iterable[int], floor: int = FLOOR, threshold: int = THRESHOLD) -> int:
    values = [s for _, s in scores.sorted_view()] if isinstance(scores, AbilityScores) else list(scores)
    return sum(point_cost(s, floor, threshold) for s in values)

def validate_point_buy(scores: AbilityScores, pool: int = POOL_SIZE, floor: int = FLOOR,
                       ceiling: int = CEILING, threshold: int = THRESHOLD) -> tuple[bool, str]:
    for ability, score in scores.sorted_view():
        if score < floor or score > ceiling:
            return (False, f"{ability.label} must be between {floor} and {ceiling} (got {score}).")
    used = total_cost(scores, floor, threshold)
    if used > pool:
        return (False, f"Point-buy exceeds {pool} (used {used}).")
    return (True, f"Point-buy OK (used {used}/{pool}).")

class PointPool:
    def __init__(self, maximum: int = POOL_SIZE):
        if maximum < 0:
            raise ValueError("pool size cannot be negative")
        self.maximum = maximum
        self.remaining = maximum

    def spend(self, points: int) -> None:
        """Apply a committed delta; negative points are a refund."""
        left = self.remaining - points
        if left < 0 or left > self.maximum:
            raise ValueError(f"pool would leave [0, {self.maximum}]: {self.remaining} - {points}")
        self.remaining = left

    def __repr__(self) -> str:
        return f"PointPool({self.remaining}/{self.maximum})"

@dataclass
class ScoreAdjuster:
    """Uncommitted adjustment of one ability against a shared pool.

    pool_used is derived from the start and current values only, so bouncing a
    score up and down never drifts. It goes negative when a later pass lowers a
    score that was paid for earlier; committing then refunds the pool.
    """
    pool: PointPool
    start: int
    floor: int = FLOOR
    ceiling: int = CEILING
    threshold: int = THRESHOLD

    def __post_init__(self):
        if not self.floor <= self.start <= self.ceiling:
            raise ValueError(f"start {self.start} outside [{self.floor}, {self.ceiling}]")
        self.value = self.start

    @property
    def pool_used(self) -> int:
        return (point_cost(self.value, self.floor, self.threshold)
                - point_cost(self.start, self.floor, self.threshold))

    @property
    def remaining(self) -> int:
        return self.pool.remaining - self.pool_used

    def increase(self) -> bool:
        if self.value >= self.ceiling:
            return False
        if step_cost(self.value + 1, self.threshold) > self.remaining:
            return False
        self.value += 1
        return True

    def decrease(self) -> bool:
        if self.value <= self.floor:
            return False
        self.value -= 1
        return True

    def commit(self) -> int:
        self.pool.spend(self.pool_used)
        self.start = self.value
        return self.value
