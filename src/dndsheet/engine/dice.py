from __future__ import annotations
import random
from typing import List, Optional

ROLLS_PER_BATCH = 6
ROLL_MIN, ROLL_MAX = 3, 18

def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)

def roll_die(rng: random.Random, sides: int = 6) -> int:
    return rng.randint(1, sides)

def roll_4d6_drop_lowest(rng: random.Random) -> int:
    rolls = sorted([roll_die(rng) for _ in range(4)], reverse=True)
    return sum(rolls[:3])

def generate_rolls(rng: random.Random) -> List[int]:
    """Six 4d6-drop-lowest totals, smallest first."""
    return sorted(roll_4d6_drop_lowest(rng) for _ in range(ROLLS_PER_BATCH))
