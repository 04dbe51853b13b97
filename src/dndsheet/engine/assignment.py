from __future__ import annotations
from typing import Dict, List, Sequence

from .abilities import ABILITY_NAMES, AbilityName, AbilityScores

class RollAssignment:
    """Binds a batch of rolls, smallest first, to distinct abilities."""

    def __init__(self, rolls: Sequence[int]):
        if len(rolls) != len(ABILITY_NAMES):
            raise ValueError(f"expected {len(ABILITY_NAMES)} rolls, got {len(rolls)}")
        self.rolls: tuple[int, ...] = tuple(rolls)
        self.reset()

    def reset(self) -> None:
        self.pending: List[int] = list(self.rolls)
        self.remaining: List[AbilityName] = list(ABILITY_NAMES)
        self.bound: Dict[AbilityName, int] = {}

    @property
    def current(self) -> int:
        if not self.pending:
            raise IndexError("all rolls are assigned")
        return self.pending[0]

    @property
    def done(self) -> bool:
        return not self.pending

    def bind(self, ability: AbilityName) -> int:
        if ability not in self.remaining:
            raise ValueError(f"{ability!r} is not available")
        roll = self.pending.pop(0)
        self.remaining.remove(ability)
        self.bound[ability] = roll
        return roll

    def scores(self) -> AbilityScores:
        if not self.done:
            raise ValueError("rolls still pending")
        return AbilityScores.from_mapping(self.bound)
