from __future__ import annotations
from typing import List, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from .abilities import ABILITY_NAMES, AbilityName, AbilityScores

class AbilityBonus(BaseModel):
    ability: AbilityName
    delta: int

class RaceDefinition(BaseModel):
    id: str = Field(pattern=r"^[a-z0-9_.:-]+$")
    name: str
    ability_score_increases: List[AbilityBonus] = Field(default_factory=list)

    @field_validator("ability_score_increases")
    @classmethod
    def _no_repeated_fixed_bonus(cls, v: List[AbilityBonus]) -> List[AbilityBonus]:
        fixed = [b.ability for b in v if b.ability is not AbilityName.ANY]
        if len(fixed) != len(set(fixed)):
            raise ValueError("an ability can only receive one fixed bonus")
        return v

    def bonuses(self) -> List[Tuple[AbilityName, int]]:
        return [(b.ability, b.delta) for b in self.ability_score_increases]

    @property
    def open_choices(self) -> int:
        return sum(1 for b in self.ability_score_increases if b.ability is AbilityName.ANY)

class ClassDefinition(BaseModel):
    id: str = Field(pattern=r"^[a-z0-9_.:-]+$")
    name: str
    hit_die: int = 8

def choosable_abilities(bonuses: Sequence[Tuple[AbilityName, int]],
                        chosen: Sequence[AbilityName] = ()) -> List[AbilityName]:
    """Abilities an ANY bonus may still go to: none already boosted in this pass."""
    taken = {a for a, _ in bonuses if a is not AbilityName.ANY} | set(chosen)
    return [a for a in ABILITY_NAMES if a not in taken]

def resolve_bonuses(bonuses: Sequence[Tuple[AbilityName, int]],
                    choices: Sequence[AbilityName]) -> List[Tuple[AbilityName, int]]:
    """Replace each ANY entry, in order, with the matching player choice."""
    picks = list(choices)
    wanted = sum(1 for a, _ in bonuses if a is AbilityName.ANY)
    if len(picks) != wanted:
        raise ValueError(f"expected {wanted} ability choices, got {len(picks)}")
    out: List[Tuple[AbilityName, int]] = []
    used: List[AbilityName] = []
    for ability, delta in bonuses:
        if ability is AbilityName.ANY:
            pick = picks.pop(0)
            if pick not in choosable_abilities(bonuses, used):
                raise ValueError(f"{pick!r} cannot take another bonus from this race")
            used.append(pick)
            ability = pick
        out.append((ability, delta))
    return out

def apply_bonuses(scores: AbilityScores, resolved: Sequence[Tuple[AbilityName, int]]) -> AbilityScores:
    out = scores.copy()
    for ability, delta in resolved:
        out.set(ability, out.get(ability) + delta)
    return out
