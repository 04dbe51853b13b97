from __future__ import annotations
from enum import Enum
from typing import Dict, Iterator, List, Tuple

class AbilityName(str, Enum):
    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"
    ANY = "any"  # race tables only: the player picks the ability

    @property
    def label(self) -> str:
        return ABILITY_LABELS[self]

# Canonical order: every consumer that shows or walks scores uses this tuple.
ABILITY_NAMES: Tuple[AbilityName, ...] = (
    AbilityName.STRENGTH,
    AbilityName.DEXTERITY,
    AbilityName.CONSTITUTION,
    AbilityName.INTELLIGENCE,
    AbilityName.WISDOM,
    AbilityName.CHARISMA,
)

ABILITY_LABELS: Dict[AbilityName, str] = {
    AbilityName.STRENGTH: "Strength",
    AbilityName.DEXTERITY: "Dexterity",
    AbilityName.CONSTITUTION: "Constitution",
    AbilityName.INTELLIGENCE: "Intelligence",
    AbilityName.WISDOM: "Wisdom",
    AbilityName.CHARISMA: "Charisma",
    AbilityName.ANY: "Any",
}

DEFAULT_SCORE = 8

class InvalidAbility(KeyError):
    """Raised when a score is looked up or stored under ANY or an unknown key."""

def ability_modifier(score: int) -> int:
    return (score - 10) // 2

def _check(ability) -> AbilityName:
    if ability not in ABILITY_NAMES:
        raise InvalidAbility(ability)
    return AbilityName(ability)

class AbilityScores:
    def __init__(self, default: int = DEFAULT_SCORE):
        self._scores: Dict[AbilityName, int] = {a: default for a in ABILITY_NAMES}

    @classmethod
    def from_mapping(cls, scores: Dict) -> AbilityScores:
        out = cls()
        missing = [a for a in ABILITY_NAMES if a not in scores]
        if missing:
            raise InvalidAbility(f"missing scores for {', '.join(a.label for a in missing)}")
        for ability, score in scores.items():
            out.set(ability, int(score))
        return out

    def get(self, ability: AbilityName) -> int:
        return self._scores[_check(ability)]

    def set(self, ability: AbilityName, score: int) -> None:
        self._scores[_check(ability)] = score

    def modifier(self, ability: AbilityName) -> int:
        return ability_modifier(self.get(ability))

    def sorted_view(self) -> List[Tuple[AbilityName, int]]:
        return [(a, self._scores[a]) for a in ABILITY_NAMES]

    def copy(self) -> AbilityScores:
        out = AbilityScores()
        out._scores = dict(self._scores)
        return out

    def as_dict(self) -> Dict[str, int]:
        return {a.value: s for a, s in self.sorted_view()}

    def __iter__(self) -> Iterator[Tuple[AbilityName, int]]:
        return iter(self.sorted_view())

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbilityScores):
            return NotImplemented
        return self._scores == other._scores

    def __repr__(self) -> str:
        return f"AbilityScores({self.as_dict()})"

    def __str__(self) -> str:
        return "   ".join(f"{a.label}: {s:<2}" for a, s in self.sorted_view())
