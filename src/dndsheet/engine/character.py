from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Tuple

from .abilities import AbilityName, AbilityScores

class Alignment(str, Enum):
    LAWFUL_GOOD = "lawful-good"
    NEUTRAL_GOOD = "neutral-good"
    CHAOTIC_GOOD = "chaotic-good"
    LAWFUL_NEUTRAL = "lawful-neutral"
    TRUE_NEUTRAL = "true-neutral"
    CHAOTIC_NEUTRAL = "chaotic-neutral"
    LAWFUL_EVIL = "lawful-evil"
    NEUTRAL_EVIL = "neutral-evil"
    CHAOTIC_EVIL = "chaotic-evil"

    @property
    def label(self) -> str:
        return ALIGNMENT_LABELS[self]

ALIGNMENTS: Tuple[Alignment, ...] = (
    Alignment.LAWFUL_GOOD,
    Alignment.NEUTRAL_GOOD,
    Alignment.CHAOTIC_GOOD,
    Alignment.LAWFUL_NEUTRAL,
    Alignment.TRUE_NEUTRAL,
    Alignment.CHAOTIC_NEUTRAL,
    Alignment.LAWFUL_EVIL,
    Alignment.NEUTRAL_EVIL,
    Alignment.CHAOTIC_EVIL,
)
ALIGNMENT_LABELS: Dict[Alignment, str] = {
    Alignment.LAWFUL_GOOD: "Lawful Good",
    Alignment.NEUTRAL_GOOD: "Neutral Good",
    Alignment.CHAOTIC_GOOD: "Chaotic Good",
    Alignment.LAWFUL_NEUTRAL: "Lawful Neutral",
    Alignment.TRUE_NEUTRAL: "True Neutral",
    Alignment.CHAOTIC_NEUTRAL: "Chaotic Neutral",
    Alignment.LAWFUL_EVIL: "Lawful Evil",
    Alignment.NEUTRAL_EVIL: "Neutral Evil",
    Alignment.CHAOTIC_EVIL: "Chaotic Evil",
}

@dataclass
class CharacterSheet:
    name: str = "Hero"
    race: str = "human"
    race_name: str = "Human"
    alignment: Alignment = Alignment.TRUE_NEUTRAL
    clazz: str = "barbarian"
    class_name: str = "Barbarian"
    level: int = 1
    experience_points: int = 0
    ability_scores: AbilityScores = field(default_factory=AbilityScores)
    point_buy: bool = False
    # ANY race bonuses, resolved right after race selection
    race_bonus_choices: List[AbilityName] = field(default_factory=list)

SheetField = Tuple[str, Callable[[CharacterSheet], object]]

# Dump order for the final sheet
SHEET_FIELDS: List[SheetField] = [
    ("Name", lambda s: s.name),
    ("Race", lambda s: s.race_name),
    ("Alignment", lambda s: s.alignment.label),
    ("Class", lambda s: s.class_name),
    ("Level", lambda s: s.level),
    ("Experience points", lambda s: s.experience_points),
    ("Ability scores", lambda s: s.ability_scores),
    ("Point buy", lambda s: "yes" if s.point_buy else "no"),
]

def render_sheet(sheet: CharacterSheet, label_width: int = 20) -> str:
    lines = []
    for label, accessor in SHEET_FIELDS:
        value = str(accessor(sheet)).replace("\n", "")
        lines.append(f"{label + ': ':<{label_width}}{value}")
    return "\n".join(lines)
