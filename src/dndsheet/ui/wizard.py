from __future__ import annotations
from enum import Enum
import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from dndsheet.engine.abilities import ABILITY_NAMES, AbilityName, AbilityScores
from dndsheet.engine.assignment import RollAssignment
from dndsheet.engine.character import ALIGNMENTS, CharacterSheet
from dndsheet.engine.dice import generate_rolls, make_rng
from dndsheet.engine.loader import ContentIndex
from dndsheet.engine.point_buy import PointPool
from dndsheet.engine.races import apply_bonuses, choosable_abilities, resolve_bonuses
from dndsheet.engine.settings import Settings

from .controller import MenuController, MenuItem, yes_no

log = logging.getLogger(__name__)

class Page(str, Enum):
    RACE = "race"
    RACE_BONUSES = "race-bonuses"
    CLASS = "class"
    ABILITIES = "abilities"

PAGES: Tuple[Page, ...] = (Page.RACE, Page.RACE_BONUSES, Page.CLASS, Page.ABILITIES)
PAGE_LABELS: Dict[Page, str] = {
    Page.RACE: "Race & Alignment",
    Page.RACE_BONUSES: "Racial Ability Bonuses",
    Page.CLASS: "Class",
    Page.ABILITIES: "Ability Scores",
}

METHOD_ROLL = "roll"
METHOD_POINT_BUY = "point_buy"

class CharacterWizard:
    def __init__(self, controller: MenuController, content: ContentIndex,
                 settings: Optional[Settings] = None, rng: Optional[random.Random] = None,
                 sheet: Optional[CharacterSheet] = None):
        self.controller = controller
        self.content = content
        self.settings = settings or Settings()
        self.rng = rng or make_rng(self.settings.rng_seed)
        self.sheet = sheet or CharacterSheet(ability_scores=AbilityScores(self.settings.default_score))
        self.rolls: List[int] = []
        self._pages: Dict[Page, Callable[[], None]] = {
            Page.RACE: self.race_page,
            Page.RACE_BONUSES: self.race_bonus_page,
            Page.CLASS: self.class_page,
            Page.ABILITIES: self.abilities_page,
        }

    def run(self) -> CharacterSheet:
        for page in PAGES:
            log.info("Page: %s", PAGE_LABELS[page])
            self._pages[page]()
        self.apply_race_bonuses()
        log.info("Character complete: %s the %s %s", self.sheet.name, self.sheet.race_name, self.sheet.class_name)
        return self.sheet

    def race_page(self) -> None:
        items = [MenuItem(r.name, r) for r in self.content.races.values()]
        race = self.controller.select("What is your character's race?", items)
        self.sheet.race, self.sheet.race_name = race.id, race.name
        self.sheet.race_bonus_choices = []

        items = [MenuItem(a.label, a) for a in ALIGNMENTS]
        self.sheet.alignment = self.controller.select("What is your character's alignment?", items)

    def race_bonus_page(self) -> None:
        race = self.content.get_race(self.sheet.race)
        bonuses = race.bonuses()
        choices: List[AbilityName] = []
        open_deltas = [d for a, d in bonuses if a is AbilityName.ANY]
        for i, delta in enumerate(open_deltas, start=1):
            items = [MenuItem(a.label, a) for a in choosable_abilities(bonuses, choices)]
            prompt = (f"{race.name} grants +{delta} to an ability of your choice ({i} of {len(open_deltas)}).\n"
                      "Which ability should receive it?")
            choices.append(self.controller.select(prompt, items))
        self.sheet.race_bonus_choices = choices

    def class_page(self) -> None:
        items = [MenuItem(c.name, c) for c in self.content.classes.values()]
        clazz = self.controller.select("What is your character's class?", items)
        self.sheet.clazz, self.sheet.class_name = clazz.id, clazz.name

    def abilities_page(self) -> None:
        items = [MenuItem("Roll", METHOD_ROLL), MenuItem("Point Buy", METHOD_POINT_BUY)]
        method = self.controller.select("Would you like to roll for your ability scores or use point buy?", items)
        log.info("Ability method: %s", method)
        if method == METHOD_POINT_BUY:
            self.point_buy_page()
            return
        self.rolls = generate_rolls(self.rng)
        log.info("Rolled %s", self.rolls)
        self.roll_page(self.rolls)

    def point_buy_page(self) -> None:
        s = self.settings
        pool = PointPool(s.point_buy_pool)
        scores = AbilityScores(s.point_buy_floor)
        while True:
            for ability in ABILITY_NAMES:
                score = self.controller.adjust_integer(
                    f"Adjust points for {ability.label}:", scores.get(ability), pool,
                    floor=s.point_buy_floor, ceiling=s.point_buy_ceiling, threshold=s.point_buy_threshold)
                scores.set(ability, score)
            if pool.remaining == 0:
                break
            prompt = f"You have {pool.remaining} points remaining. Are you sure you want to proceed?"
            if self.controller.select(prompt, yes_no()):
                break
            log.info("Point buy revisited with %d points left", pool.remaining)
        self.sheet.ability_scores = scores
        self.sheet.point_buy = True

    def roll_page(self, rolls: List[int]) -> None:
        assignment = RollAssignment(rolls)
        while True:
            while not assignment.done:
                pending = ", ".join(str(r) for r in assignment.pending)
                items = [MenuItem(a.label, a) for a in assignment.remaining]
                roll = assignment.current
                ability = self.controller.select(
                    f"Rolls: {pending}\nWhat ability score would you like to assign {roll} to?", items)
                assignment.bind(ability)
            scores = assignment.scores()
            table = "\n".join(f"{a.label}: {v}" for a, v in scores.sorted_view())
            if self.controller.select(f"Proceed with these ability scores?\n\n{table}", yes_no()):
                break
            log.info("Roll assignment declined; starting over with %s", list(assignment.rolls))
            assignment.reset()
        self.sheet.ability_scores = scores
        self.sheet.point_buy = False

    def apply_race_bonuses(self) -> None:
        bonuses = self.content.race_bonuses(self.sheet.race)
        resolved = resolve_bonuses(bonuses, self.sheet.race_bonus_choices)
        self.sheet.ability_scores = apply_bonuses(self.sheet.ability_scores, resolved)
        log.info("Race bonuses applied: %s", [(a.value, d) for a, d in resolved])
