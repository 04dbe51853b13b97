import pytest
from dndsheet.engine.abilities import ABILITY_NAMES, AbilityName as A
from dndsheet.engine.assignment import RollAssignment

def test_binds_smallest_roll_first():
    ra = RollAssignment([7, 9, 11, 13, 15, 17])
    assert ra.current == 7
    assert ra.bind(A.WISDOM) == 7
    assert ra.current == 9
    assert A.WISDOM not in ra.remaining
    assert ra.pending == [9, 11, 13, 15, 17]

def test_full_assignment_is_a_bijection():
    rolls = [7, 9, 11, 13, 15, 17]
    ra = RollAssignment(rolls)
    for ability in (A.WISDOM, A.CHARISMA, A.INTELLIGENCE, A.CONSTITUTION, A.DEXTERITY, A.STRENGTH):
        ra.bind(ability)
    assert ra.done
    scores = ra.scores()
    assert scores.as_dict() == {"strength": 17, "dexterity": 15, "constitution": 13,
                                "intelligence": 11, "wisdom": 7, "charisma": 9}
    assert sorted(v for _, v in scores.sorted_view()) == rolls

def test_ability_cannot_take_two_rolls():
    ra = RollAssignment([3, 4, 5, 6, 7, 8])
    ra.bind(A.STRENGTH)
    with pytest.raises(ValueError):
        ra.bind(A.STRENGTH)
    with pytest.raises(ValueError):
        ra.bind(A.ANY)

def test_reset_reuses_the_same_rolls():
    ra = RollAssignment([8, 10, 12, 12, 14, 16])
    for ability in ABILITY_NAMES:
        ra.bind(ability)
    ra.reset()
    assert ra.pending == [8, 10, 12, 12, 14, 16]
    assert ra.remaining == list(ABILITY_NAMES)
    assert not ra.bound

def test_needs_six_rolls():
    with pytest.raises(ValueError):
        RollAssignment([10, 10, 10])

def test_scores_before_done():
    ra = RollAssignment([3, 4, 5, 6, 7, 8])
    with pytest.raises(ValueError):
        ra.scores()
