import pytest
from dndsheet.engine.point_buy import PointPool
from dndsheet.ui.controller import MenuController, MenuItem, yes_no
from dndsheet.ui.keys import (
    CANCEL, CONFIRM, KeyEvent, KeySourceClosed, ScriptedKeySource, WizardCancelled, key_from_textual, parse_script,
)
from dndsheet.ui.render import RecordingSurface, build_frame

def make(script):
    surface = RecordingSurface()
    return MenuController(ScriptedKeySource(parse_script(script)), surface), surface

ITEMS = [MenuItem("Alpha", "a"), MenuItem("Beta", "b"), MenuItem("Gamma", "g")]

def test_select_starts_on_first_item():
    ctl, surface = make("enter")
    assert ctl.select("Pick one", ITEMS) == "a"
    assert surface.frames[0] == ("Pick one\nAlpha\nBeta\nGamma", 1)

def test_select_clamps_without_wrapping():
    ctl, surface = make("up,up,down*5,enter")
    assert ctl.select("Pick", ITEMS) == "g"
    assert surface.frames[1][1] == 1  # up at the top stays put
    assert surface.highlighted_line() == "Gamma"

def test_select_multiline_prompt_offsets_highlight():
    ctl, surface = make("down,enter")
    assert ctl.select("Rolls: 3, 4\nAssign 3?", ITEMS) == "b"
    assert surface.highlighted_line() == "Beta"

def test_select_ignores_typing():
    ctl, _ = make("x,backspace,down,enter")
    assert ctl.select("Pick", ITEMS) == "b"

def test_yes_no():
    ctl, _ = make("down,enter")
    assert ctl.select("Sure?", yes_no()) is False

def test_cancel_unwinds():
    ctl, _ = make("down,esc,enter")
    with pytest.raises(WizardCancelled):
        ctl.select("Pick", ITEMS)

def test_closed_key_source():
    ctl, _ = make("down")
    with pytest.raises(KeySourceClosed):
        ctl.select("Pick", ITEMS)

def test_empty_menu_is_a_contract_violation():
    ctl, _ = make("enter")
    with pytest.raises(ValueError):
        ctl.select("Pick", [])

def test_adjust_integer_commits_on_confirm():
    ctl, surface = make("up*7,enter")
    pool = PointPool(27)
    assert ctl.adjust_integer("Adjust points for Strength:", 8, pool) == 15
    assert pool.remaining == 18
    assert surface.frames[0][0] == "Pool Remaining: 27\nAdjust points for Strength:\n8"
    assert surface.frames[-1][0].startswith("Pool Remaining: 18\n")

def test_adjust_integer_cancel_leaves_pool_alone():
    ctl, _ = make("up*3,esc")
    pool = PointPool(27)
    with pytest.raises(WizardCancelled):
        ctl.adjust_integer("Adjust", 8, pool)
    assert pool.remaining == 27

def test_adjust_integer_respects_custom_bounds():
    ctl, _ = make("down*5,enter")
    pool = PointPool(10)
    pool.spend(3)  # 6 -> 9 already paid for
    assert ctl.adjust_integer("Adjust", 9, pool, floor=6, ceiling=12, threshold=10) == 6
    assert pool.remaining == 10

def test_key_mapping():
    assert key_from_textual("enter") is CONFIRM
    assert key_from_textual("escape") is CANCEL
    assert key_from_textual("ctrl+c") is CANCEL
    assert key_from_textual("a", "a") == KeyEvent.printable("a")
    assert key_from_textual("f1") is None

def test_parse_script_rejects_unknown_names():
    with pytest.raises(ValueError):
        parse_script("sideways")

def test_frame_highlight_style():
    text = build_frame("one\ntwo", 1)
    assert text.plain == "one\ntwo"
    assert any(span.style == "reverse" for span in text.spans)

def test_adjust_integer_rejects_initial_below_floor():
    ctl, surface = make("enter")
    with pytest.raises(ValueError):
        ctl.adjust_integer("Adjust", 5, PointPool(27))
    assert surface.frames == []
