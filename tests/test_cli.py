from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

import dndsheet.app
from dndsheet import cli
from dndsheet.engine.abilities import AbilityScores
from dndsheet.engine.character import CharacterSheet
from dndsheet.engine.settings import Settings

runner = CliRunner()

@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(log_file=tmp_path / "dndsheet.log"))

def test_roll_is_repeatable_with_seed():
    first = runner.invoke(cli.app, ["--seed", "11", "roll"])
    second = runner.invoke(cli.app, ["--seed", "11", "roll"])
    assert first.exit_code == 0
    assert first.output == second.output
    rolls = [int(x) for x in first.output.strip().split(", ")]
    assert len(rolls) == 6 and rolls == sorted(rolls)

def test_races_table():
    result = runner.invoke(cli.app, ["races"])
    assert result.exit_code == 0
    assert "Half-Elf" in result.output
    assert "Tiefling" in result.output

def test_classes_table_shows_hit_dice():
    result = runner.invoke(cli.app, ["classes"])
    assert result.exit_code == 0
    assert "Barbarian" in result.output
    assert "d12" in result.output
    assert "d6" in result.output

def test_create_character_point_buy_with_choices():
    result = runner.invoke(cli.app, [
        "create-character", "--name", "Mira", "--race", "half-elf", "--alignment", "chaotic-good",
        "--class", "bard", "--scores", "8 14 13 12 10 15", "--point-buy",
        "--bonus", "dexterity", "--bonus", "constitution",
    ])
    assert result.exit_code == 0, result.output
    assert "Point-buy OK (used 27/27)." in result.output
    assert "Mira" in result.output
    assert "Chaotic Good" in result.output
    assert "Dexterity: 15" in result.output
    assert "Constitution: 14" in result.output
    assert "Charisma: 17" in result.output

def test_create_character_rejects_overspent_point_buy():
    result = runner.invoke(cli.app, [
        "create-character", "--name", "X", "--race", "elf", "--alignment", "true-neutral",
        "--class", "rogue", "--scores", "15 15 15 15 15 15", "--point-buy",
    ])
    assert result.exit_code == 2

def test_create_character_needs_any_choices():
    result = runner.invoke(cli.app, [
        "create-character", "--name", "X", "--race", "human", "--alignment", "true-neutral",
        "--class", "rogue", "--scores", "10 10 10 10 10 10",
    ])
    assert result.exit_code == 2

def test_replay_point_buy():
    keys = "down,enter,enter,enter,down,enter,up*7,enter,up*5,enter,up*5,enter,enter,up*5,enter,up*3,enter"
    result = runner.invoke(cli.app, ["replay", "--name", "Gimli", "--keys", keys])
    assert result.exit_code == 0, result.output
    assert "Gimli" in result.output
    assert "Constitution: 15" in result.output

def test_replay_cancel_says_goodbye():
    result = runner.invoke(cli.app, ["replay", "--keys", "esc"])
    assert result.exit_code == 0
    assert "Goodbye!" in result.output

def test_replay_running_out_of_keys_fails():
    result = runner.invoke(cli.app, ["replay", "--keys", "down,enter"])
    assert result.exit_code == 1

@pytest.mark.parametrize("scores", ["0 10 10 10 10 10", "10 10 99 10 10 10"])
def test_create_character_rejects_scores_out_of_range(scores):
    result = runner.invoke(cli.app, [
        "create-character", "--name", "X", "--race", "elf", "--alignment", "true-neutral",
        "--class", "rogue", "--scores", scores,
    ])
    assert result.exit_code == 2
    assert "between 3 and 18" in result.output

def fake_run_app(return_value, return_code):
    return lambda name, settings: SimpleNamespace(return_value=return_value, return_code=return_code)

def test_wizard_cancel_says_goodbye(monkeypatch):
    monkeypatch.setattr(dndsheet.app, "run_app", fake_run_app(None, 0))
    result = runner.invoke(cli.app, ["wizard"])
    assert result.exit_code == 0
    assert "Goodbye!" in result.output

def test_wizard_crash_exits_nonzero(monkeypatch):
    monkeypatch.setattr(dndsheet.app, "run_app", fake_run_app(None, 1))
    result = runner.invoke(cli.app, ["wizard"])
    assert result.exit_code == 1
    assert "Goodbye!" not in result.output

def test_wizard_prints_finished_sheet(monkeypatch):
    sheet = CharacterSheet(name="Thorin", ability_scores=AbilityScores(8))
    monkeypatch.setattr(dndsheet.app, "run_app", fake_run_app(sheet, 0))
    result = runner.invoke(cli.app, ["wizard"])
    assert result.exit_code == 0
    assert "Thorin" in result.output
