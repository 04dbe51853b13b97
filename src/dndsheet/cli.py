from __future__ import annotations
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from dndsheet.engine.abilities import ABILITY_NAMES, AbilityName, AbilityScores
from dndsheet.engine.character import ALIGNMENTS, Alignment, CharacterSheet, render_sheet
from dndsheet.engine.dice import ROLL_MAX, ROLL_MIN, generate_rolls, make_rng
from dndsheet.engine.loader import load_content
from dndsheet.engine.point_buy import validate_point_buy
from dndsheet.engine.races import apply_bonuses, resolve_bonuses
from dndsheet.engine.settings import Settings, load_settings
from dndsheet.logging_config import setup_logging
from dndsheet.ui.controller import MenuController
from dndsheet.ui.keys import KeySourceClosed, ScriptedKeySource, WizardCancelled, parse_script
from dndsheet.ui.render import ConsoleSurface, RecordingSurface
from dndsheet.ui.wizard import CharacterWizard
from dndsheet.util.paths import content_dir

FAREWELL = "Goodbye!"

app = typer.Typer(help="Build a 5e character sheet.")
log = logging.getLogger(__name__)

@app.callback()
def main(ctx: typer.Context, seed: Annotated[Optional[int], typer.Option(help="Seed the dice for a repeatable run.")] = None):
    settings = load_settings()
    if seed is not None:
        settings = settings.model_copy(update={"rng_seed": seed})
    ctx.obj = settings
    setup_logging(settings.log_file)

def _sheet_out(settings: Settings, sheet: CharacterSheet) -> None:
    typer.echo(render_sheet(sheet, settings.sheet_label_width))

@app.command()
def wizard(ctx: typer.Context, name: Annotated[str, typer.Option(help="Character name.")] = "Hero"):
    """Run the interactive wizard in the terminal."""
    from dndsheet.app import run_app
    tui = run_app(name=name, settings=ctx.obj)
    if tui.return_code:
        log.error("Wizard exited with code %d", tui.return_code)
        raise typer.Exit(code=tui.return_code)
    sheet = tui.return_value
    if sheet is None:
        typer.echo(FAREWELL)
        return
    _sheet_out(ctx.obj, sheet)

@app.command()
def replay(ctx: typer.Context, keys: Annotated[str, typer.Option(help='Key script, e.g. "down*2,enter,esc".')],
           name: str = "Hero",
           frames: Annotated[bool, typer.Option(help="Print every frame.")] = False):
    """Run the wizard headless against a scripted key sequence."""
    surface = ConsoleSurface(Console(), clear=False) if frames else RecordingSurface()
    controller = MenuController(ScriptedKeySource(parse_script(keys)), surface)
    settings = ctx.obj
    wiz = CharacterWizard(controller, load_content(content_dir()), settings=settings,
                          sheet=CharacterSheet(name=name, ability_scores=AbilityScores(settings.default_score)))
    try:
        sheet = wiz.run()
    except WizardCancelled:
        typer.echo(FAREWELL)
        return
    except KeySourceClosed as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _sheet_out(ctx.obj, sheet)

@app.command()
def roll(ctx: typer.Context):
    """Roll one batch of six 4d6-drop-lowest scores."""
    rolls = generate_rolls(make_rng(ctx.obj.rng_seed))
    log.info("Rolled %s", rolls)
    typer.echo(", ".join(str(r) for r in rolls))

@app.command()
def races():
    """Show the racial ability score increases."""
    content = load_content(content_dir())
    table = Table(title="Races", show_header=True, header_style="bold")
    table.add_column("Id")
    table.add_column("Race")
    table.add_column("Ability score increases")
    for r in content.races.values():
        table.add_row(r.id, r.name, ", ".join(f"{a.label} +{d}" for a, d in r.bonuses()))
    Console().print(table)

@app.command()
def classes():
    """Show the classes and their hit dice."""
    content = load_content(content_dir())
    table = Table(title="Classes", show_header=True, header_style="bold")
    table.add_column("Id")
    table.add_column("Class")
    table.add_column("Hit die", justify="right")
    for c in content.classes.values():
        table.add_row(c.id, c.name, f"d{c.hit_die}")
    Console().print(table)

@app.command()
def create_character(
    ctx: typer.Context,
    name: Annotated[str, typer.Option(prompt="Enter character name")] = "Hero",
    race: Annotated[str, typer.Option(prompt="Enter race id (e.g., human)")] = "human",
    alignment: Annotated[str, typer.Option(prompt="Enter alignment (e.g., true-neutral)")] = "true-neutral",
    clazz: Annotated[str, typer.Option("--class", prompt="Enter class id (e.g., fighter)")] = "fighter",
    scores: Annotated[str, typer.Option(prompt="Ability scores (STR DEX CON INT WIS CHA)")] = "15 14 13 12 10 8",
    point_buy: Annotated[bool, typer.Option(help="Check the scores as a point-buy allocation.")] = False,
    bonus: Annotated[Optional[List[str]], typer.Option(help="Ability for each 'any' racial bonus.")] = None,
):
    """Build a sheet from options without the interactive wizard."""
    content = load_content(content_dir())
    if race not in content.races:
        raise typer.BadParameter(f"Unknown race '{race}'. Try: {', '.join(content.races)}", param_hint="--race")
    if clazz not in content.classes:
        raise typer.BadParameter(f"Unknown class '{clazz}'. Try: {', '.join(content.classes)}", param_hint="--class")
    if alignment not in [a.value for a in ALIGNMENTS]:
        raise typer.BadParameter(f"Unknown alignment '{alignment}'.", param_hint="--alignment")
    try:
        values = [int(s) for s in scores.replace(",", " ").split()]
    except ValueError:
        raise typer.BadParameter("Scores must be integers.", param_hint="--scores")
    if len(values) != len(ABILITY_NAMES):
        raise typer.BadParameter(f"Expected {len(ABILITY_NAMES)} scores, got {len(values)}.", param_hint="--scores")
    for ability, v in zip(ABILITY_NAMES, values):
        if not ROLL_MIN <= v <= ROLL_MAX:
            raise typer.BadParameter(f"{ability.label} must be between {ROLL_MIN} and {ROLL_MAX} (got {v}).",
                                     param_hint="--scores")
    ability_scores = AbilityScores.from_mapping(dict(zip(ABILITY_NAMES, values)))

    s = ctx.obj
    if point_buy:
        ok, msg = validate_point_buy(ability_scores, s.point_buy_pool, s.point_buy_floor,
                                     s.point_buy_ceiling, s.point_buy_threshold)
        if not ok:
            raise typer.BadParameter(msg, param_hint="--scores")
        typer.echo(msg)

    try:
        choices = [AbilityName(b.lower()) for b in bonus or []]
        resolved = resolve_bonuses(content.race_bonuses(race), choices)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--bonus")

    r, c = content.get_race(race), content.get_class(clazz)
    sheet = CharacterSheet(name=name, race=r.id, race_name=r.name, alignment=Alignment(alignment),
                           clazz=c.id, class_name=c.name, point_buy=point_buy, race_bonus_choices=choices,
                           ability_scores=apply_bonuses(ability_scores, resolved))
    _sheet_out(ctx.obj, sheet)

if __name__ == "__main__":
    app()
