from __future__ import annotations
import random
from typing import Optional

from textual.app import App
from textual.binding import Binding

from .engine.abilities import AbilityScores
from .engine.character import CharacterSheet
from .engine.dice import make_rng
from .engine.loader import ContentIndex, load_content
from .engine.settings import Settings, load_settings
from .ui.screens import WizardScreen
from .util.paths import content_dir

class SheetApp(App[Optional[CharacterSheet]]):
    CSS = """
    Screen { layout: vertical; }
    #wizard_frame { padding: 1 2; }
    #wizard_hint { dock: bottom; color: $text-muted; padding: 0 2; }
    """

    BINDINGS = [Binding("ctrl+c", "cancel", "Quit", priority=True)]

    def __init__(self, name: str = "Hero", settings: Optional[Settings] = None,
                 content: Optional[ContentIndex] = None, rng: Optional[random.Random] = None):
        super().__init__()
        self.character_name = name
        self.settings = settings or load_settings()
        self.content = content or load_content(content_dir())
        self.rng = rng or make_rng(self.settings.rng_seed)

    def on_mount(self) -> None:
        self.push_screen(WizardScreen())

    def new_sheet(self) -> CharacterSheet:
        return CharacterSheet(name=self.character_name,
                              ability_scores=AbilityScores(self.settings.default_score))

    def action_cancel(self) -> None:
        if isinstance(self.screen, WizardScreen):
            self.screen.cancel()
        else:
            self.exit()

def run_app(name: str = "Hero", settings: Optional[Settings] = None) -> SheetApp:
    """Run the wizard and return the finished app.

    The App owns the terminal and restores it on every exit path. A cancel
    leaves return_value None with return_code 0; a crashed worker sets a
    non-zero return_code.
    """
    app = SheetApp(name=name, settings=settings)
    app.run()
    return app
