from __future__ import annotations
import logging
import queue
from typing import TYPE_CHECKING, Optional

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static
from textual.worker import get_current_worker

from .controller import MenuController
from .ids import WIZARD_FRAME, WIZARD_HINT, WIZARD_WORKER
from .keys import CANCEL, KeyEvent, QueueKeySource, WizardCancelled, key_from_textual
from .render import TextualSurface
from .wizard import CharacterWizard

if TYPE_CHECKING:
    from ..app import SheetApp

log = logging.getLogger(__name__)

HINT = "↑/↓ move or adjust · Enter confirm · Esc quit"

class WizardScreen(Screen):
    """Hosts the blocking wizard in a thread worker and feeds it key events."""
    app_ref: SheetApp

    def __init__(self):
        super().__init__()
        self.key_queue: "queue.Queue[KeyEvent]" = queue.Queue()

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("", id=WIZARD_FRAME),
            Static(HINT, id=WIZARD_HINT),
        )

    def on_mount(self) -> None:
        self.app_ref = self.app
        self.frame_widget = self.query_one(f"#{WIZARD_FRAME}", Static)
        self.run_worker(self._drive, name=WIZARD_WORKER, thread=True, exclusive=True)

    def on_key(self, event: events.Key) -> None:
        ev = key_from_textual(event.key, event.character)
        if ev is None:
            return
        event.stop()
        event.prevent_default()
        self.key_queue.put(ev)

    def cancel(self) -> None:
        self.key_queue.put(CANCEL)

    def _drive(self) -> None:
        app = self.app_ref
        worker = get_current_worker()
        surface = TextualSurface(app, self.frame_widget)
        keys = QueueKeySource(self.key_queue, is_cancelled=lambda: worker.is_cancelled)
        wizard = CharacterWizard(MenuController(keys, surface), app.content,
                                 settings=app.settings, rng=app.rng, sheet=app.new_sheet())
        result: Optional[object] = None
        try:
            result = wizard.run()
        except WizardCancelled:
            log.info("Wizard cancelled")
        if worker.is_cancelled:
            return
        app.call_from_thread(app.exit, result)
