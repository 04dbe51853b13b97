from .controller import MenuController, MenuItem
from .keys import KeyEvent, KeySourceClosed, QueueKeySource, ScriptedKeySource, WizardCancelled
from .render import RecordingSurface, RenderSurface
from .wizard import CharacterWizard, Page

__all__ = [
    "MenuController",
    "MenuItem",
    "KeyEvent",
    "KeySourceClosed",
    "QueueKeySource",
    "ScriptedKeySource",
    "WizardCancelled",
    "RecordingSurface",
    "RenderSurface",
    "CharacterWizard",
    "Page",
]
