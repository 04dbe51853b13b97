from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from textual.app import App
    from textual.widgets import Static

HIGHLIGHT_STYLE = "reverse"

class RenderSurface(Protocol):
    def draw(self, text: str, highlight: Optional[int] = None) -> None: ...

def build_frame(text: str, highlight: Optional[int] = None) -> Text:
    out = Text()
    for i, line in enumerate(text.split("\n")):
        if i:
            out.append("\n")
        out.append(line, style=HIGHLIGHT_STYLE if i == highlight else "")
    return out

class TextualSurface:
    """Draws frames into a Static widget from the wizard's worker thread."""

    def __init__(self, app: App, widget: Static):
        self.app = app
        self.widget = widget

    def draw(self, text: str, highlight: Optional[int] = None) -> None:
        self.app.call_from_thread(self.widget.update, build_frame(text, highlight))

class ConsoleSurface:
    def __init__(self, console: Console | None = None, clear: bool = True):
        self.console = console or Console()
        self.clear = clear

    def draw(self, text: str, highlight: Optional[int] = None) -> None:
        if self.clear:
            self.console.clear()
        self.console.print(build_frame(text, highlight))

@dataclass
class RecordingSurface:
    frames: List[Tuple[str, Optional[int]]] = field(default_factory=list)

    def draw(self, text: str, highlight: Optional[int] = None) -> None:
        self.frames.append((text, highlight))

    @property
    def last(self) -> str:
        return self.frames[-1][0] if self.frames else ""

    def highlighted_line(self) -> Optional[str]:
        if not self.frames:
            return None
        text, highlight = self.frames[-1]
        return None if highlight is None else text.split("\n")[highlight]
