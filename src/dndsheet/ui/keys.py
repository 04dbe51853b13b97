from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional
import queue

class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    BACKSPACE = "backspace"
    CHAR = "char"
    CANCEL = "cancel"

@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: Optional[str] = None

    @classmethod
    def printable(cls, c: str) -> KeyEvent:
        return cls(Key.CHAR, c)

UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
CONFIRM = KeyEvent(Key.CONFIRM)
BACKSPACE = KeyEvent(Key.BACKSPACE)
CANCEL = KeyEvent(Key.CANCEL)

class WizardCancelled(Exception):
    """The user pressed the cancel key; unwinds the whole session."""

class KeySourceClosed(RuntimeError):
    """The key stream ended or failed; the wizard cannot continue."""

# Textual key names -> events
_TEXTUAL_KEYS = {
    "up": UP,
    "down": DOWN,
    "enter": CONFIRM,
    "backspace": BACKSPACE,
    "escape": CANCEL,
    "ctrl+c": CANCEL,
}

def key_from_textual(key: str, character: Optional[str] = None) -> Optional[KeyEvent]:
    if key in _TEXTUAL_KEYS:
        return _TEXTUAL_KEYS[key]
    if character and len(character) == 1 and character.isprintable():
        return KeyEvent.printable(character)
    return None

_SCRIPT_NAMES = {
    "up": UP, "u": UP,
    "down": DOWN, "d": DOWN,
    "enter": CONFIRM, "confirm": CONFIRM,
    "backspace": BACKSPACE,
    "esc": CANCEL, "escape": CANCEL, "cancel": CANCEL,
}

def parse_script(text: str) -> list[KeyEvent]:
    """Parse "down*3,enter,esc" into events; a bare single character is printable."""
    events: list[KeyEvent] = []
    for token in (t.strip() for t in text.split(",")):
        if not token:
            continue
        name, _, times = token.partition("*")
        count = int(times) if times else 1
        ev = _SCRIPT_NAMES.get(name.lower())
        if ev is None:
            if len(name) != 1:
                raise ValueError(f"Unknown key {name!r}")
            ev = KeyEvent.printable(name)
        events.extend([ev] * count)
    return events

class ScriptedKeySource:
    """Replays a fixed list of events; running out is a closed stream."""

    def __init__(self, events: Iterable[KeyEvent]):
        self.events = list(events)
        self.consumed = 0

    def __iter__(self) -> Iterator[KeyEvent]:
        while self.consumed < len(self.events):
            ev = self.events[self.consumed]
            self.consumed += 1
            yield ev
        raise KeySourceClosed(f"script ended after {self.consumed} keys")

class QueueKeySource:
    """Blocking key stream fed from another thread (the Textual event loop)."""

    def __init__(self, q: "queue.Queue[KeyEvent]", is_cancelled: Callable[[], bool] = lambda: False,
                 poll_interval: float = 0.1):
        self.queue = q
        self.is_cancelled = is_cancelled
        self.poll_interval = poll_interval

    def __iter__(self) -> Iterator[KeyEvent]:
        while True:
            if self.is_cancelled():
                raise WizardCancelled()
            try:
                yield self.queue.get(timeout=self.poll_interval)
            except queue.Empty:
                continue
