from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

from dndsheet.engine.point_buy import CEILING, FLOOR, THRESHOLD, PointPool, ScoreAdjuster

from .keys import Key, KeyEvent, KeySourceClosed, WizardCancelled
from .render import RenderSurface

log = logging.getLogger(__name__)

T = TypeVar("T")

@dataclass(frozen=True)
class MenuItem(Generic[T]):
    name: str
    value: T

def yes_no() -> list[MenuItem[bool]]:
    return [MenuItem("Yes", True), MenuItem("No", False)]

class MenuController:
    """Blocking list-selection and number-adjustment prompts over a key stream."""

    def __init__(self, keys: Iterable[KeyEvent], surface: RenderSurface):
        self._keys: Iterator[KeyEvent] = iter(keys)
        self.surface = surface

    def _next_key(self) -> KeyEvent:
        try:
            ev = next(self._keys)
        except StopIteration:
            raise KeySourceClosed("key source ended") from None
        if ev.key is Key.CANCEL:
            log.info("Cancel key pressed")
            raise WizardCancelled()
        return ev

    def select(self, prompt: str, items: Sequence[MenuItem[T]]) -> T:
        if not items:
            raise ValueError("select() needs at least one item")
        header = prompt.split("\n")
        cursor = 0
        while True:
            lines = header + [it.name for it in items]
            self.surface.draw("\n".join(lines), len(header) + cursor)
            ev = self._next_key()
            if ev.key is Key.UP:
                cursor = max(0, cursor - 1)
            elif ev.key is Key.DOWN:
                cursor = min(len(items) - 1, cursor + 1)
            elif ev.key is Key.CONFIRM:
                return items[cursor].value

    def adjust_integer(self, prompt: str, initial: int, pool: PointPool,
                       floor: int = FLOOR, ceiling: int = CEILING, threshold: int = THRESHOLD) -> int:
        adj = ScoreAdjuster(pool, initial, floor=floor, ceiling=ceiling, threshold=threshold)
        while True:
            self.surface.draw(f"Pool Remaining: {adj.remaining}\n{prompt}\n{adj.value}", 2)
            ev = self._next_key()
            if ev.key is Key.UP:
                adj.increase()
            elif ev.key is Key.DOWN:
                adj.decrease()
            elif ev.key is Key.CONFIRM:
                used = adj.pool_used
                value = adj.commit()
                log.debug("Committed %d (pool %+d, %d left)", value, -used, pool.remaining)
                return value
