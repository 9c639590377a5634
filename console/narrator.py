"""Console narration of game events."""

import sys
from typing import TextIO

from console.messages import render
from core.game.events import EventEmitter, GameEvent


class Narrator:
    """Prints one templated sentence per line for every game event it receives."""

    def __init__(self, stream: TextIO | None = None, locale: str = "ja") -> None:
        self._stream = stream or sys.stdout
        self._locale = locale

    def attach(self, events: EventEmitter) -> None:
        """Subscribe to every event of a game."""
        events.subscribe(self)

    def __call__(self, event: GameEvent) -> None:
        for line in render(event.event_type, event.data, self._locale):
            print(line, file=self._stream, flush=True)
