"""Line-based input for the player's hit/stand decision."""

import logging
import sys
from typing import TextIO

from core.game.engine import Decision

logger = logging.getLogger(__name__)


class ConsolePrompt:
    """
    Reads one token per line from a text stream.

    The prompt sentence itself is printed by the narrator; this only
    blocks for the answer. End of input counts as standing.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdin

    def __call__(self) -> str:
        line = self._stream.readline()
        if not line:
            logger.info("Input closed, standing")
            return Decision.STAND.value
        return line.rstrip("\r\n")
