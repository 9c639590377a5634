"""Console entry point: plays one hand of blackjack."""

import logging
from random import Random
from typing import TextIO

from config import AppConfig, config
from console.log_setup import setup_logging
from console.narrator import Narrator
from console.prompt import ConsolePrompt
from core.game import BlackjackGame

logger = logging.getLogger(__name__)


def main(
    app_config: AppConfig | None = None,
    rng: Random | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """
    Play a single hand against the dealer and exit.

    Args:
        app_config: Configuration (uses the global instance if not provided)
        rng: Random number generator for the shuffle
        stdin: Stream the player's answers are read from
        stdout: Stream the narration is written to

    Returns:
        Process exit code (always 0)
    """
    app_config = app_config or config
    setup_logging(app_config.logging)

    game = BlackjackGame(
        decide=ConsolePrompt(stdin),
        rng=rng,
        game_config=app_config.game,
    )
    Narrator(stdout, locale=app_config.console.locale).attach(game.events)

    result = game.play()
    logger.info("Hand finished: %s", result.outcome)
    return 0
