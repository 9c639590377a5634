"""Blackjack game engine with state machine."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Callable

from transitions import Machine

from config import GameConfig
from core.cards import Card, Deck
from core.hand import Outcome, evaluate_hands
from core.players import Player
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState

logger = logging.getLogger(__name__)


class Decision(Enum):
    """Player move, keyed by the token typed at the prompt."""

    HIT = "y"
    STAND = "n"

    @classmethod
    def parse(cls, token: str) -> "Decision | None":
        """Interpret a typed token case-insensitively; None if unrecognized."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None


# Supplies the raw token for each player decision; blocks until one is available
DecisionSource = Callable[[], str]


class GameOverError(RuntimeError):
    """Raised when a finished game is played again."""


@dataclass(frozen=True)
class GameResult:
    """Final outcome of a hand."""

    outcome: Outcome
    player_points: int
    dealer_points: int
    player_busted: bool = False
    dealer_busted: bool = False


class BlackjackGame:
    """
    Single-hand blackjack game engine using a state machine.

    The engine never reads input or prints output itself: it asks the
    injected decision source for moves and reports everything through
    events. A game is single-use; ``play`` runs the whole hand.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "finish_deal", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_stood", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busted", "source": "player_turn", "dest": "resolved"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolved"},
    ]

    def __init__(
        self,
        decide: DecisionSource,
        rng: Random | None = None,
        deck: Deck | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            decide: Callable returning the player's next typed token
            rng: Random number generator for reproducible shuffles
            deck: Prepared deck to deal from (overrides rng)
            game_config: House rules (uses defaults if not provided)
        """
        self.rules = game_config or GameConfig()
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.player = Player()
        self.dealer = Player.dealer()
        self.events = EventEmitter()
        self.result: GameResult | None = None
        self._decide = decide

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play(self) -> GameResult:
        """
        Play the hand to completion and return its result.

        Raises:
            GameOverError: if this game has already been played
        """
        if self.state != GameState.DEALING:
            raise GameOverError("This game has already been played")

        self.events.emit_new(EventType.GAME_STARTED)
        self._deal_initial_cards()

        if self._play_player_turn():
            self._play_dealer()

        self.result = self._resolve()
        self.events.emit_new(EventType.GAME_ENDED, outcome=self.result.outcome)
        return self.result

    def _log_state(self) -> None:
        logger.debug("Game state is now %s", self.state)

    def _draw_to(self, participant: Player) -> Card:
        card = self.deck.draw()
        participant.hit(card)
        logger.debug("Dealt %r to %s", card, participant.role)
        return card

    def _deal_initial_cards(self) -> None:
        """Deal player, dealer, player, dealer, then narrate what is visible."""
        for _ in range(self.rules.initial_cards):
            self._draw_to(self.player)
            self._draw_to(self.dealer)

        for card in self.player.hand:
            self.events.emit_new(
                EventType.CARD_DEALT,
                card=card,
                role=str(self.player.role),
            )
        self.events.emit_new(EventType.DEALER_SHOWS, card=self.dealer.show_one_card())
        self.events.emit_new(EventType.DEALER_HIDES)

        self.finish_deal()

    def _play_player_turn(self) -> bool:
        """
        Ask for decisions until the player stands or busts.

        Returns:
            True if the player stood, False if the player busted
        """
        hand = self.player.hand
        while True:
            self.events.emit_new(EventType.PLAYER_PROMPTED, points=hand.points())
            token = self._decide()
            decision = Decision.parse(token)

            if decision is None:
                logger.debug("Ignoring unrecognized input %r", token)
                self.events.emit_new(EventType.INVALID_INPUT, token=token)
                continue

            if decision is Decision.STAND:
                self.events.emit_new(EventType.PLAYER_STAND, points=hand.points())
                self.player_stood()
                return True

            card = self._draw_to(self.player)
            self.events.emit_new(EventType.PLAYER_HIT, card=card, points=hand.points())

            if hand.busted():
                self.player_busted()
                return False

    def _play_dealer(self) -> None:
        """Reveal the hole card, then hit until the stand threshold."""
        hand = self.dealer.hand
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=hand.cards[1],
            points=hand.points(),
        )

        while hand.points() < self.rules.dealer_stand_threshold:
            card = self._draw_to(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, card=card, points=hand.points())

        self.dealer_done()

    def _resolve(self) -> GameResult:
        """Compare the hands and announce the outcome."""
        player_hand = self.player.hand
        dealer_hand = self.dealer.hand
        outcome = evaluate_hands(player_hand, dealer_hand)

        result = GameResult(
            outcome=outcome,
            player_points=player_hand.points(),
            dealer_points=dealer_hand.points(),
            player_busted=player_hand.busted(),
            dealer_busted=dealer_hand.busted(),
        )
        scores = {
            "player_points": result.player_points,
            "dealer_points": result.dealer_points,
        }

        if result.player_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, **scores)
        elif result.dealer_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, **scores)
        elif outcome is Outcome.WIN:
            self.events.emit_new(EventType.PLAYER_WINS, **scores)
        elif outcome is Outcome.LOSS:
            self.events.emit_new(EventType.PLAYER_LOSES, **scores)
        else:
            self.events.emit_new(EventType.PUSH, **scores)

        logger.debug("Hand resolved: %s", result)
        return result
