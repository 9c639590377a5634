"""Localized narration sentences."""

from core.cards import Card, Suit
from core.game.events import EventType

SUPPORTED_LOCALES = ("ja", "en")

SUIT_NAMES: dict[str, dict[Suit, str]] = {
    "ja": {
        Suit.HEARTS: "ハート",
        Suit.DIAMONDS: "ダイヤ",
        Suit.CLUBS: "クラブ",
        Suit.SPADES: "スペード",
    },
    "en": {
        Suit.HEARTS: "Hearts",
        Suit.DIAMONDS: "Diamonds",
        Suit.CLUBS: "Clubs",
        Suit.SPADES: "Spades",
    },
}

CARD_FORMATS = {
    "ja": "{suit}の{rank}",
    "en": "{rank} of {suit}",
}

# Each event renders as zero or more lines. Events missing from a table are silent.
TEMPLATES: dict[str, dict[EventType, tuple[str, ...]]] = {
    "ja": {
        EventType.GAME_STARTED: ("ブラックジャックを開始します。",),
        EventType.CARD_DEALT: ("あなたの引いたカードは{card}です。",),
        EventType.DEALER_SHOWS: ("ディーラーの引いたカードは{card}です。",),
        EventType.DEALER_HIDES: ("ディーラーの引いた2枚目のカードはわかりません。",),
        EventType.PLAYER_PROMPTED: (
            "あなたの現在の得点は{points}です。カードを引きますか？（Y/N）",
        ),
        EventType.PLAYER_HIT: ("あなたの引いたカードは{card}です。",),
        EventType.DEALER_REVEALS: (
            "ディーラーの引いた2枚目のカードは{card}でした。",
            "ディーラーの現在の得点は{points}です。",
        ),
        EventType.DEALER_HITS: (
            "ディーラーの引いたカードは{card}です。",
            "ディーラーの現在の得点は{points}です。",
        ),
        EventType.PLAYER_BUSTS: (
            "あなたの現在の得点は{player_points}です。",
            "バーストしました、あなたの負けです...",
        ),
        EventType.DEALER_BUSTS: ("ディーラーの得点は{dealer_points}です。あなたの勝ちです！",),
        EventType.PLAYER_WINS: (
            "あなたの得点は{player_points}です。",
            "ディーラーの得点は{dealer_points}です。あなたの勝ちです！",
        ),
        EventType.PLAYER_LOSES: (
            "あなたの得点は{player_points}です。",
            "ディーラーの得点は{dealer_points}です。あなたの負けです...",
        ),
        EventType.PUSH: ("引き分けです。",),
        EventType.GAME_ENDED: ("ブラックジャックを終了します。",),
    },
    "en": {
        EventType.GAME_STARTED: ("Starting blackjack.",),
        EventType.CARD_DEALT: ("You drew the {card}.",),
        EventType.DEALER_SHOWS: ("The dealer drew the {card}.",),
        EventType.DEALER_HIDES: ("The dealer's second card is face down.",),
        EventType.PLAYER_PROMPTED: ("Your current score is {points}. Draw a card? (Y/N)",),
        EventType.PLAYER_HIT: ("You drew the {card}.",),
        EventType.DEALER_REVEALS: (
            "The dealer's second card was the {card}.",
            "The dealer's current score is {points}.",
        ),
        EventType.DEALER_HITS: (
            "The dealer drew the {card}.",
            "The dealer's current score is {points}.",
        ),
        EventType.PLAYER_BUSTS: (
            "Your current score is {player_points}.",
            "Bust! You lose...",
        ),
        EventType.DEALER_BUSTS: ("The dealer's score is {dealer_points}. You win!",),
        EventType.PLAYER_WINS: (
            "Your score is {player_points}.",
            "The dealer's score is {dealer_points}. You win!",
        ),
        EventType.PLAYER_LOSES: (
            "Your score is {player_points}.",
            "The dealer's score is {dealer_points}. You lose...",
        ),
        EventType.PUSH: ("It's a push.",),
        EventType.GAME_ENDED: ("Ending blackjack.",),
    },
}


def _check_locale(locale: str) -> None:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {locale}")


def card_name(card: Card, locale: str = "ja") -> str:
    """Return the spoken name of a card, e.g. 'ハートのA' or 'A of Hearts'."""
    _check_locale(locale)
    return CARD_FORMATS[locale].format(
        suit=SUIT_NAMES[locale][card.suit],
        rank=card.rank,
    )


def render(event_type: EventType, data: dict, locale: str = "ja") -> list[str]:
    """
    Render the narration lines for an event.

    Card values in ``data`` are replaced by their localized names before
    formatting.
    """
    _check_locale(locale)
    values = {
        key: card_name(value, locale) if isinstance(value, Card) else value
        for key, value in data.items()
    }
    return [line.format(**values) for line in TEMPLATES[locale].get(event_type, ())]
