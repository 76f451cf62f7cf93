# src/deckjack/common/cards.py

import random
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from .constants import (
    ACE, JACK, QUEEN, KING,
    RANKS, SUITS,
    API_RANK_NAMES, API_SUIT_NAMES, LETTER_RANKS,
)
from .logging_utils import get_logger

_log = get_logger("cards")


# -------------------------
# Errors
# -------------------------
class InvalidCardError(ValueError):
    """Raised when something that is not a playable card reaches the engine."""
    pass


def _require(condition: bool, msg: str) -> None:
    if not condition:
        _log.warning(f"InvalidCardError: {msg}")
        raise InvalidCardError(msg)


# -------------------------
# Card
# -------------------------
@dataclass(frozen=True)
class Card:
    rank: int  # 1..13
    suit: str  # "H","D","C","S"
    image: Optional[str] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require(
            isinstance(self.rank, int) and not isinstance(self.rank, bool) and self.rank in RANKS,
            f"Invalid rank: {self.rank!r}",
        )
        _require(self.suit in SUITS, f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{rank_to_string(self.rank)}{self.suit}"

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Card":
        """
        Build a Card from one deckofcardsapi.com card object, e.g.
        {"code": "KH", "value": "KING", "suit": "HEARTS", "image": "https://..."}
        """
        _require("value" in payload and "suit" in payload, f"Card payload missing value/suit: {payload!r}")
        return cls(
            rank=parse_rank(payload["value"]),
            suit=parse_suit(payload["suit"]),
            image=payload.get("image"),
        )


def parse_rank(value: Union[int, str]) -> int:
    """Accepts 1..13, "2".."10", "A"/"T"/"J"/"Q"/"K" or the API's "ACE"/"KING"/..."""
    if isinstance(value, bool):
        _require(False, f"Invalid rank: {value!r}")
    if isinstance(value, int):
        _require(value in RANKS, f"Invalid rank: {value!r}")
        return value

    raw = str(value).strip().upper()
    if raw.isdigit():
        rank = int(raw)
        _require(2 <= rank <= 10, f"Invalid rank: {value!r}")
        return rank
    if raw in API_RANK_NAMES:
        return API_RANK_NAMES[raw]
    _require(raw in LETTER_RANKS, f"Invalid rank: {value!r}")
    return LETTER_RANKS[raw]


def parse_suit(value: str) -> str:
    raw = str(value).strip().upper()
    if raw in API_SUIT_NAMES:
        return API_SUIT_NAMES[raw]
    _require(raw in SUITS, f"Invalid suit: {value!r}")
    return raw


def rank_to_string(rank: int) -> str:
    if rank == ACE:
        return "A"
    if rank == JACK:
        return "J"
    if rank == QUEEN:
        return "Q"
    if rank == KING:
        return "K"
    return str(rank)


def suit_to_symbol(suit: str) -> str:
    return {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}.get(suit, "?")


# -------------------------
# Presentation boundary
# -------------------------
@dataclass(frozen=True)
class CardView:
    """A card as the table shows it. Hidden cards carry no card at all."""
    card: Optional[Card]
    hidden: bool = False

    @classmethod
    def face_down(cls) -> "CardView":
        return cls(card=None, hidden=True)

    def __str__(self) -> str:
        return "??" if self.hidden or self.card is None else str(self.card)


# -------------------------
# Local shoe
# -------------------------
class Deck:
    """
    Shuffled shoe of `deck_count` decks. Used when the remote deck service
    is not wanted (offline play, tests).
    """

    def __init__(self, deck_count: int = 1, rng: Optional[random.Random] = None) -> None:
        if deck_count < 1:
            raise ValueError("deck_count must be >= 1")
        self.deck_count = deck_count
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.shuffle()

    def shuffle(self) -> None:
        self._cards = [Card(r, s) for _ in range(self.deck_count) for s in SUITS for r in RANKS]
        self._rng.shuffle(self._cards)
        _log.debug(f"Shoe shuffled: {len(self._cards)} cards")

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            # reshuffle if empty (simple)
            self.shuffle()
        return self._cards.pop()

    __call__ = draw
