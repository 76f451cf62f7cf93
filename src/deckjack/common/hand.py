# src/deckjack/common/hand.py

from typing import Iterator, List, Tuple

from .cards import Card, InvalidCardError
from .rules import hand_value, is_blackjack, is_bust, is_soft
from .logging_utils import get_logger

_log = get_logger("hand")


class Hand:
    """
    Cards held by one party, in draw order.

    score_total / has_blackjack / is_bust are recomputed from the cards on
    every read, so they can never drift from what was actually drawn.
    """

    def __init__(self, owner: str = "") -> None:
        self.owner = owner
        self._cards: List[Card] = []

    def draw(self, card: Card) -> None:
        if not isinstance(card, Card):
            _log.warning(f"Rejected draw into {self.owner or 'hand'}: {card!r}")
            raise InvalidCardError(f"Only playable cards can be drawn, got {card!r}")
        self._cards.append(card)

    def clear(self) -> None:
        self._cards.clear()

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def score_total(self) -> int:
        return hand_value(self._cards)

    @property
    def has_blackjack(self) -> bool:
        return is_blackjack(self._cards)

    @property
    def is_bust(self) -> bool:
        return is_bust(self._cards)

    @property
    def is_soft(self) -> bool:
        return is_soft(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self._cards) or "-"

    def __repr__(self) -> str:
        return f"Hand(owner={self.owner!r}, cards=[{self}], total={self.score_total})"
