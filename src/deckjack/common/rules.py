# src/deckjack/common/rules.py

from typing import Iterable, Optional, Tuple

from .cards import Card
from .constants import (
    ACE, ACE_HIGH, ACE_LOW, FACE_VALUE,
    BLACKJACK, BLACKJACK_CARDS, DEALER_STAND_ON,
    OUTCOME_WIN, OUTCOME_LOSS, OUTCOME_PUSH,
)

# True = player wins, False = player loses, None = push
Outcome = Optional[bool]


def card_value(card: Card) -> int:
    # Ace = 11 (soft), 2-10 = face value, J/Q/K = 10
    if card.rank == ACE:
        return ACE_HIGH
    if 2 <= card.rank <= 10:
        return card.rank
    return FACE_VALUE


def _total_and_soft_aces(cards: Iterable[Card]) -> Tuple[int, int]:
    total = 0
    aces = 0
    for c in cards:
        total += card_value(c)
        if c.rank == ACE:
            aces += 1
    # harden one ace at a time until we fit
    while total > BLACKJACK and aces:
        total -= ACE_HIGH - ACE_LOW
        aces -= 1
    return total, aces


def hand_value(hand: Iterable[Card]) -> int:
    return _total_and_soft_aces(hand)[0]


def is_soft(hand: Iterable[Card]) -> bool:
    """True while at least one Ace is still counted as 11."""
    return _total_and_soft_aces(hand)[1] > 0


def is_bust(hand: Iterable[Card]) -> bool:
    return hand_value(hand) > BLACKJACK


def is_blackjack(hand: Iterable[Card]) -> bool:
    cards = list(hand)
    return len(cards) == BLACKJACK_CARDS and hand_value(cards) == BLACKJACK


def dealer_should_hit(hand: Iterable[Card]) -> bool:
    # dealer stands on every 17, soft or hard
    return hand_value(hand) < DEALER_STAND_ON


def get_winner(player_total: int, dealer_total: int) -> Outcome:
    """
    Decide the round from the player's point of view.
    Player bust loses before the dealer total is even looked at.
    """
    if player_total > BLACKJACK:
        return False
    if dealer_total > BLACKJACK:
        return True
    if player_total > dealer_total:
        return True
    if player_total < dealer_total:
        return False
    return None


def outcome_label(outcome: Outcome) -> str:
    if outcome is True:
        return OUTCOME_WIN
    if outcome is False:
        return OUTCOME_LOSS
    return OUTCOME_PUSH
