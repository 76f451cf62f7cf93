# src/deckjack/game/dealer.py

from typing import Callable, Optional

from deckjack.common.cards import Card
from deckjack.common.constants import DEALER
from deckjack.common.hand import Hand
from deckjack.common.rules import dealer_should_hit
from deckjack.common.logging_utils import get_logger, log_draw

log = get_logger("game.dealer")

CardSupplier = Callable[[], Card]


def _wants_card(dealer_hand: Hand) -> bool:
    return not dealer_hand.is_bust and dealer_should_hit(dealer_hand.cards)


def dealer_step(dealer_hand: Hand, card: Card) -> bool:
    """
    Apply one externally supplied card if the dealer still has to draw.
    Returns whether the dealer wants another card afterwards.
    """
    if not _wants_card(dealer_hand):
        log.debug(f"Dealer stands on {dealer_hand.score_total}, card {card} not taken")
        return False
    dealer_hand.draw(card)
    log_draw(log, DEALER, card, dealer_hand.score_total, note="dealer hit card")
    return _wants_card(dealer_hand)


def dealer_play(dealer_hand: Hand, draw: CardSupplier, player_hand: Optional[Hand] = None) -> int:
    """
    Draw for the dealer until 17 or more (or bust). Returns the number of
    cards taken. The dealer plays out even if the player already busted;
    get_winner settles that case on its own.
    Supplier errors propagate unchanged.
    """
    if player_hand is not None and player_hand.is_bust:
        log.debug(f"Player bust at {player_hand.score_total}, dealer still plays out")

    drawn = 0
    while _wants_card(dealer_hand):
        c = draw()
        dealer_hand.draw(c)
        drawn += 1
        log_draw(log, DEALER, c, dealer_hand.score_total, note="dealer hit card")

    log.debug(f"Dealer done: {dealer_hand} total={dealer_hand.score_total} drawn={drawn}")
    return drawn
