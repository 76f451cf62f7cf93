# deckjack/__init__.py

from .common.cards import Card, CardView, Deck, InvalidCardError
from .common.hand import Hand
from .common.rules import Outcome, get_winner, hand_value, outcome_label
from .game.dealer import dealer_play, dealer_step
from .game.stats import SessionStats, calculate_win_percentage, record_round
from .game.table import GameStateError, RoundResult, Table

__version__ = "0.1.0"

__all__ = [
    "Card",
    "CardView",
    "Deck",
    "InvalidCardError",
    "Hand",
    "Outcome",
    "get_winner",
    "hand_value",
    "outcome_label",
    "dealer_play",
    "dealer_step",
    "SessionStats",
    "calculate_win_percentage",
    "record_round",
    "GameStateError",
    "RoundResult",
    "Table",
]
