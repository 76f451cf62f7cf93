# src/deckjack/common/constants.py

import os

# Scoring
BLACKJACK = 21
DEALER_STAND_ON = 17
ACE_HIGH = 11
ACE_LOW = 1
FACE_VALUE = 10
BLACKJACK_CARDS = 2

# Rank encoding: 1=A, 2..10, 11=J, 12=Q, 13=K
ACE = 1
JACK = 11
QUEEN = 12
KING = 13
RANKS = list(range(ACE, KING + 1))

SUITS = ["H", "D", "C", "S"]

# deckofcardsapi.com spells ranks and suits out in full
API_RANK_NAMES = {"ACE": ACE, "JACK": JACK, "QUEEN": QUEEN, "KING": KING}
API_SUIT_NAMES = {"HEARTS": "H", "DIAMONDS": "D", "CLUBS": "C", "SPADES": "S"}

# Short letter ranks ("T" is the API's code for ten)
LETTER_RANKS = {"A": ACE, "T": 10, "J": JACK, "Q": QUEEN, "K": KING}

# Environment switches:
#   DECK_API_URL=https://deckofcardsapi.com/api
#   DECK_COUNT=6               decks in the shoe
#   DECK_SUPPLIER=api|local    where cards come from
#   HTTP_TIMEOUT_SEC=10
#   RESET_ROUND_SEC=2.0        pause before the table is cleared
DECK_API_URL = os.getenv("DECK_API_URL", "https://deckofcardsapi.com/api").rstrip("/")
DECK_COUNT = int(os.getenv("DECK_COUNT", "6"))
DECK_SUPPLIER = os.getenv("DECK_SUPPLIER", "api").lower()
HTTP_TIMEOUT_SEC = float(os.getenv("HTTP_TIMEOUT_SEC", "10"))
RESET_ROUND_SEC = float(os.getenv("RESET_ROUND_SEC", "2.0"))

# Round outcome labels
OUTCOME_WIN = "WIN!"
OUTCOME_LOSS = "LOST!"
OUTCOME_PUSH = "PUSH!"

PLAYER = "player"
DEALER = "dealer"
