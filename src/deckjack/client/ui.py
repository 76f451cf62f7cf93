# src/deckjack/client/ui.py

from typing import Iterable, Optional

from deckjack.common.cards import CardView, rank_to_string, suit_to_symbol
from deckjack.game.table import RoundResult, Table
from deckjack.game.stats import WinPercentage

DEAL = "deal"
HIT = "hit"
STAND = "stand"
QUIT = "quit"

_DECISIONS = {
    "d": DEAL, "deal": DEAL,
    "h": HIT, "hit": HIT,
    "s": STAND, "stand": STAND,
    "q": QUIT, "quit": QUIT,
}


def welcome_script() -> str:
    return "welcome to DECKJACK! (d)eal, (h)it, (s)tand, (q)uit"


def parse_decision(raw: str) -> Optional[str]:
    return _DECISIONS.get(raw.strip().lower())


def ask_decision(in_progress: bool, must_stand: bool = False) -> str:
    """
    Returns DEAL / HIT / STAND / QUIT. Only actions that fit the round
    state are accepted: hit/stand mid-round, deal between rounds, and
    only stand once the player has blackjack or is bust.
    """
    if must_stand:
        allowed, prompt = {STAND, QUIT}, "Stand? "
    elif in_progress:
        allowed, prompt = {HIT, STAND, QUIT}, "Hit or Stand? "
    else:
        allowed, prompt = {DEAL, QUIT}, "Deal? "
    while True:
        decision = parse_decision(input(prompt))
        if decision in allowed:
            return decision


def render_card(view: CardView) -> str:
    if view.hidden or view.card is None:
        return "[??]"
    return f"[{rank_to_string(view.card.rank)}{suit_to_symbol(view.card.suit)}]"


def render_hand(label: str, views: Iterable[CardView], score: Optional[int]) -> str:
    cards = " ".join(render_card(v) for v in views) or "-"
    score_part = f" ({score})" if score is not None else ""
    return f"{label:>6}: {cards}{score_part}"


def render_table(table: Table) -> str:
    return "\n".join([
        render_hand("Dealer", table.dealer_view(), table.visible_dealer_score()),
        render_hand("You", table.player_view(), table.player.score_total if len(table.player) else None),
    ])


def render_result(result: RoundResult) -> str:
    line = f"{result.label}  you {result.player_total} vs dealer {result.dealer_total}"
    if result.player_blackjack:
        line += "  (blackjack)"
    return line


def render_win_percentage(pct: WinPercentage) -> str:
    return f"wins {pct}" if pct else ""
