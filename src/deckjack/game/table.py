# src/deckjack/game/table.py

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from deckjack.common.cards import Card, CardView
from deckjack.common.constants import PLAYER, DEALER
from deckjack.common.hand import Hand
from deckjack.common.rules import Outcome, get_winner, outcome_label
from deckjack.common.logging_utils import get_logger, log_draw
from deckjack.game.dealer import dealer_play
from deckjack.game.stats import RoundTally, SessionStats

log = get_logger("game.table")


class GameStateError(RuntimeError):
    """Raised when an action does not fit the current round state."""
    pass


@dataclass(frozen=True)
class RoundResult:
    outcome: Outcome
    player_total: int
    dealer_total: int
    player_cards: Tuple[Card, ...]
    dealer_cards: Tuple[Card, ...]
    player_blackjack: bool
    tally: RoundTally

    @property
    def label(self) -> str:
        return outcome_label(self.outcome)


class Table:
    """
    One player against the dealer, one round at a time.

    Both hands live as long as the table; they are cleared between rounds,
    never re-created. Every card comes from `draw` in the order it is needed,
    and each action finishes its engine updates before returning.
    """

    def __init__(self, draw: Callable[[], Card], stats: Optional[SessionStats] = None) -> None:
        self._draw = draw
        self.player = Hand(PLAYER)
        self.dealer = Hand(DEALER)
        self.stats = stats if stats is not None else SessionStats()
        self.in_progress = False
        self.last_result: Optional[RoundResult] = None

    # -------------------------
    # Actions
    # -------------------------
    def deal(self) -> Optional[RoundResult]:
        """
        Start a round: player, dealer, player, dealer.
        Stands automatically on a natural blackjack and returns the result;
        otherwise returns None and waits for hit/stand.
        """
        if self.in_progress:
            raise GameStateError("Round already in progress")

        self.reset_round()
        for hand in (self.player, self.dealer, self.player, self.dealer):
            self._deal_to(hand, note="initial deal")

        self.in_progress = True
        log.info(f"Dealt: player=[{self.player}] total={self.player.score_total} dealer_up={self.dealer.cards[0]}")

        if self.player.has_blackjack:
            log.info("Player has blackjack, standing")
            return self.stand()
        return None

    def hit(self) -> Optional[RoundResult]:
        """Draw one card for the player. Stands automatically on bust."""
        self._require_in_progress("hit")
        if self.must_stand:
            log.warning(f"GameStateError: hit on {self.player.score_total}, round can only stand")
            raise GameStateError("Cannot hit: player has blackjack or is bust, stand to finish the round")
        self._deal_to(self.player, note="player hit card")

        if self.player.is_bust:
            log.info(f"Player bust at {self.player.score_total}")
            return self.stand()
        return None

    def stand(self) -> RoundResult:
        """Dealer plays out, the round is decided and recorded."""
        self._require_in_progress("stand")

        dealer_play(self.dealer, self._draw, self.player)

        pv = self.player.score_total
        dv = self.dealer.score_total
        outcome = get_winner(pv, dv)
        tally = self.stats.record(outcome)

        self.in_progress = False
        self.last_result = RoundResult(
            outcome=outcome,
            player_total=pv,
            dealer_total=dv,
            player_cards=self.player.cards,
            dealer_cards=self.dealer.cards,
            player_blackjack=self.player.has_blackjack,
            tally=tally,
        )
        log.info(
            f"Result: {outcome_label(outcome)} player={pv} dealer={dv} "
            f"rounds={tally.round_count} wins={tally.win_count} pct={tally.win_percentage}"
        )
        return self.last_result

    def reset_round(self) -> None:
        """Clear both hands for the next round. Statistics are kept."""
        if self.in_progress:
            raise GameStateError("Cannot reset a round in progress")
        self.player.clear()
        self.dealer.clear()
        self.last_result = None

    # -------------------------
    # Views
    # -------------------------
    @property
    def must_stand(self) -> bool:
        """A blackjack or bust round whose automatic stand did not finish."""
        return self.in_progress and (self.player.has_blackjack or self.player.is_bust)

    @property
    def outcome_text(self) -> str:
        """Label of the last finished round, empty while there is none."""
        return self.last_result.label if self.last_result is not None else ""

    def player_view(self) -> List[CardView]:
        return [CardView(c) for c in self.player.cards]

    def dealer_view(self) -> List[CardView]:
        """The dealer's second card stays face down until the player stands."""
        views = [CardView(c) for c in self.dealer.cards]
        if self.in_progress and len(views) > 1:
            views[1] = CardView.face_down()
        return views

    def visible_dealer_score(self) -> Optional[int]:
        if self.in_progress or not self.dealer.cards:
            return None
        return self.dealer.score_total

    # -------------------------
    # Internals
    # -------------------------
    def _deal_to(self, hand: Hand, note: str) -> None:
        c = self._draw()
        hand.draw(c)
        log_draw(log, hand.owner, c, hand.score_total, note=note)

    def _require_in_progress(self, action: str) -> None:
        if not self.in_progress:
            log.warning(f"GameStateError: {action} with no round in progress")
            raise GameStateError(f"Cannot {action}: no round in progress")
