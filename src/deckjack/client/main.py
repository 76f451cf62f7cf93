# src/deckjack/client/main.py

import time
from typing import Callable, Optional

import requests

from deckjack.common.cards import Card, Deck
from deckjack.common.constants import DECK_COUNT, DECK_SUPPLIER, RESET_ROUND_SEC
from deckjack.common.logging_utils import setup_logging, get_logger
from deckjack.client.deck_api import DeckApiClient, DeckApiError
from deckjack.client.ui import (
    DEAL, HIT, STAND, QUIT,
    ask_decision, render_result, render_table, render_win_percentage, welcome_script,
)
from deckjack.game.table import RoundResult, Table

log = get_logger("client.main")


def build_supplier(kind: str = DECK_SUPPLIER) -> Callable[[], Card]:
    if kind == "local":
        log.info(f"Using local shoe ({DECK_COUNT} decks)")
        return Deck(DECK_COUNT)
    log.info("Using deckofcardsapi.com")
    return DeckApiClient()


def _finish_round(table: Table, result: RoundResult) -> None:
    print(render_table(table))
    print(render_result(result))
    pct = render_win_percentage(result.tally.win_percentage)
    if pct:
        print(pct)
    # leave the cards on the table for a moment, then clear
    time.sleep(RESET_ROUND_SEC)
    table.reset_round()


def play(table: Table) -> None:
    while True:
        decision = ask_decision(table.in_progress, table.must_stand)
        if decision == QUIT:
            return

        result: Optional[RoundResult] = None
        try:
            if decision == DEAL:
                result = table.deal()
            elif decision == HIT:
                result = table.hit()
            elif decision == STAND:
                result = table.stand()
        except (requests.RequestException, DeckApiError) as e:
            log.warning(f"Supplier failed during {decision}: {e}")
            print("Could not draw a card, try again.")
            if not table.in_progress:
                table.reset_round()
            continue

        if result is not None:
            _finish_round(table, result)
        else:
            print(render_table(table))


def main() -> None:
    setup_logging()
    print(welcome_script())

    supplier = build_supplier()
    table = Table(supplier)
    try:
        play(table)
    except (KeyboardInterrupt, EOFError):
        log.info("Shutting down...")
    finally:
        if isinstance(supplier, DeckApiClient):
            supplier.close()

    s = table.stats
    log.info(f"===== SESSION OVER =====  rounds={s.round_count} W={s.win_count} L={s.loss_count} T={s.push_count}")


if __name__ == "__main__":
    main()
