# src/deckjack/client/deck_api.py

from typing import Any, Dict, Optional

import requests

from deckjack.common.cards import Card
from deckjack.common.constants import DECK_API_URL, DECK_COUNT, HTTP_TIMEOUT_SEC
from deckjack.common.logging_utils import get_logger

log = get_logger("client.deck_api")


class DeckApiError(RuntimeError):
    """The deck service answered, but not with a usable result."""
    pass


class DeckApiClient:
    """
    Card supplier backed by deckofcardsapi.com.

    One shoe of `deck_count` decks is created lazily on the first draw and
    reshuffled in place when it runs out. No retries: HTTP errors and
    DeckApiError go straight to the caller.
    """

    def __init__(
        self,
        base_url: str = DECK_API_URL,
        deck_count: int = DECK_COUNT,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT_SEC,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.deck_count = deck_count
        self.timeout = timeout
        self._session = session or requests.Session()
        self.deck_id: Optional[str] = None
        self.remaining = 0

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        r = self._session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        data = r.json()
        if not data.get("success", False):
            msg = data.get("error") or "request was not successful"
            log.warning(f"Deck API error on {path}: {msg}")
            raise DeckApiError(f"Deck API error on {path}: {msg}")
        if "remaining" in data:
            self.remaining = int(data["remaining"])
        return data

    def create(self) -> str:
        """New shuffled shoe. Returns the deck id."""
        data = self._get("/deck/new/shuffle/", params={"deck_count": self.deck_count})
        self.deck_id = data["deck_id"]
        log.info(f"Created deck {self.deck_id} ({self.deck_count} decks, {self.remaining} cards)")
        return self.deck_id

    def shuffle(self) -> None:
        if self.deck_id is None:
            self.create()
            return
        self._get(f"/deck/{self.deck_id}/shuffle/")
        log.info(f"Reshuffled deck {self.deck_id} ({self.remaining} cards)")

    def draw(self) -> Card:
        if self.deck_id is None:
            self.create()
        elif self.remaining <= 0:
            self.shuffle()

        data = self._get(f"/deck/{self.deck_id}/draw/", params={"count": 1})
        cards = data.get("cards") or []
        if not cards:
            raise DeckApiError(f"Deck {self.deck_id} returned no cards")
        card = Card.from_api(cards[0])
        log.debug(f"Drew {card} from {self.deck_id}, remaining={self.remaining}")
        return card

    __call__ = draw

    def close(self) -> None:
        self._session.close()
