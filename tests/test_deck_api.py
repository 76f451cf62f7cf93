import pytest
import requests

from deckjack.client.deck_api import DeckApiClient, DeckApiError


class FakeResponse:
    def __init__(self, data, status=200):
        self._data = data
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._data


class FakeSession:
    """Answers GETs from a queue and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        return self.responses.pop(0)

    def close(self):
        self.closed = True


API = "https://deck.example/api"


def new_deck(remaining=312):
    return FakeResponse({"success": True, "deck_id": "abc123", "shuffled": True, "remaining": remaining})


def drawn(value, suit, remaining):
    return FakeResponse({
        "success": True,
        "deck_id": "abc123",
        "cards": [{
            "code": "XX",
            "image": f"https://deck.example/static/img/{value}{suit}.png",
            "value": value,
            "suit": suit,
        }],
        "remaining": remaining,
    })


def test_first_draw_creates_shuffled_shoe():
    session = FakeSession(new_deck(), drawn("KING", "HEARTS", 311))
    client = DeckApiClient(base_url=API + "/", deck_count=6, session=session, timeout=3)

    card = client.draw()

    assert (card.rank, card.suit) == (13, "H")
    assert card.image.endswith("KINGHEARTS.png")
    assert client.deck_id == "abc123"
    assert client.remaining == 311
    assert session.calls[0] == (f"{API}/deck/new/shuffle/", {"deck_count": 6}, 3)
    assert session.calls[1] == (f"{API}/deck/abc123/draw/", {"count": 1}, 3)


def test_draws_reuse_the_same_deck():
    session = FakeSession(new_deck(), drawn("ACE", "SPADES", 311), drawn("10", "CLUBS", 310))
    client = DeckApiClient(base_url=API, session=session)
    first = client.draw()
    second = client.draw()
    assert (first.rank, second.rank) == (1, 10)
    assert len(session.calls) == 3


def test_empty_shoe_is_reshuffled():
    session = FakeSession(
        new_deck(remaining=1),
        drawn("5", "DIAMONDS", 0),
        FakeResponse({"success": True, "deck_id": "abc123", "shuffled": True, "remaining": 52}),
        drawn("7", "HEARTS", 51),
    )
    client = DeckApiClient(base_url=API, deck_count=1, session=session)
    client.draw()
    assert client.remaining == 0
    card = client.draw()
    assert card.rank == 7
    assert session.calls[2][0] == f"{API}/deck/abc123/shuffle/"
    assert client.remaining == 51


def test_unsuccessful_response_raises():
    session = FakeSession(FakeResponse({"success": False, "error": "Deck ID does not exist."}))
    client = DeckApiClient(base_url=API, session=session)
    with pytest.raises(DeckApiError):
        client.draw()


def test_http_error_propagates():
    session = FakeSession(new_deck(), FakeResponse({}, status=500))
    client = DeckApiClient(base_url=API, session=session)
    with pytest.raises(requests.HTTPError):
        client.draw()


def test_empty_draw_raises():
    session = FakeSession(new_deck(), FakeResponse({"success": True, "deck_id": "abc123", "cards": [], "remaining": 0}))
    client = DeckApiClient(base_url=API, session=session)
    with pytest.raises(DeckApiError):
        client.draw()


def test_close_closes_session():
    session = FakeSession()
    DeckApiClient(base_url=API, session=session).close()
    assert session.closed
