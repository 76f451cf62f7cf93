import random

import pytest

from deckjack.common.cards import *
from deckjack.common.hand import Hand


def test_card_rejects_dummy_rank_and_empty_suit():
    with pytest.raises(InvalidCardError):
        Card("dummy", "")
    with pytest.raises(InvalidCardError):
        Card(1, "")
    with pytest.raises(InvalidCardError):
        Card(0, "H")
    with pytest.raises(InvalidCardError):
        Card(True, "H")


def test_parse_rank_accepts_api_words_letters_and_digits():
    assert parse_rank("ACE") == 1
    assert parse_rank("KING") == 13
    assert parse_rank("queen") == 12
    assert parse_rank("J") == 11
    assert parse_rank("T") == 10
    assert parse_rank("10") == 10
    assert parse_rank(7) == 7


def test_parse_rank_rejects_dummy():
    with pytest.raises(InvalidCardError):
        parse_rank("dummy")
    with pytest.raises(InvalidCardError):
        parse_rank("1")


def test_parse_suit():
    assert parse_suit("HEARTS") == "H"
    assert parse_suit("spades") == "S"
    with pytest.raises(InvalidCardError):
        parse_suit("")


def test_card_from_api():
    c = Card.from_api({
        "code": "KH",
        "image": "https://deckofcardsapi.com/static/img/KH.png",
        "value": "KING",
        "suit": "HEARTS",
    })
    assert c.rank == 13
    assert c.suit == "H"
    assert c.image.endswith("KH.png")
    assert str(c) == "KH"


def test_image_is_not_part_of_card_identity():
    assert Card(1, "S", image="a.png") == Card(1, "S", image="b.png")


def test_card_is_immutable():
    c = Card(5, "D")
    with pytest.raises(AttributeError):
        c.rank = 6


def test_card_view_hidden():
    v = CardView.face_down()
    assert v.hidden
    assert v.card is None
    assert str(v) == "??"
    assert str(CardView(Card(12, "C"))) == "QC"


def test_hand_rejects_card_view():
    hand = Hand()
    with pytest.raises(InvalidCardError):
        hand.draw(CardView.face_down())
    with pytest.raises(InvalidCardError):
        hand.draw({"rank": "dummy", "suit": ""})
    assert len(hand) == 0


def test_deck_holds_full_shoe_and_reshuffles_when_empty():
    deck = Deck(deck_count=2, rng=random.Random(7))
    assert deck.remaining == 104
    drawn = [deck.draw() for _ in range(104)]
    assert deck.remaining == 0
    assert len(set((c.rank, c.suit) for c in drawn)) == 52
    deck.draw()
    assert deck.remaining == 103


def test_deck_is_deterministic_with_seed():
    a = Deck(rng=random.Random(42))
    b = Deck(rng=random.Random(42))
    assert [a.draw() for _ in range(10)] == [b.draw() for _ in range(10)]


def test_deck_needs_at_least_one_deck():
    with pytest.raises(ValueError):
        Deck(deck_count=0)
