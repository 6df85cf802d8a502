import pytest

from seasalt.cards import Card, CardName, CardState, Color
from seasalt.reader import CardFileError, read_cards, read_turn


def test_read_cards_skips_blank_lines(tmp_path):
    path = tmp_path / "hand.csv"
    path.write_text("crab, dark blue\n\ncarb,Light Blue\n  \nmermaid, white\n")

    cards = read_cards(path, CardState.HAND)

    assert cards == [
        Card(CardName.CRAB, Color.DARK_BLUE, CardState.HAND),
        Card(CardName.CRAB, Color.LIGHT_BLUE, CardState.HAND),
        Card(CardName.MERMAID, Color.WHITE, CardState.HAND),
    ]


def test_read_turn_tags_states(tmp_path):
    hand = tmp_path / "hand.csv"
    played = tmp_path / "played.csv"
    hand.write_text("shark, black\n")
    played.write_text("swimmer, yellow\n")

    hand_cards, played_cards = read_turn(hand, played)

    assert hand_cards[0].state is CardState.HAND
    assert played_cards[0].state is CardState.PLAYED


def test_empty_file(tmp_path):
    path = tmp_path / "played.csv"
    path.write_text("")

    assert read_cards(path, CardState.PLAYED) == []


def test_missing_color(tmp_path):
    path = tmp_path / "hand.csv"
    path.write_text("crab, black\nboat\n")

    with pytest.raises(CardFileError, match=":2:"):
        read_cards(path, CardState.HAND)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_cards(tmp_path / "nope.csv", CardState.HAND)
