from seasalt.cards import Card, CardName, CardState, Color
from seasalt.colors import rank_colors, tally_colors


def test_tally_omits_missing_colors():
    cards = [
        Card(CardName.CRAB, Color.BLACK),
        Card(CardName.FISH, Color.BLACK, CardState.PLAYED),
        Card(CardName.MERMAID, Color.WHITE),
    ]

    frequency = tally_colors(cards)

    assert frequency == {Color.BLACK: 2, Color.WHITE: 1}
    assert Color.ORANGE not in frequency


def test_tally_of_nothing_is_empty():
    assert tally_colors([]) == {}


def test_rank_by_count_then_color_order():
    frequency = {Color.ORANGE: 2, Color.YELLOW: 2, Color.PURPLE: 5, Color.DARK_BLUE: 1}

    assert rank_colors(frequency) == [Color.PURPLE, Color.YELLOW, Color.ORANGE, Color.DARK_BLUE]
