import pytest

from seasalt.cards import CARD_NAMES, Card, CardName, CardState, Color
from seasalt.normalize import closest_match, normalize_card, normalize_color, normalize_name


def test_exact_match():
    assert closest_match("crab", CARD_NAMES) == ("crab", 0)


def test_misspelling_resolves():
    assert normalize_name("carb") is CardName.CRAB
    assert normalize_name("  Shoal Of Fsh ") is CardName.SHOAL_OF_FISH
    assert normalize_color("yelow") is Color.YELLOW
    assert normalize_color("LIGHT GREY") is Color.LIGHT_GREY


def test_tie_goes_to_first_option():
    assert closest_match("ab", ["ac", "ad"]) == ("ac", 1)
    assert closest_match("ab", ["ad", "ac"]) == ("ad", 1)


def test_empty_options_rejected():
    with pytest.raises(ValueError):
        closest_match("crab", [])


def test_normalize_card():
    card = normalize_card("mermiad", "whte", CardState.PLAYED)

    assert card == Card(CardName.MERMAID, Color.WHITE, CardState.PLAYED)
