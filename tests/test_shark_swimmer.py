import pytest

from seasalt.cards import Card, CardName, CardState, Color
from seasalt.evaluators import CATALOG
from seasalt.pairs import SharedPairCache
from seasalt.rules_schema import DEFAULT_RULES

STEAL = DEFAULT_RULES.pair.effect


def build(shark_hand=0, shark_played=0, swimmer_hand=0, swimmer_played=0):
    return (
        [Card(CardName.SHARK, Color.BLACK, CardState.HAND)] * shark_hand
        + [Card(CardName.SHARK, Color.BLACK, CardState.PLAYED)] * shark_played
        + [Card(CardName.SWIMMER, Color.LIGHT_BLUE, CardState.HAND)] * swimmer_hand
        + [Card(CardName.SWIMMER, Color.LIGHT_BLUE, CardState.PLAYED)] * swimmer_played
    )


@pytest.mark.parametrize(
    "counts",
    [(0, 0, 1, 0), (1, 0, 1, 0), (1, 1, 0, 1), (2, 1, 1, 0), (0, 3, 2, 2), (1, 0, 0, 0)],
)
def test_halves_sum_to_completed_pairs(counts):
    cards = build(*counts)
    pairs = SharedPairCache()
    shark = CATALOG[CardName.SHARK].evaluate(cards, pairs)
    swimmer = CATALOG[CardName.SWIMMER].evaluate(cards, pairs)

    expected = min(counts[0] + counts[1], counts[2] + counts[3])
    assert shark.points + swimmer.points == expected
    assert (shark.points + swimmer.points).denominator == 1
    assert shark.points == swimmer.points


def test_single_pair_gives_half_point_each():
    cards = build(shark_hand=1, swimmer_played=1)
    pairs = SharedPairCache()

    assert CATALOG[CardName.SHARK].evaluate(cards, pairs).points * 2 == 1


def test_steal_effect_needs_both_in_hand():
    pairs = SharedPairCache()
    cards = build(shark_hand=1, swimmer_hand=1)

    assert CATALOG[CardName.SHARK].evaluate(cards, pairs).effects == (STEAL,)
    assert CATALOG[CardName.SWIMMER].evaluate(cards, pairs).effects == (STEAL,)


def test_no_steal_effect_when_half_is_played():
    cards = build(shark_hand=1, swimmer_played=1)

    assert CATALOG[CardName.SHARK].evaluate(cards, SharedPairCache()).effects == ()


def test_cache_scans_once_per_pass():
    pairs = SharedPairCache()
    first = pairs.get(build(shark_hand=2, swimmer_hand=1))
    second = pairs.get(build())

    assert second is first
    assert first.pairs == 1


def test_fresh_cache_sees_new_cards():
    first = SharedPairCache().get(build(shark_hand=2, swimmer_hand=1))
    second = SharedPairCache().get(build(shark_played=1))

    assert first.pairs == 1
    assert second.pairs == 0
    assert not second.pair_in_hand
