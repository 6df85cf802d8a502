"""Shark/swimmer counts shared by both halves of the pair within one scoring pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .cards import Card, CardName, count_named


@dataclass(frozen=True)
class PairCounts:
    shark_hand: int
    shark_played: int
    swimmer_hand: int
    swimmer_played: int

    @property
    def pairs(self) -> int:
        """Completed pairs are limited by the scarcer of the two cards."""
        return min(self.shark_hand + self.shark_played, self.swimmer_hand + self.swimmer_played)

    @property
    def pair_in_hand(self) -> bool:
        return self.shark_hand >= 1 and self.swimmer_hand >= 1


class SharedPairCache:
    """Scan for sharks and swimmers once and hand the same counts to both evaluators.

    One instance belongs to exactly one scoring pass.
    """

    def __init__(self) -> None:
        self._counts: Optional[PairCounts] = None

    def get(self, cards: Sequence[Card]) -> PairCounts:
        if self._counts is None:
            shark = count_named(cards, CardName.SHARK)
            swimmer = count_named(cards, CardName.SWIMMER)
            self._counts = PairCounts(
                shark_hand=shark.hand,
                shark_played=shark.played,
                swimmer_hand=swimmer.hand,
                swimmer_played=swimmer.played,
            )
        return self._counts
