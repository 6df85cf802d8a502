"""Color frequency helpers."""

from __future__ import annotations

from typing import Iterable, List, Mapping

from .cards import COLOR_INDEX, Card, Color


def tally_colors(cards: Iterable[Card]) -> dict[Color, int]:
    """Count cards per color; colors that never appear are left out."""
    frequency: dict[Color, int] = {}
    for card in cards:
        frequency[card.color] = frequency.get(card.color, 0) + 1
    return frequency


def rank_colors(frequency: Mapping[Color, int]) -> List[Color]:
    """Most frequent color first; equal counts fall back to canonical color order."""
    return sorted(frequency, key=lambda color: (-frequency[color], COLOR_INDEX[color]))
