"""Resolve loosely typed card and color tokens to their canonical values.

Players like to write "carb" for crab or "yelow" for yellow, so every token
is matched to the closest canonical value by Levenshtein distance.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from .cards import CARD_NAMES, COLORS, Card, CardName, CardState, Color

logger = logging.getLogger(__name__)


def closest_match(candidate: str, options: Sequence[str]) -> Tuple[str, int]:
    """Return (option, distance) for the nearest option.

    Only a strictly smaller distance replaces the current best, so ties go to
    whichever option comes first.
    """
    if not options:
        raise ValueError("options may not be empty")

    best = options[0]
    best_distance = Levenshtein.distance(candidate, best)
    for option in options[1:]:
        distance = Levenshtein.distance(candidate, option)
        if distance < best_distance:
            best, best_distance = option, distance
    return best, best_distance


def _clean(token: str) -> str:
    return token.strip().lower()


def normalize_name(token: str) -> CardName:
    cleaned = _clean(token)
    value, distance = closest_match(cleaned, CARD_NAMES)
    if distance:
        logger.debug("card name %r read as %r", token, value)
    return CardName(value)


def normalize_color(token: str) -> Color:
    cleaned = _clean(token)
    value, distance = closest_match(cleaned, COLORS)
    if distance:
        logger.debug("color %r read as %r", token, value)
    return Color(value)


def normalize_card(name_token: str, color_token: str, state: CardState) -> Card:
    return Card(normalize_name(name_token), normalize_color(color_token), state)
