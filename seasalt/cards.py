"""Card-related data structures and helpers for Sea Salt & Paper."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class CardName(Enum):
    CRAB = "crab"
    BOAT = "boat"
    FISH = "fish"
    SWIMMER = "swimmer"
    SHARK = "shark"
    MERMAID = "mermaid"
    SHELL = "shell"
    OCTOPUS = "octopus"
    PENGUIN = "penguin"
    SAILOR = "sailor"
    LIGHTHOUSE = "lighthouse"
    SHOAL_OF_FISH = "shoal of fish"
    PENGUIN_COLONY = "penguin colony"
    CAPTAIN = "captain"

    def __str__(self) -> str:
        return self.value


# Subset of the ColorADD spectrum printed on the cards. Declaration order is
# the canonical order used to break ties.
class Color(Enum):
    DARK_BLUE = "dark blue"
    LIGHT_BLUE = "light blue"
    BLACK = "black"
    YELLOW = "yellow"
    LIGHT_GREEN = "light green"
    WHITE = "white"
    PURPLE = "purple"
    LIGHT_GREY = "light grey"
    LIGHT_ORANGE = "light orange"
    LIGHT_PINK = "light pink"
    ORANGE = "orange"

    def __str__(self) -> str:
        return self.value


class CardState(Enum):
    HAND = "hand"
    PLAYED = "played"

    def __str__(self) -> str:
        return self.value


CARD_NAMES: Tuple[str, ...] = tuple(name.value for name in CardName)
COLORS: Tuple[str, ...] = tuple(color.value for color in Color)

COLOR_INDEX: dict[Color, int] = {color: index for index, color in enumerate(Color)}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a single card on the table or in hand."""

    name: CardName
    color: Color
    state: CardState = CardState.HAND


@dataclass(frozen=True)
class NameCount:
    hand: int = 0
    played: int = 0

    @property
    def total(self) -> int:
        return self.hand + self.played


def count_named(cards: Iterable[Card], name: CardName) -> NameCount:
    """Return how many cards of ``name`` sit in hand and in front of the player."""
    hand = 0
    played = 0
    for card in cards:
        if card.name is not name:
            continue
        if card.state is CardState.HAND:
            hand += 1
        else:
            played += 1
    return NameCount(hand=hand, played=played)


def total_named(cards: Iterable[Card], name: CardName) -> int:
    return sum(1 for card in cards if card.name is name)


def card_label(card: Card) -> str:
    return f"{card.color.value.title()} {card.name.value.title()}"
