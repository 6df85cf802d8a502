"""Card file parsing.

A card file holds one card per line as ``name, color``::

    crab, dark blue
    carb, light blu
    mermaid, white

Blank lines are ignored. Names and colors are normalized, so small typos are
tolerated.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from .cards import Card, CardState
from .normalize import normalize_card


class CardFileError(ValueError):
    """Raised when a card file line cannot be split into a name and a color."""


def parse_rows(rows: Iterable[Sequence[str]], state: CardState, *, source: str = "<input>") -> List[Card]:
    cards: List[Card] = []
    for line_num, row in enumerate(rows, 1):
        fields = [field.strip() for field in row]
        if not any(fields):
            continue
        if len(fields) < 2 or not fields[0] or not fields[1]:
            raise CardFileError(f"{source}:{line_num}: expected 'name, color', got {','.join(row)!r}")
        cards.append(normalize_card(fields[0], fields[1], state))
    return cards


def read_cards(path: Union[str, Path], state: CardState) -> List[Card]:
    """Read every card in ``path`` and tag it with ``state``."""
    card_path = Path(path)
    if not card_path.exists():
        raise FileNotFoundError(f"Card file not found: {card_path}")
    with card_path.open("r", encoding="utf-8", newline="") as handle:
        return parse_rows(csv.reader(handle), state, source=str(card_path))


def read_turn(hand_path: Union[str, Path], played_path: Union[str, Path]) -> Tuple[List[Card], List[Card]]:
    return read_cards(hand_path, CardState.HAND), read_cards(played_path, CardState.PLAYED)
