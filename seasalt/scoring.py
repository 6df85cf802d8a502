"""Turn scoring for Sea Salt & Paper."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Callable, FrozenSet, Mapping, Optional, Sequence, Set, Tuple

from .cards import Card, CardName, CardState, Color
from .colors import tally_colors
from .evaluators import CATALOG, CardTypeDescriptor, build_catalog
from .pairs import SharedPairCache
from .rules_schema import DEFAULT_RULES, ScoringRules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardEvaluation:
    name: CardName
    points: Fraction
    effects: Tuple[str, ...]

    def as_dict(self) -> dict:
        return {"name": self.name.value, "points": float(self.points), "effects": list(self.effects)}


@dataclass(frozen=True)
class TurnSummary:
    points: Fraction
    effects: FrozenSet[str]
    color_frequency: dict[Color, int]
    evaluations: Tuple[CardEvaluation, ...] = ()


def score(
    hand: Sequence[Card],
    played: Sequence[Card],
    *,
    rules: Optional[ScoringRules] = None,
    catalog: Optional[Mapping[CardName, CardTypeDescriptor]] = None,
    on_evaluation: Optional[Callable[[CardEvaluation], None]] = None,
) -> TurnSummary:
    """Score the cards a player holds and has laid down.

    Every card name present is evaluated once, against the full list of
    cards. Points are summed exactly (shark/swimmer halves included), effects
    are merged without duplicates and the round-end option is added once the
    total reaches the configured threshold.
    """
    rules = rules or DEFAULT_RULES
    if catalog is None:
        catalog = CATALOG if rules is DEFAULT_RULES else build_catalog(rules)

    # the list a card arrives in decides where it sits
    cards = [replace(card, state=CardState.HAND) for card in hand]
    cards += [replace(card, state=CardState.PLAYED) for card in played]
    pairs = SharedPairCache()

    visited: Set[CardName] = set()
    evaluations: list[CardEvaluation] = []
    for card in cards:
        if card.name in visited:
            continue
        visited.add(card.name)
        result = catalog[card.name].evaluate(cards, pairs)
        evaluation = CardEvaluation(name=card.name, points=result.points, effects=result.effects)
        logger.debug("evaluated %s: %s points, effects=%s", card.name.value, result.points, list(result.effects))
        if on_evaluation is not None:
            on_evaluation(evaluation)
        evaluations.append(evaluation)

    points = sum((evaluation.points for evaluation in evaluations), Fraction(0))
    effects: Set[str] = set()
    for evaluation in evaluations:
        effects.update(evaluation.effects)

    if points >= rules.round_end.points:
        effects.add(rules.round_end.effect)

    return TurnSummary(
        points=points,
        effects=frozenset(effects),
        color_frequency=tally_colors(cards),
        evaluations=tuple(evaluations),
    )
