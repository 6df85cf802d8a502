"""Convenience service layer for the CLI, UI and HTTP server."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from .cards import COLOR_INDEX, Card, CardState, card_label
from .evaluators import build_catalog
from .reader import parse_rows, read_turn
from .rules_schema import DEFAULT_RULES, ScoringRules
from .scoring import CardEvaluation, TurnSummary, score


@dataclass
class EvaluationView:
    name: str
    points: float
    effects: list[str]


@dataclass
class TurnView:
    points: float
    is_whole: bool
    effects: list[str]
    color_frequency: dict[str, int]
    breakdown: list[EvaluationView]
    hand: list[str]
    played: list[str]

    def as_dict(self) -> dict:
        return asdict(self)


def build_turn_view(summary: TurnSummary, hand: Sequence[Card], played: Sequence[Card]) -> TurnView:
    ordered_colors = sorted(summary.color_frequency, key=COLOR_INDEX.__getitem__)
    return TurnView(
        points=float(summary.points),
        is_whole=summary.points.denominator == 1,
        effects=sorted(summary.effects),
        color_frequency={color.value: summary.color_frequency[color] for color in ordered_colors},
        breakdown=[
            EvaluationView(name=item.name.value, points=float(item.points), effects=list(item.effects))
            for item in summary.evaluations
        ],
        hand=[card_label(card) for card in hand],
        played=[card_label(card) for card in played],
    )


class ScoringService:
    """Facade around the scoring engine for UI consumers."""

    def __init__(
        self,
        rules: Optional[ScoringRules] = None,
        on_evaluation: Optional[Callable[[CardEvaluation], None]] = None,
    ) -> None:
        self.rules = rules or DEFAULT_RULES
        self.catalog = build_catalog(self.rules)
        self.on_evaluation = on_evaluation

    def score_cards(self, hand: Sequence[Card], played: Sequence[Card]) -> TurnView:
        summary = score(hand, played, rules=self.rules, catalog=self.catalog, on_evaluation=self.on_evaluation)
        return build_turn_view(summary, hand, played)

    def score_tokens(
        self,
        hand_rows: Sequence[Tuple[str, str]],
        played_rows: Sequence[Tuple[str, str]],
    ) -> TurnView:
        hand = parse_rows(hand_rows, CardState.HAND, source="hand")
        played = parse_rows(played_rows, CardState.PLAYED, source="played")
        return self.score_cards(hand, played)

    def score_files(self, hand_path: Union[str, Path], played_path: Union[str, Path]) -> TurnView:
        hand, played = read_turn(hand_path, played_path)
        return self.score_cards(hand, played)
