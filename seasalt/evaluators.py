"""Per-card-type point and effect rules."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Sequence, Tuple

from .cards import Card, CardName, count_named, total_named
from .colors import rank_colors, tally_colors
from .pairs import SharedPairCache
from .rules_schema import DEFAULT_RULES, CollectorRule, MermaidRule, MultiplierRule, PairRule, ScoringRules


class CatalogError(RuntimeError):
    """Raised when the card catalog does not cover every card name."""


@dataclass(frozen=True)
class EvaluationResult:
    points: Fraction = Fraction(0)
    effects: Tuple[str, ...] = ()


Evaluator = Callable[[Sequence[Card], SharedPairCache], EvaluationResult]


@dataclass(frozen=True)
class CardTypeDescriptor:
    name: CardName
    family: str
    evaluate: Evaluator


def duo_evaluator(name: CardName, effect: str) -> Evaluator:
    """Pairs score one point each; a pair still in hand unlocks the card's action."""

    def evaluate(cards: Sequence[Card], pairs: SharedPairCache) -> EvaluationResult:
        counts = count_named(cards, name)
        effects = (effect,) if counts.hand // 2 >= 1 else ()
        return EvaluationResult(points=Fraction(counts.total // 2), effects=effects)

    return evaluate


def pair_half_evaluator(rule: PairRule) -> Evaluator:
    """One half of the shark/swimmer pair.

    Both halves report half a point per completed pair, so the two together
    add up to one point per pair. The steal action is reported by both and
    collapses to a single copy when effects are merged.
    """

    def evaluate(cards: Sequence[Card], pairs: SharedPairCache) -> EvaluationResult:
        counts = pairs.get(cards)
        effects = (rule.effect,) if counts.pair_in_hand else ()
        return EvaluationResult(points=Fraction(counts.pairs, 2), effects=effects)

    return evaluate


def mermaid_evaluator(rule: MermaidRule) -> Evaluator:
    """
    Each mermaid scores one point per card of a color the player holds, most
    frequent color first. A color may only be claimed by one mermaid, and
    mermaids themselves never count toward a color.

    With 3 mermaids and [blue x4, yellow x2, light grey x1] the mermaids
    score 4, 2 and 1 for a total of 7.
    """

    def evaluate(cards: Sequence[Card], pairs: SharedPairCache) -> EvaluationResult:
        total = total_named(cards, CardName.MERMAID)
        effects = (rule.win_effect,) if total == rule.win_count else ()

        frequency = tally_colors(card for card in cards if card.name is not CardName.MERMAID)
        claimed = rank_colors(frequency)[:total]
        points = sum(frequency[color] for color in claimed)
        return EvaluationResult(points=Fraction(points), effects=effects)

    return evaluate


def collector_evaluator(name: CardName, rule: CollectorRule) -> Evaluator:
    def evaluate(cards: Sequence[Card], pairs: SharedPairCache) -> EvaluationResult:
        total = total_named(cards, name)
        if 1 <= total <= len(rule.scaling):
            return EvaluationResult(points=Fraction(rule.scaling[total - 1]))
        return EvaluationResult()

    return evaluate


def multiplier_evaluator(rule: MultiplierRule) -> Evaluator:
    """Points per copy of another card; the multiplier's own count plays no part."""
    target = CardName(rule.target)

    def evaluate(cards: Sequence[Card], pairs: SharedPairCache) -> EvaluationResult:
        return EvaluationResult(points=Fraction(total_named(cards, target) * rule.factor))

    return evaluate


def build_catalog(rules: ScoringRules = DEFAULT_RULES) -> Mapping[CardName, CardTypeDescriptor]:
    """Return a read-only mapping with exactly one descriptor per card name."""
    catalog: Dict[CardName, CardTypeDescriptor] = {}

    def register(name: CardName, family: str, evaluate: Evaluator) -> None:
        if name in catalog:
            raise CatalogError(f"Card {name.value!r} is configured as both {catalog[name].family} and {family}.")
        catalog[name] = CardTypeDescriptor(name=name, family=family, evaluate=evaluate)

    for raw_name, duo in rules.duos.items():
        name = CardName(raw_name)
        register(name, "duo", duo_evaluator(name, duo.effect))

    register(CardName.SHARK, "pair", pair_half_evaluator(rules.pair))
    register(CardName.SWIMMER, "pair", pair_half_evaluator(rules.pair))
    register(CardName.MERMAID, "mermaid", mermaid_evaluator(rules.mermaid))

    for raw_name, collector in rules.collectors.items():
        name = CardName(raw_name)
        register(name, "collector", collector_evaluator(name, collector))

    for raw_name, multiplier in rules.multipliers.items():
        register(CardName(raw_name), "multiplier", multiplier_evaluator(multiplier))

    missing = [name.value for name in CardName if name not in catalog]
    if missing:
        raise CatalogError(f"No scoring rule for: {', '.join(missing)}")

    return MappingProxyType(catalog)


CATALOG = build_catalog()
