"""Validation schema for Sea Salt & Paper scoring tables."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError, validator

from .cards import CARD_NAMES


class RulesError(ValueError):
    """Raised when a rules file cannot be read or fails validation."""


def _validate_card_name(value: str) -> str:
    normalized = value.lower()
    if normalized not in CARD_NAMES:
        raise ValueError(f"Unknown card name: {value!r}")
    return normalized


def _validate_card_keys(value: dict) -> dict:
    return {_validate_card_name(name): rule for name, rule in value.items()}


class DuoRule(BaseModel):
    effect: str = Field(..., description="Advisory text shown while a pair of this card sits in hand.")


class CollectorRule(BaseModel):
    scaling: list[int] = Field(..., description="Points by number of copies held, starting at one copy.")

    @validator("scaling")
    def validate_scaling(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("Collector scaling table must not be empty.")
        if any(points < 0 for points in value):
            raise ValueError("Collector scaling table has negative points.")
        return value


class MultiplierRule(BaseModel):
    target: str = Field(..., description="Card name whose copies are counted.")
    factor: int = Field(..., ge=0, description="Points per copy of the target card.")

    @validator("target")
    def validate_target(cls, value: str) -> str:
        return _validate_card_name(value)


class PairRule(BaseModel):
    effect: str = Field(
        "[If they play a pair of shark, swimmer cards] The player steals a random card from another player "
        "and adds it to their hand.",
        description="Advisory text shown while both a shark and a swimmer sit in hand.",
    )


MERMAID_WIN_EFFECT = "If they place 4 mermaid cards, the player immediately wins the game"

ROUND_END_EFFECT = (
    "If the player has reached 7 points or more by counting the points on their cards, both in their hand "
    "and in front of them (see Card Details), they can decide to end the round"
)


class MermaidRule(BaseModel):
    win_count: int = Field(4, gt=0, description="Number of mermaids that wins the game outright.")
    win_effect: str = Field(
        MERMAID_WIN_EFFECT,
        description="Advisory text for the outright win. Must be replaced when win_count changes.",
    )

    @validator("win_effect", always=True)
    def check_win_effect(cls, value: str, values: dict) -> str:
        count = values.get("win_count")
        if count is not None and count != 4 and value == MERMAID_WIN_EFFECT:
            raise ValueError(f"win_effect still describes 4 mermaids but win_count is {count}.")
        return value


class RoundEndRule(BaseModel):
    points: int = Field(7, gt=0, description="Points at which the player may end the round.")
    effect: str = Field(
        ROUND_END_EFFECT,
        description="Advisory text for ending the round. Must be replaced when points changes.",
    )

    @validator("effect", always=True)
    def check_effect(cls, value: str, values: dict) -> str:
        points = values.get("points")
        if points is not None and points != 7 and value == ROUND_END_EFFECT:
            raise ValueError(f"effect still describes 7 points but points is {points}.")
        return value


def _default_duos() -> dict[str, DuoRule]:
    return {
        "crab": DuoRule(
            effect=(
                "[If they play 2 crab cards] The player chooses a discard pile, consults it without shuffling it, "
                "and chooses a card from it to add to their hand. They do not have to show it to the other players"
            )
        ),
        "boat": DuoRule(effect="[If they play 2 boat cards] The player immediately takes another turn"),
        "fish": DuoRule(effect="[If they play 2 fish cards] The player adds the top card from the deck to their hand."),
    }


def _default_collectors() -> dict[str, CollectorRule]:
    return {
        "shell": CollectorRule(scaling=[0, 2, 4, 6, 8, 10]),
        "octopus": CollectorRule(scaling=[0, 3, 6, 9, 12]),
        "penguin": CollectorRule(scaling=[1, 3, 5]),
        "sailor": CollectorRule(scaling=[0, 5]),
    }


def _default_multipliers() -> dict[str, MultiplierRule]:
    return {
        "lighthouse": MultiplierRule(target="boat", factor=1),
        "shoal of fish": MultiplierRule(target="fish", factor=1),
        "penguin colony": MultiplierRule(target="penguin", factor=2),
        "captain": MultiplierRule(target="sailor", factor=3),
    }


class ScoringRules(BaseModel):
    duos: dict[str, DuoRule] = Field(default_factory=_default_duos)
    pair: PairRule = Field(default_factory=PairRule)
    mermaid: MermaidRule = Field(default_factory=MermaidRule)
    collectors: dict[str, CollectorRule] = Field(default_factory=_default_collectors)
    multipliers: dict[str, MultiplierRule] = Field(default_factory=_default_multipliers)
    round_end: RoundEndRule = Field(default_factory=RoundEndRule)

    @validator("duos", "collectors", "multipliers")
    def validate_card_keys(cls, value: dict) -> dict:
        return _validate_card_keys(value)

    @validator("multipliers")
    def validate_multiplier_targets(cls, value: dict[str, MultiplierRule]) -> dict[str, MultiplierRule]:
        for name, rule in value.items():
            if rule.target == name:
                raise ValueError(f"Multiplier {name!r} cannot count its own copies.")
        return value


DEFAULT_RULES = ScoringRules()


def load_rules(path: Union[str, Path]) -> ScoringRules:
    """Read a JSON rules file, raising RulesError for anything unusable."""
    rules_path = Path(path)
    try:
        payload = json.loads(rules_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RulesError(f"Rules file not found: {rules_path}") from exc
    except OSError as exc:
        raise RulesError(f"Cannot read rules file {rules_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RulesError(f"Rules file {rules_path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RulesError(f"Rules file {rules_path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise RulesError(f"Rules file {rules_path} must contain a JSON object.")
    try:
        return ScoringRules(**payload)
    except ValidationError as exc:
        raise RulesError(f"Invalid rules in {rules_path}: {exc}") from exc
