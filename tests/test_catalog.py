import pytest

from seasalt.cards import CardName
from seasalt.evaluators import CATALOG, CatalogError, build_catalog
from seasalt.rules_schema import CollectorRule, DuoRule, ScoringRules


def test_catalog_covers_every_card():
    assert set(CATALOG) == set(CardName)
    assert len(CATALOG) == 14


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATALOG[CardName.CRAB] = CATALOG[CardName.BOAT]


def test_catalog_families():
    assert CATALOG[CardName.FISH].family == "duo"
    assert CATALOG[CardName.SWIMMER].family == "pair"
    assert CATALOG[CardName.MERMAID].family == "mermaid"
    assert CATALOG[CardName.SAILOR].family == "collector"
    assert CATALOG[CardName.LIGHTHOUSE].family == "multiplier"


def test_missing_rule_is_fatal():
    rules = ScoringRules(collectors={"shell": CollectorRule(scaling=[0, 2])})

    with pytest.raises(CatalogError, match="octopus"):
        build_catalog(rules)


def test_card_in_two_families_is_fatal():
    duos = {"crab": DuoRule(effect="a"), "boat": DuoRule(effect="b"), "fish": DuoRule(effect="c"), "shell": DuoRule(effect="d")}

    with pytest.raises(CatalogError):
        build_catalog(ScoringRules(duos=duos))
