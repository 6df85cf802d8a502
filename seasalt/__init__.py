"""Turn scoring engine for Sea Salt & Paper."""

__all__ = [
    "cards",
    "colors",
    "pairs",
    "evaluators",
    "scoring",
    "rules_schema",
    "normalize",
    "reader",
    "service",
]
