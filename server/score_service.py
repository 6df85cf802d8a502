"""REST service that scores a Sea Salt & Paper hand."""

from __future__ import annotations

import os
from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from seasalt.cards import CARD_NAMES, COLORS
from seasalt.reader import CardFileError
from seasalt.rules_schema import RulesError, load_rules
from seasalt.service import ScoringService


class CardPayload(BaseModel):
    name: str
    color: str


class ScoreRequest(BaseModel):
    hand: List[CardPayload] = []
    played: List[CardPayload] = []


def build_service() -> ScoringService:
    rules_path = os.environ.get("SEASALT_RULES")
    if not rules_path:
        return ScoringService()
    return ScoringService(rules=load_rules(rules_path))


service = build_service()


app = FastAPI(title="Sea Salt & Paper Score Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def rows(cards: List[CardPayload]) -> List[tuple]:
    return [(card.name, card.color) for card in cards]


@app.get("/catalog")
def catalog() -> Dict[str, object]:
    return {"cards": list(CARD_NAMES), "colors": list(COLORS)}


@app.post("/score")
def score_turn(request: ScoreRequest) -> Dict[str, object]:
    try:
        view = service.score_tokens(rows(request.hand), rows(request.played))
    except (CardFileError, RulesError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return view.as_dict()
