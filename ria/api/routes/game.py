"""Game Routes: answer submission, stored score, and score map.

Invariants:
    - Routes never contain game logic (delegate to services/handle_submit and core/)
    - Invalid submissions propagate as InvalidSubmissionError -> 400 INVALID_FORMAT
      via the global RiaError handler
    - Score store is built per request from the request's DB session
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ria.config import get_settings
from ria.core.scoring import format_score_map, score_map_entries
from ria.infrastructure.database import get_db
from ria.schemas.game import (
    GameStateResponse, ScoreMapResponse, ScoreResponse,
    SubmissionRequest, SubmissionResponse,
)
from ria.services.handle_submit import current_state, submit
from ria.services.preference_store import SqlPreferenceStore
from ria.services.score_store import ScoreStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/game", tags=["game"])


def get_score_store(db: AsyncSession = Depends(get_db)) -> ScoreStore:
    """FastAPI dependency: score store bound to the request's DB session."""
    settings = get_settings()
    preferences = SqlPreferenceStore(db, settings.preferences_namespace)
    return ScoreStore(preferences, settings.score_key)


@router.get("", response_model=GameStateResponse)
async def get_game_state(scores: ScoreStore = Depends(get_score_store)):
    """Initial screen: stored score, placeholder result text, score map."""
    return await current_state(scores)


@router.post("/submit", response_model=SubmissionResponse)
async def submit_answer(
    body: SubmissionRequest, scores: ScoreStore = Depends(get_score_store),
):
    """Evaluate the submitted answer and update the stored score."""
    result = await submit(body.rule_try, body.sequence_try, scores)
    logger.info(
        f"Submission evaluated: {result.result_text}",
        extra={"score_delta": result.score_delta, "score": result.score},
    )
    return SubmissionResponse(
        passed=result.passed,
        score_delta=result.score_delta,
        result_text=result.result_text,
        score=result.score,
    )


@router.get("/score", response_model=ScoreResponse)
async def get_score(scores: ScoreStore = Depends(get_score_store)):
    return ScoreResponse(score=await scores.get())


@router.get("/score-map", response_model=ScoreMapResponse)
async def get_score_map():
    """Pass/fail deltas per rule, as text and as a table."""
    return ScoreMapResponse(text=format_score_map(), rules=score_map_entries())
