"""Submit Handler: evaluates a player's answer and applies the score delta.

Invariants:
    - Invalid input (blank, malformed) re-raises InvalidSubmissionError with no score change
    - Score update happens once per evaluated submission, including 0 deltas
    - Score read-modify-write is serialized by _score_lock (submission order preserved)

Design Decisions:
    - Pure evaluate_fields() sits between the store reads and writes
    - _score_lock is module-level: the service runs one event loop per process
"""

import asyncio
import logging
from dataclasses import dataclass

from ria.core.errors import InvalidSubmissionError
from ria.core.evaluate_answer import evaluate_fields
from ria.core.repository_protocols import ScoreLike
from ria.core.scoring import format_result, format_score_map

logger = logging.getLogger(__name__)

INITIAL_RESULT_TEXT = "결과가 여기에 표시됩니다"

_score_lock = asyncio.Lock()


@dataclass(frozen=True)
class SubmissionResult:
    """What the player sees after a submission."""
    passed: bool
    score_delta: int
    result_text: str
    score: int


async def submit(
    rule_try: str | None, sequence_try: str | None, scores: ScoreLike,
) -> SubmissionResult:
    """Evaluate the submitted fields and add the delta to the stored score."""
    try:
        outcome = evaluate_fields(rule_try, sequence_try)
    except InvalidSubmissionError as e:
        logger.warning(
            f"Rejected submission: {e.detail}",
            extra={"error_code": e.code, "error_kind": e.kind},
        )
        raise

    async with _score_lock:
        score = await scores.add(outcome.score_delta)

    return SubmissionResult(
        passed=outcome.passed,
        score_delta=outcome.score_delta,
        result_text=format_result(outcome),
        score=score,
    )


async def current_state(scores: ScoreLike) -> dict:
    """Initial screen state: stored score, placeholder result, score map."""
    return {
        "score": await scores.get(),
        "result_text": INITIAL_RESULT_TEXT,
        "score_map": format_score_map(),
    }
