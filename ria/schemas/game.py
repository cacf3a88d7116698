"""Game Schemas: Pydantic models for the submit, score and score-map endpoints.

Invariants:
    - SubmissionRequest fields are optional free text; blankness is judged by the
      evaluator so that blank input surfaces as INVALID_FORMAT, not a 422/400 field error
    - Answer text is passed through unmodified (no strip): rule names match exactly
"""

from pydantic import BaseModel


class SubmissionRequest(BaseModel):
    """The two answer fields. Rule field wins when both are filled."""
    rule_try: str | None = None
    sequence_try: str | None = None


class SubmissionResponse(BaseModel):
    passed: bool
    score_delta: int
    result_text: str
    score: int


class ScoreResponse(BaseModel):
    score: int


class ScoreMapEntry(BaseModel):
    rule_id: int
    pass_delta: int
    fail_delta: int


class ScoreMapResponse(BaseModel):
    """Score map as display text plus the structured table it was built from."""
    text: str
    rules: list[ScoreMapEntry]


class GameStateResponse(BaseModel):
    score: int
    result_text: str
    score_map: str
