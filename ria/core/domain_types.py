"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RuleId wraps int; only KNOWN_RULES are meaningful, any other value is
      an unknown rule (evaluates to failure, never an error)
    - EvaluationOutcome is immutable and produced fresh per submission
    - MIN_SEQUENCE_LENGTH (5) is the single source of truth for sequence size

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

RuleId = NewType("RuleId", int)
ScoreDelta = NewType("ScoreDelta", int)

KNOWN_RULES: tuple[RuleId, ...] = tuple(RuleId(n) for n in range(1, 6))
MIN_SEQUENCE_LENGTH: int = 5


# ─── Enums ───────────────────────────────────────────────────────

class EvaluationMode(str, Enum):
    """Which answer field is being evaluated."""
    RULE = "rule"            # user names the rule
    SEQUENCE = "sequence"    # user supplies a candidate sequence


# ─── Outcome ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of one evaluated submission. Never persisted by the core."""
    passed: bool
    score_delta: ScoreDelta
