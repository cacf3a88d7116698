"""Answer Evaluation: parses a '<rule>:<answer>' submission and scores it.

Invariants:
    - evaluate() is PURE: no IO, no score mutation, returns a fresh EvaluationOutcome
    - Blank/malformed input raises an InvalidSubmissionError subclass, never ValueError
    - Integers follow one grammar: optional sign + ASCII digits, nothing else
    - Sequence mode always scores 0; sequences shorter than MIN_SEQUENCE_LENGTH fail
    - Rule field takes priority when both fields are non-blank

Design Decisions:
    - Submission split on the first ':' only, so the answer payload may contain ':'
    - Integer grammar is a regex instead of int(): int() accepts surrounding
      whitespace and '1_000', which are not valid rule numbers or sequence tokens
"""

import re

from ria.core.domain_types import (
    MIN_SEQUENCE_LENGTH, EvaluationMode, EvaluationOutcome, RuleId, ScoreDelta,
)
from ria.core.errors import (
    EmptyInputError, ErrorContext, MalformedSequenceError, MalformedSubmissionError,
)
from ria.core.rule_names import check_rule_name
from ria.core.scoring import rule_score
from ria.core.sequence_rules import check_sequence


SUBMISSION_SEPARATOR = ":"
SEQUENCE_SEPARATOR = "_"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_int(token: str) -> int | None:
    """Parse token as an integer, or None if it is not one."""
    if _INTEGER_RE.fullmatch(token) is None:
        return None
    try:
        return int(token)
    except ValueError:
        # digit count above sys.get_int_max_str_digits()
        return None


# ─── Parsing ─────────────────────────────────────────────────────

def select_submission(
    rule_try: str | None, sequence_try: str | None,
) -> tuple[EvaluationMode, str]:
    """Pick the answer field to evaluate. Raises EmptyInputError if both are blank."""
    if not _is_blank(rule_try):
        return EvaluationMode.RULE, rule_try
    if not _is_blank(sequence_try):
        return EvaluationMode.SEQUENCE, sequence_try
    raise EmptyInputError()


def parse_submission(raw: str) -> tuple[RuleId, str]:
    """Split '<number>:<answer>' into (rule id, answer payload)."""
    number, separator, payload = raw.partition(SUBMISSION_SEPARATOR)
    rule_id = parse_int(number)
    if not separator or rule_id is None:
        raise MalformedSubmissionError(raw)
    return RuleId(rule_id), payload


def parse_sequence(payload: str, rule_id: int | None = None) -> list[int]:
    """Split '1_2_3' into [1, 2, 3]. Raises MalformedSequenceError on a bad token."""
    sequence = []
    for token in payload.split(SEQUENCE_SEPARATOR):
        value = parse_int(token)
        if value is None:
            raise MalformedSequenceError(
                token,
                ErrorContext(rule_id=rule_id, mode=EvaluationMode.SEQUENCE.value),
            )
        sequence.append(value)
    return sequence


# ─── Evaluation ──────────────────────────────────────────────────

def evaluate(mode: EvaluationMode, raw: str) -> EvaluationOutcome:
    """Evaluate one raw submission in the given mode."""
    rule_id, payload = parse_submission(raw)

    if mode is EvaluationMode.RULE:
        passed = check_rule_name(rule_id, payload)
        return EvaluationOutcome(passed, rule_score(rule_id, passed))

    sequence = parse_sequence(payload, rule_id)
    passed = (
        len(sequence) >= MIN_SEQUENCE_LENGTH
        and check_sequence(rule_id, sequence)
    )
    return EvaluationOutcome(passed, ScoreDelta(0))


def evaluate_fields(
    rule_try: str | None, sequence_try: str | None,
) -> EvaluationOutcome:
    """Select the non-blank field and evaluate it."""
    mode, raw = select_submission(rule_try, sequence_try)
    return evaluate(mode, raw)
