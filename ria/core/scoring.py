"""Scoring Policy: score deltas per rule and the display strings built from them.

Invariants:
    - SCORE_TABLE is the single source of truth for pass/fail deltas
    - Unknown rules score 0 whether passed or not
    - Deltas apply only to rule mode; the evaluator uses 0 for sequence mode
    - format_score_map is recomputed on every call (no cached text)
"""

from ria.core.domain_types import KNOWN_RULES, EvaluationOutcome, RuleId, ScoreDelta


FAIL_DELTA = ScoreDelta(-1)

# rule -> (pass delta, fail delta)
SCORE_TABLE: dict[RuleId, tuple[ScoreDelta, ScoreDelta]] = {
    RuleId(1): (ScoreDelta(20), FAIL_DELTA),
    RuleId(2): (ScoreDelta(30), FAIL_DELTA),
    RuleId(3): (ScoreDelta(40), FAIL_DELTA),
    RuleId(4): (ScoreDelta(50), FAIL_DELTA),
    RuleId(5): (ScoreDelta(60), FAIL_DELTA),
}

SCORE_MAP_TITLE = "<Score Map>"


def rule_score(rule_id: int, passed: bool) -> ScoreDelta:
    """Score delta for naming rule_id correctly (passed) or not."""
    deltas = SCORE_TABLE.get(RuleId(rule_id))
    if deltas is None:
        return ScoreDelta(0)
    pass_delta, fail_delta = deltas
    return pass_delta if passed else fail_delta


def format_result(outcome: EvaluationOutcome) -> str:
    """Result line shown to the player, e.g. 'Pass (20)'."""
    label = "Pass" if outcome.passed else "Fail"
    return f"{label} ({outcome.score_delta})"


def score_map_entries() -> list[dict]:
    """Pass/fail deltas for every known rule, in rule order."""
    return [
        {
            "rule_id": rule_id,
            "pass_delta": rule_score(rule_id, True),
            "fail_delta": rule_score(rule_id, False),
        }
        for rule_id in KNOWN_RULES
    ]


def format_score_map() -> str:
    """Multi-line score map: title, then 'RuleN. Pass (x) / Fail (y)' per rule."""
    lines = [
        f"Rule{e['rule_id']}. Pass ({e['pass_delta']}) / Fail ({e['fail_delta']})"
        for e in score_map_entries()
    ]
    return "\n".join([SCORE_MAP_TITLE, *lines])
