"""Rule Names: accepted phrases that correctly name each hidden rule.

Invariants:
    - Matching is exact string equality (no case, whitespace or spacing normalization)
    - Unknown rule ids have no accepted phrases
"""

from ria.core.domain_types import RuleId


RULE_SYNONYMS: dict[RuleId, frozenset[str]] = {
    RuleId(1): frozenset({"피보나치수열", "피보나치"}),
    RuleId(2): frozenset({
        "모두다르다", "모두다름", "전부다르다", "전부다름",
        "중복제거", "중복제외", "중복없음",
    }),
    RuleId(3): frozenset({
        "뒷숫자가앞숫자보다크다",
        "뒤의숫자가바로앞의숫자보다크다",
        "뒷숫자가바로앞숫자보다크다",
    }),
    RuleId(4): frozenset({"대칭을이룬다", "좌우대칭", "대칭"}),
    RuleId(5): frozenset({"3의배수"}),
}


def check_rule_name(rule_id: int, phrase: str) -> bool:
    """True if phrase is an accepted name for rule_id."""
    return phrase in RULE_SYNONYMS.get(RuleId(rule_id), frozenset())
