"""Sequence Rules: the five hidden rules a candidate sequence can satisfy.

Invariants:
    - Every classifier is PURE and total: takes a list of ints, returns bool, never raises
    - check_sequence on an unknown rule returns False (not an error)
    - Minimum length (MIN_SEQUENCE_LENGTH) is enforced by the evaluator, not here

Design Decisions:
    - Fibonacci matching tries every start index whose value equals seq[0]:
      the value 1 appears twice (0, 1, 1, 2, ...) so [1, 2, 3, 5, 8] starts at
      the second 1
    - Divisibility uses Python's floored %, which is exact for negative ints
"""

from collections.abc import Callable, Sequence

from ria.core.domain_types import RuleId


def fibonacci_up_to(limit: int) -> list[int]:
    """Fibonacci numbers 0, 1, 1, 2, ... until the last one is >= limit."""
    fib = [0, 1]
    while fib[-1] < limit:
        fib.append(fib[-1] + fib[-2])
    return fib


def is_part_of_fibonacci(seq: Sequence[int]) -> bool:
    """Rule 1: seq is a contiguous run of the Fibonacci sequence."""
    if not seq:
        return False

    fib = fibonacci_up_to(seq[-1])
    starts = [i for i, value in enumerate(fib) if value == seq[0]]
    for start in starts:
        if start + len(seq) > len(fib):
            continue
        if all(seq[i] == fib[start + i] for i in range(len(seq))):
            return True
    return False


def are_all_unique(seq: Sequence[int]) -> bool:
    """Rule 2: no value repeats."""
    return len(set(seq)) == len(seq)


def is_strictly_increasing(seq: Sequence[int]) -> bool:
    """Rule 3: every element is greater than the one before it."""
    return all(seq[i] > seq[i - 1] for i in range(1, len(seq)))


def is_palindrome(seq: Sequence[int]) -> bool:
    """Rule 4: reads the same forward and backward."""
    n = len(seq)
    return all(seq[i] == seq[n - 1 - i] for i in range(n // 2))


def are_all_multiples_of_three(seq: Sequence[int]) -> bool:
    """Rule 5: every element is divisible by 3."""
    return all(value % 3 == 0 for value in seq)


SEQUENCE_RULES: dict[RuleId, Callable[[Sequence[int]], bool]] = {
    RuleId(1): is_part_of_fibonacci,
    RuleId(2): are_all_unique,
    RuleId(3): is_strictly_increasing,
    RuleId(4): is_palindrome,
    RuleId(5): are_all_multiples_of_three,
}


def check_sequence(rule_id: int, seq: Sequence[int]) -> bool:
    """Dispatch to the classifier for rule_id. Unknown rule -> False."""
    classifier = SEQUENCE_RULES.get(RuleId(rule_id))
    if classifier is None:
        return False
    return classifier(seq)
