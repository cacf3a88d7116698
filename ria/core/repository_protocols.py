"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Persisted preferences are accessed only through these Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure evaluator never
      touches them, the shell orchestrates the calls around it
"""

from typing import Protocol

PreferenceValue = int | str


class PreferenceStore(Protocol):
    """Contract for the persisted key-value preference store."""
    async def get_preference(
        self, key: str, default: PreferenceValue,
    ) -> PreferenceValue: ...
    async def save_preference(self, key: str, value: PreferenceValue) -> None: ...


class ScoreLike(Protocol):
    """Contract for the persistent score accumulator."""
    async def get(self) -> int: ...
    async def set(self, value: int) -> None: ...
    async def add(self, delta: int) -> int: ...
