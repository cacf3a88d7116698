"""Score Store: persistent integer score accumulated across sessions.

Invariants:
    - get() returns 0 when no score has been saved yet
    - Every set()/add() writes through to the preference store immediately
    - A value written is returned by the next get()
"""

import logging

from ria.core.repository_protocols import PreferenceStore

logger = logging.getLogger(__name__)

DEFAULT_SCORE_KEY = "score"


class ScoreStore:
    """Score accumulator layered on a PreferenceStore."""

    def __init__(self, preferences: PreferenceStore, key: str = DEFAULT_SCORE_KEY):
        self.preferences = preferences
        self.key = key

    async def get(self) -> int:
        return int(await self.preferences.get_preference(self.key, 0))

    async def set(self, value: int) -> None:
        await self.preferences.save_preference(self.key, value)

    async def add(self, delta: int) -> int:
        """Add delta to the persisted score and return the new total."""
        score = await self.get() + delta
        await self.set(score)
        logger.info(
            f"Score updated to {score}",
            extra={"score_delta": delta, "score": score},
        )
        return score
