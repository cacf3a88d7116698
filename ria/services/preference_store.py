"""SQL Preference Store: namespaced key-value preferences persisted with SQLAlchemy.

Invariants:
    - get_preference never raises for a missing key: returns the caller's default
    - save_preference upserts and commits (one row per namespace + key)
    - Stored values keep their type (int stays int, str stays str)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ria.core.repository_protocols import PreferenceValue
from ria.models.preference import Preference

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "RiaPreferences"


class SqlPreferenceStore:
    """PreferenceStore implementation backed by the preferences table."""

    def __init__(self, db: AsyncSession, namespace: str = DEFAULT_NAMESPACE):
        self.db = db
        self.namespace = namespace

    async def get_preference(
        self, key: str, default: PreferenceValue,
    ) -> PreferenceValue:
        """Stored value for key, or default if absent."""
        row = await self.db.get(Preference, (self.namespace, key))
        if row is None:
            return default
        return row.value

    async def save_preference(self, key: str, value: PreferenceValue) -> None:
        """Insert or overwrite key with value."""
        row = await self.db.get(Preference, (self.namespace, key))
        if row is None:
            self.db.add(Preference(namespace=self.namespace, key=key, value=value))
        else:
            row.value = value
        await self.db.commit()
        logger.debug(f"Saved preference {self.namespace}/{key}")
