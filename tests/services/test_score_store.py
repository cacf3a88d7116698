"""Score Store: persisted score and preference round-trips over SQLite.

Invariants:
    - Missing score reads as 0
    - add() writes through; next get() sees it
    - Values persist across store instances sharing the database
    - Namespaces isolate keys
"""

from ria.services.preference_store import SqlPreferenceStore
from ria.services.score_store import ScoreStore


async def test_missing_score_defaults_to_zero(score_store):
    assert await score_store.get() == 0


async def test_set_then_get_round_trip(score_store):
    await score_store.set(42)
    assert await score_store.get() == 42


async def test_add_accumulates_and_returns_total(score_store):
    assert await score_store.add(20) == 20
    assert await score_store.add(-1) == 19
    assert await score_store.add(0) == 19
    assert await score_store.get() == 19


async def test_score_survives_new_session(score_store, test_session_factory):
    await score_store.add(50)

    async with test_session_factory() as other_db:
        assert await ScoreStore(SqlPreferenceStore(other_db)).get() == 50


async def test_custom_score_key(test_db):
    preferences = SqlPreferenceStore(test_db)
    await ScoreStore(preferences, key="best").set(7)
    assert await ScoreStore(preferences).get() == 0
    assert await ScoreStore(preferences, key="best").get() == 7


async def test_preferences_keep_value_type(test_db):
    preferences = SqlPreferenceStore(test_db)
    await preferences.save_preference("name", "ria")
    await preferences.save_preference("count", 3)
    assert await preferences.get_preference("name", "") == "ria"
    assert await preferences.get_preference("count", 0) == 3


async def test_missing_preference_returns_default(test_db):
    preferences = SqlPreferenceStore(test_db)
    assert await preferences.get_preference("absent", "fallback") == "fallback"


async def test_save_overwrites_existing_value(test_db):
    preferences = SqlPreferenceStore(test_db)
    await preferences.save_preference("score", 1)
    await preferences.save_preference("score", 2)
    assert await preferences.get_preference("score", 0) == 2


async def test_namespaces_are_isolated(test_db):
    await SqlPreferenceStore(test_db, "A").save_preference("score", 10)
    assert await SqlPreferenceStore(test_db, "B").get_preference("score", 0) == 0
