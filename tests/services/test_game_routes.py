"""Game Routes: submit, score, score map and error envelopes over HTTP.

Invariants:
    - Valid submissions return result text and the accumulated score
    - Invalid submissions return 400 INVALID_FORMAT and leave the score unchanged
    - The score persists between requests
"""

import logging

from ria.core.errors import INVALID_FORMAT_MESSAGE
from ria.services.handle_submit import INITIAL_RESULT_TEXT
from ria.services.preference_store import SqlPreferenceStore
from ria.services.score_store import ScoreStore


async def test_initial_state(client):
    res = await client.get("/api/v1/game")
    assert res.status_code == 200
    body = res.json()
    assert body["score"] == 0
    assert body["result_text"] == INITIAL_RESULT_TEXT
    assert body["score_map"].startswith("<Score Map>\nRule1. Pass (20) / Fail (-1)")


async def test_submit_rule_pass(client):
    res = await client.post("/api/v1/game/submit", json={"rule_try": "1:피보나치"})
    assert res.status_code == 200
    assert res.json() == {
        "passed": True, "score_delta": 20, "result_text": "Pass (20)", "score": 20,
    }


async def test_submit_rule_fail(client):
    res = await client.post(
        "/api/v1/game/submit", json={"rule_try": "1:아무거나", "sequence_try": ""},
    )
    assert res.status_code == 200
    assert res.json()["result_text"] == "Fail (-1)"
    assert res.json()["score"] == -1


async def test_submit_sequence_scores_zero(client):
    res = await client.post("/api/v1/game/submit", json={"sequence_try": "3:1_2_3_4_5"})
    assert res.status_code == 200
    assert res.json() == {
        "passed": True, "score_delta": 0, "result_text": "Pass (0)", "score": 0,
    }


async def test_short_sequence_fails(client):
    res = await client.post("/api/v1/game/submit", json={"sequence_try": "3:1_2_3"})
    assert res.json()["result_text"] == "Fail (0)"


async def test_score_accumulates_across_requests(client):
    await client.post("/api/v1/game/submit", json={"rule_try": "4:대칭"})
    await client.post("/api/v1/game/submit", json={"rule_try": "5:3의배수"})
    await client.post("/api/v1/game/submit", json={"rule_try": "2:틀림"})

    res = await client.get("/api/v1/game/score")
    assert res.status_code == 200
    assert res.json() == {"score": 50 + 60 - 1}


async def test_score_is_read_from_persisted_preferences(client, test_db):
    await ScoreStore(SqlPreferenceStore(test_db)).set(123)

    res = await client.get("/api/v1/game/score")
    assert res.json() == {"score": 123}


async def test_empty_submission_is_invalid_format(client):
    res = await client.post(
        "/api/v1/game/submit", json={"rule_try": "", "sequence_try": "  "},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_FORMAT"
    assert error["message"] == INVALID_FORMAT_MESSAGE
    assert error["kind"] == "empty_input"


async def test_missing_fields_are_invalid_format(client):
    res = await client.post("/api/v1/game/submit", json={})
    assert res.status_code == 400
    assert res.json()["error"]["kind"] == "empty_input"


async def test_malformed_submission_does_not_change_score(client):
    await client.post("/api/v1/game/submit", json={"rule_try": "1:피보나치"})

    res = await client.post("/api/v1/game/submit", json={"rule_try": "x:abc"})
    assert res.status_code == 400
    assert res.json()["error"]["kind"] == "malformed_submission"

    score = await client.get("/api/v1/game/score")
    assert score.json() == {"score": 20}


async def test_malformed_sequence_is_invalid_format(client):
    res = await client.post("/api/v1/game/submit", json={"sequence_try": "2:1_a_3_4_5"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_FORMAT"
    assert error["kind"] == "malformed_sequence"
    assert error["context"]["rule_id"] == 2


async def test_wrong_field_type_is_validation_error(client):
    res = await client.post("/api/v1/game/submit", json={"rule_try": 12})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_score_map(client):
    res = await client.get("/api/v1/game/score-map")
    assert res.status_code == 200
    body = res.json()
    assert body["text"].splitlines() == [
        "<Score Map>",
        "Rule1. Pass (20) / Fail (-1)",
        "Rule2. Pass (30) / Fail (-1)",
        "Rule3. Pass (40) / Fail (-1)",
        "Rule4. Pass (50) / Fail (-1)",
        "Rule5. Pass (60) / Fail (-1)",
    ]
    assert body["rules"][4] == {"rule_id": 5, "pass_delta": 60, "fail_delta": -1}


async def test_long_wrong_rule_name_is_a_fail_not_an_error(client):
    res = await client.post(
        "/api/v1/game/submit", json={"rule_try": "1:" + "가" * 1001},
    )
    assert res.status_code == 200
    assert res.json()["result_text"] == "Fail (-1)"
    assert res.json()["score"] == -1


async def test_oversized_sequence_token_is_invalid_format(client):
    res = await client.post(
        "/api/v1/game/submit", json={"sequence_try": "1:1_1_1_1_" + "9" * 5000},
    )
    assert res.status_code == 400
    assert res.json()["error"]["kind"] == "malformed_sequence"


async def test_invalid_submission_logged_once_with_kind(client, caplog):
    caplog.set_level(logging.WARNING)

    await client.post("/api/v1/game/submit", json={"rule_try": "x:abc"})

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].name == "ria.services.handle_submit"
    assert warnings[0].error_kind == "malformed_submission"
