"""Structured logging — JSONFormatter surfaces known extra fields."""

import json
import logging
from uuid import uuid4

from artist_onboarding.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "artist_onboarding.test", logging.INFO, __file__, 1,
        "Variant saved", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "artist_onboarding.test"
    assert log["message"] == "Variant saved"
    assert "timestamp" in log


def test_uuid_extras_stringified_and_numbers_kept():
    artist_id = uuid4()
    log = json.loads(JSONFormatter().format(_record(artist_id=artist_id, section=4)))
    assert log["artist_id"] == str(artist_id)
    assert log["section"] == 4


def test_unknown_extras_ignored():
    log = json.loads(JSONFormatter().format(_record(password="hunter2")))
    assert "password" not in log
