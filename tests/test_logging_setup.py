from __future__ import annotations

import io
import logging

from services.search_service import SearchAggregator
from sources.mock_news import MockNewsProvider
from sources.mock_people import MockPeopleProvider
from sources.mock_social import MockSocialProvider
from utils.logging_setup import build_handler


def _capture(name):
    stream = io.StringIO()
    handler = build_handler(stream, level=logging.DEBUG)
    logger = logging.getLogger(name)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return stream, logger, handler


def test_handler_stamps_run_id_from_environment(monkeypatch):
    monkeypatch.setenv("RUN_ID", "abc123")
    stream, logger, handler = _capture("tests.logging.run_id")
    try:
        logger.info("Using cached search results", extra={"step": "cache", "status": "hit"})
    finally:
        logger.removeHandler(handler)

    line = stream.getvalue().strip()
    assert "Using cached search results" in line
    assert "step=cache status=hit" in line
    assert "provider=- duration_ms=- error=-" in line
    assert line.endswith("run_id=abc123")


def test_handler_without_run_id_uses_placeholder(monkeypatch):
    monkeypatch.delenv("RUN_ID", raising=False)
    stream, logger, handler = _capture("tests.logging.no_run_id")
    try:
        logger.warning("plain message")
    finally:
        logger.removeHandler(handler)

    assert stream.getvalue().strip().endswith("run_id=-")


def test_search_logs_provider_durations(monkeypatch):
    monkeypatch.setenv("RUN_ID", "run-7")
    stream, logger, handler = _capture("services.search_service")
    try:
        SearchAggregator(
            MockPeopleProvider(delay_seconds=0),
            MockSocialProvider(delay_seconds=0),
            MockNewsProvider(delay_seconds=0),
        ).search("steve jobs")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    lines = [line for line in stream.getvalue().splitlines() if "Provider call finished" in line]
    assert [line.split("provider=")[1].split()[0] for line in lines] == ["mock_people", "mock_social", "mock_news"]
    for line in lines:
        duration = line.split("duration_ms=")[1].split()[0]
        assert duration.isdigit()
        assert line.endswith("run_id=run-7")


def test_provider_call_records_carry_duration(caplog):
    caplog.set_level(logging.DEBUG, logger="services.search_service")
    SearchAggregator(
        MockPeopleProvider(delay_seconds=0),
        MockSocialProvider(delay_seconds=0),
        MockNewsProvider(delay_seconds=0),
    ).search("zzz nobody")

    records = [r for r in caplog.records if r.getMessage() == "Provider call finished"]
    assert [r.provider for r in records] == ["mock_people"]
    assert isinstance(records[0].duration_ms, int)
