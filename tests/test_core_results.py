"""Tests for tagged lookup results."""

from customer_tracker.core.results import LookupStatus, QueryResult


def test_found():
    result = QueryResult.found(0)
    assert result.ok
    assert not result.is_error
    assert result.value == 0


def test_not_found_is_not_an_error():
    result = QueryResult.not_found()
    assert result.status == LookupStatus.NOT_FOUND
    assert not result.ok
    assert not result.is_error


def test_engine_error_keeps_message():
    result = QueryResult.engine_error("database is locked")
    assert result.is_error
    assert result.error == "database is locked"
    assert result.value is None


def test_negative_value_is_still_found():
    assert QueryResult.found(-1).ok
