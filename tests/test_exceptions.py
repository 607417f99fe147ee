"""Tests for custom exception hierarchy."""

import pytest

from traffic_stats.exceptions import TrafficStatsError, InvalidOptionError


def test_exceptions_can_be_caught():
    """Each custom exception should be catchable via the base class."""
    with pytest.raises(TrafficStatsError):
        raise TrafficStatsError()
    with pytest.raises(TrafficStatsError):
        raise InvalidOptionError()


def test_error_carries_context_and_suggestion():
    err = InvalidOptionError("bad unit", context="report view", suggestion="use bytes")
    assert str(err) == "bad unit"
    assert err.context == "report view"
    assert err.suggestion == "use bytes"
