"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from uuid import UUID

import pytest

from events.domain import (
    ErrorCode,
    EventId,
    EventNotFoundError,
    Failure,
    OwnerId,
    Success,
    Venues,
    clean_venues,
)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
        event_id = EventId.from_string(raw)
        assert event_id.value == UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestOwnerId:
    def test_equal_values_are_equal(self):
        assert OwnerId("42") == OwnerId("42")
        assert OwnerId("42") != OwnerId("43")

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            OwnerId("")


class TestVenues:
    def test_keeps_order(self):
        assert Venues.from_iterable(["B", "A"]).names == ("B", "A")

    def test_rejects_empty_sequence(self):
        with pytest.raises(ValueError, match="At least one venue"):
            Venues(names=())

    def test_rejects_blank_entry(self):
        with pytest.raises(ValueError, match="Venue cannot be empty"):
            Venues(names=("Arena", ""))

    def test_clean_venues_drops_blank_entries(self):
        assert clean_venues(["Arena", "", "  ", " Stadium "]) == ["Arena", " Stadium "]

    def test_clean_venues_all_blank_is_empty(self):
        assert clean_venues(["", " "]) == []


class TestResultEnvelope:
    def test_success_carries_data(self):
        result = Success({"id": "1"})
        assert result.success is True
        assert result.data == {"id": "1"}

    def test_failure_carries_message_and_code(self):
        result = Failure(error="nope", code=ErrorCode.UNAUTHORIZED)
        assert result.success is False
        assert result.error == "nope"

    def test_failure_from_domain_error(self):
        result = Failure.from_domain_error(EventNotFoundError("x", action="delete"))
        assert result.code is ErrorCode.EVENT_NOT_FOUND
        assert result.error == "Event not found or you don't have permission to delete it"


class TestEventNotFoundError:
    def test_message_does_not_mention_owner(self):
        error = EventNotFoundError("abc", action="edit")
        assert error.message == "Event not found or you don't have permission to edit it"
        assert error.event_id == "abc"
