"""Tests for the ReadEventsDetails model."""

from datetime import datetime, timedelta, timezone

import pytest

from opc_history.models import EventFilter, ReadEventsDetails

START = datetime(2023, 1, 1, tzinfo=timezone.utc)
END = datetime(2023, 1, 2, tzinfo=timezone.utc)


def test_defaults_are_unset():
    """Test every field is None on a fresh instance."""
    details = ReadEventsDetails()

    assert details.start_time is None
    assert details.end_time is None
    assert details.num_events is None
    assert details.filter is None


def test_construct_by_field_name():
    """Test construction with Python field names."""
    details = ReadEventsDetails(
        start_time=START, end_time=END, num_events=50, filter=EventFilter()
    )

    assert details.start_time == START
    assert details.end_time == END
    assert details.num_events == 50
    assert details.filter == EventFilter()


def test_construct_by_wire_key():
    """Test construction with wire keys."""
    details = ReadEventsDetails(
        startTime=START, endTime=END, numEvents=50, filter=EventFilter()
    )

    assert details.start_time == START
    assert details.num_events == 50


def test_fluent_setters_return_same_instance():
    """Test with_* setters chain on the same object."""
    details = ReadEventsDetails()

    result = (
        details.with_start_time(START)
        .with_end_time(END)
        .with_num_events(10)
        .with_filter(EventFilter())
    )

    assert result is details
    assert details.start_time == START
    assert details.end_time == END
    assert details.num_events == 10
    assert details.filter == EventFilter()


@pytest.mark.parametrize(
    "setter,field,value",
    [
        ("with_start_time", "start_time", START + timedelta(hours=1)),
        ("with_end_time", "end_time", END + timedelta(hours=1)),
        ("with_num_events", "num_events", 7),
        ("with_filter", "filter", EventFilter(select_clauses=[])),
    ],
)
def test_setter_changes_only_its_field(setter, field, value):
    """Test setting one field leaves the others untouched."""
    details = ReadEventsDetails(
        start_time=START, end_time=END, num_events=50, filter=EventFilter()
    )
    before = details.model_dump(by_alias=False)

    getattr(details, setter)(value)

    after = details.model_dump(by_alias=False)
    assert getattr(details, field) == value
    for name in before:
        if name != field:
            assert after[name] == before[name]


def test_setter_can_clear_field():
    """Test passing None unsets a field."""
    details = ReadEventsDetails(num_events=5)

    details.with_num_events(None)

    assert details.num_events is None


def test_attribute_assignment():
    """Test plain attribute assignment works like the fluent setter."""
    details = ReadEventsDetails()
    details.num_events = 25

    assert details.num_events == 25


def test_no_range_or_count_checks():
    """Test inverted ranges and negative counts are kept as given."""
    details = ReadEventsDetails(start_time=END, end_time=START, num_events=-1)

    assert details.start_time > details.end_time
    assert details.num_events == -1


def test_equality_is_field_for_field():
    """Test two instances with the same fields compare equal."""
    first = ReadEventsDetails(num_events=3, filter=EventFilter())
    second = ReadEventsDetails().with_filter(EventFilter()).with_num_events(3)

    assert first == second
    assert first != ReadEventsDetails(num_events=4, filter=EventFilter())
