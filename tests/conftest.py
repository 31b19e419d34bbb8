"""Shared test fixtures for all test modules."""

import io

import pytest

from eventmarkup.core.models import EventRecord, LocationInfo


@pytest.fixture
def sink() -> io.StringIO:
    """Provide an empty in-memory text sink."""
    return io.StringIO()


@pytest.fixture
def minimal_record() -> EventRecord:
    """Record with required fields only."""
    return EventRecord(
        logger_name="com.app.Main",
        timestamp=1000,
        sequence_number=1,
        level="INFO",
        thread_name="main",
        rendered_message="hello",
    )


@pytest.fixture
def location() -> LocationInfo:
    """Location info for a method with markup characters in its name."""
    return LocationInfo(
        class_name="com.app.Main",
        method_name="<init>",
        file_name="Main.java",
        line_number=42,
    )


@pytest.fixture
def full_record(location: LocationInfo) -> EventRecord:
    """Record with every optional field populated."""
    return EventRecord(
        logger_name="com.app.Service",
        timestamp=1702300000123,
        sequence_number=7,
        level="ERROR",
        thread_name="worker-1",
        rendered_message="Connection failed",
        context_stack="request-42 user-alice",
        throwable_trace=[
            "java.io.IOException: boom",
            "\tat com.app.Service.connect(Service.java:10)",
        ],
        location_info=location,
        properties={"user": "alice", "id": "7"},
    )
