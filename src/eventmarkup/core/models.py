"""Core domain models for event markup encoding."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class LocationInfo:
    """Origin of a log statement, captured when the record was created.

    Attributes:
        class_name: Name of the emitting class or module.
        method_name: Name of the emitting function or method.
        file_name: Source file name.
        line_number: Source line number.
    """

    class_name: str
    method_name: str
    file_name: str
    line_number: int | str


@dataclass(frozen=True)
class EventRecord:
    """A captured logging event.

    Attributes:
        logger_name: Name of the emitting logger.
        timestamp: Milliseconds since the epoch.
        sequence_number: Process-wide monotonically increasing number.
        level: Severity label (e.g., INFO, ERROR).
        thread_name: Name of the emitting thread.
        rendered_message: The human-readable message.
        context_stack: Nested diagnostic context, if any.
        throwable_trace: Exception trace, one string per line, if any.
        location_info: Origin of the statement, if it was captured.
        properties: Additional key/value properties, if any.
    """

    logger_name: str
    timestamp: int
    sequence_number: int
    level: str
    thread_name: str
    rendered_message: str
    context_stack: str | None = None
    throwable_trace: Sequence[str] | None = None
    location_info: LocationInfo | None = None
    properties: Mapping[str, object] | None = None


@dataclass(frozen=True)
class EncoderOptions:
    """Options read by the event encoder.

    Attributes:
        location_info: Emit the location section when True.
    """

    location_info: bool = False
