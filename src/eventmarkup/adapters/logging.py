"""Python logging adapter for the XML event encoder.

This adapter bridges Python's standard library logging module to the
encoder: LogRecords are converted into EventRecords and written as
log4j:event fragments.
"""

import itertools
import logging
import threading
import traceback
from typing import TextIO

from eventmarkup.core.encoding.xml import XMLEventEncoder
from eventmarkup.core.models import EncoderOptions, EventRecord, LocationInfo

# Standard LogRecord attributes that should not be treated as properties
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Extra attributes mapped onto dedicated EventRecord fields
NDC_ATTR = "ndc"
SEQUENCE_NUMBER_ATTR = "sequence_number"

# LogRecord attributes that include_attrs may select as properties
INCLUDABLE_ATTRS = ("module", "funcName", "lineno", "pathname")

_sequence = itertools.count(1)
_sequence_lock = threading.Lock()


def next_sequence_number() -> int:
    """Return the next process-wide event sequence number."""
    with _sequence_lock:
        return next(_sequence)


def _throwable_lines(record: logging.LogRecord) -> list[str] | None:
    # exc_info=True is only normalized by Logger._log, not by LogRecord
    if isinstance(record.exc_info, tuple):
        exc_type, exc_value, exc_tb = record.exc_info
        if exc_type is not None:
            text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
            return text.splitlines()
    if record.exc_text:
        return record.exc_text.splitlines()
    return None


def _properties(
    record: logging.LogRecord, include_attrs: list[str] | None
) -> dict[str, object]:
    properties: dict[str, object] = {}
    for key in include_attrs or ():
        if key in INCLUDABLE_ATTRS:
            value = getattr(record, key)
            properties[key] = "" if value is None else value
    for key, value in record.__dict__.items():
        if key in _STANDARD_LOGRECORD_ATTRS or key in (NDC_ATTR, SEQUENCE_NUMBER_ATTR):
            continue
        if isinstance(value, (str, int, float, bool)):
            properties[key] = value
    return properties


def record_from_logging(
    record: logging.LogRecord,
    *,
    sequence_number: int | None = None,
    include_attrs: list[str] | None = None,
) -> EventRecord:
    """Convert a LogRecord into an EventRecord.

    The ``ndc`` extra attribute becomes the context stack and a
    ``sequence_number`` extra attribute is used as the sequence number.
    Other extra attributes of primitive type become properties.

    Args:
        record: The log record to convert.
        sequence_number: Explicit sequence number. When omitted, the
            record's ``sequence_number`` attribute is used if present,
            otherwise the next process-wide number is drawn.
        include_attrs: LogRecord attributes to add to the properties, any
            of "module", "funcName", "lineno" and "pathname". Other names
            are ignored. Defaults to none.

    Returns:
        The converted event.
    """
    if sequence_number is None:
        sequence_number = getattr(record, SEQUENCE_NUMBER_ATTR, None)
    if sequence_number is None:
        sequence_number = next_sequence_number()

    ndc = getattr(record, NDC_ATTR, None)

    return EventRecord(
        logger_name=record.name,
        timestamp=int(record.created * 1000),
        sequence_number=sequence_number,
        level=record.levelname,
        thread_name=record.threadName or "",
        rendered_message=record.getMessage(),
        context_stack=str(ndc) if ndc is not None else None,
        throwable_trace=_throwable_lines(record),
        location_info=LocationInfo(
            class_name=record.module,
            method_name=record.funcName or "",
            file_name=record.filename,
            line_number=record.lineno,
        ),
        properties=_properties(record, include_attrs) or None,
    )


class XMLEventFormatter(logging.Formatter):
    """Logging formatter producing log4j:event fragments.

    Example:
        ```python
        handler = logging.FileHandler("events.xml")
        handler.setFormatter(XMLEventFormatter(location_info=True))
        ```
    """

    def __init__(
        self,
        options: EncoderOptions | None = None,
        *,
        location_info: bool | None = None,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            options: Encoding options. Defaults to EncoderOptions().
            location_info: Overrides ``options.location_info`` when given.
            include_attrs: LogRecord attributes to add to the properties.
        """
        super().__init__()
        self._include_attrs = include_attrs
        self._encoder = XMLEventEncoder(options, location_info=location_info)

    @property
    def encoder(self) -> XMLEventEncoder:
        return self._encoder

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as one event fragment.

        Args:
            record: The log record to format.

        Returns:
            The fragment, ending with a blank line.
        """
        return self._encoder.format(
            record_from_logging(record, include_attrs=self._include_attrs)
        )


class XMLEventHandler(logging.StreamHandler):
    """Stream handler writing log4j:event fragments.

    Fragments already end with a blank line, so no terminator is appended.
    Write errors are reported through ``logging.Handler.handleError``.

    Example:
        ```python
        handler = XMLEventHandler(open("events.xml", "a"), location_info=True)
        logging.getLogger().addHandler(handler)
        ```
    """

    terminator = ""

    def __init__(
        self,
        stream: TextIO | None = None,
        options: EncoderOptions | None = None,
        *,
        location_info: bool | None = None,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            stream: Stream to write to. Defaults to sys.stderr.
            options: Encoding options. Defaults to EncoderOptions().
            location_info: Overrides ``options.location_info`` when given.
            include_attrs: LogRecord attributes to add to the properties.
        """
        super().__init__(stream)
        self.setFormatter(
            XMLEventFormatter(
                options, location_info=location_info, include_attrs=include_attrs
            )
        )
