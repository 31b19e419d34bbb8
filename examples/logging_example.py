"""Example application writing log4j XML events through the logging module.

Run with:
    python -m examples.logging_example

Output:
    events.xml        - log4j:event fragments, appended on every run
    events-set.xml    - the same events wrapped in a log4j:eventSet document

Configuration:
    EVENTMARKUP_LOCATION_INFO=true enables the locationInfo section.
"""

import logging
import os

from eventmarkup.adapters.logging import (
    SEQUENCE_NUMBER_ATTR,
    XMLEventHandler,
    next_sequence_number,
    record_from_logging,
)
from eventmarkup.core.config import options_from_mapping
from eventmarkup.core.encoding.document import render_event_set

options = options_from_mapping(
    {"LocationInfo": os.environ.get("EVENTMARKUP_LOCATION_INFO", "false")}
)


class SequenceFilter(logging.Filter):
    """Stamp each record with its sequence number before any handler runs.

    Every conversion of the record then reuses the same number.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, SEQUENCE_NUMBER_ATTR, next_sequence_number())
        return True


class CapturingHandler(logging.Handler):
    """Keep every record for the eventSet document."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def main() -> None:
    logger = logging.getLogger("example.app")
    logger.setLevel(logging.DEBUG)
    sequence_filter = SequenceFilter()
    logger.addFilter(sequence_filter)
    capturing = CapturingHandler()

    with open("events.xml", "a", encoding="utf-8", newline="") as stream:
        handler = XMLEventHandler(stream, options)
        logger.addHandler(handler)
        logger.addHandler(capturing)
        try:
            logger.info("Application started")
            logger.info("Order placed", extra={"order_id": "A-17", "ndc": "checkout"})
            try:
                {}["missing"]
            except KeyError:
                logger.exception("Lookup failed")
        finally:
            logger.removeHandler(capturing)
            logger.removeHandler(handler)
            logger.removeFilter(sequence_filter)

    events = [record_from_logging(record) for record in capturing.records]
    with open("events-set.xml", "w", encoding="utf-8", newline="") as out:
        out.write(render_event_set(events, options))

    print(render_event_set(events[:1], options))


if __name__ == "__main__":
    main()
