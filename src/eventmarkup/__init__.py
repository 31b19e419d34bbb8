"""Encode logging events as log4j.dtd XML fragments."""

from eventmarkup.adapters.logging import (
    XMLEventFormatter,
    XMLEventHandler,
    record_from_logging,
)
from eventmarkup.core.config import options_from_mapping
from eventmarkup.core.encoding.document import (
    DEFAULT_VERSION,
    LOG4J_NAMESPACE,
    render_event_set,
    write_event_set,
)
from eventmarkup.core.encoding.escaping import escape_cdata, escape_tags
from eventmarkup.core.encoding.xml import XMLEventEncoder, encode_event, encode_events
from eventmarkup.core.models import EncoderOptions, EventRecord, LocationInfo
from eventmarkup.core.ports import EventSource, LocationSource, TextSink

__all__ = [
    "DEFAULT_VERSION",
    "LOG4J_NAMESPACE",
    "EncoderOptions",
    "EventRecord",
    "EventSource",
    "LocationInfo",
    "LocationSource",
    "TextSink",
    "XMLEventEncoder",
    "XMLEventFormatter",
    "XMLEventHandler",
    "encode_event",
    "encode_events",
    "escape_cdata",
    "escape_tags",
    "options_from_mapping",
    "record_from_logging",
    "render_event_set",
    "write_event_set",
]
