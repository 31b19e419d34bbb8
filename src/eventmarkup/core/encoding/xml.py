"""XML encoder for logging events.

Output follows the log4j.dtd event format. Each call writes one
``log4j:event`` element, which is a fragment rather than a well-formed
document: see ``eventmarkup.core.encoding.document`` for the enclosing
``log4j:eventSet``.
"""

import io
from collections.abc import Iterable

from eventmarkup.core.encoding.escaping import (
    CDATA_END,
    CDATA_START,
    escape_cdata,
    escape_tags,
)
from eventmarkup.core.models import EncoderOptions
from eventmarkup.core.ports import EventSource, TextSink

# Fixed by the log4j.dtd wire format.
LINE_SEPARATOR = "\r\n"


def encode_event(
    sink: TextSink,
    record: EventSource,
    options: EncoderOptions | None = None,
) -> None:
    """Write one event fragment to a sink.

    Optional sections are written only when the record carries the
    corresponding data. The location section is written whenever
    ``options.location_info`` is set, and the record must then carry
    location info.

    Args:
        sink: Writable character sink. It is neither flushed nor closed.
        record: The event to encode.
        options: Encoding options. Defaults to EncoderOptions().

    Raises:
        Whatever the sink raises on write. Nothing already written is undone.
    """
    if options is None:
        options = EncoderOptions()
    write = sink.write

    write('<log4j:event logger="')
    write(record.logger_name)
    write('" timestamp="')
    write(str(record.timestamp))
    write('" sequenceNumber="')
    write(str(record.sequence_number))
    write('" level="')
    write(str(record.level))
    write('" thread="')
    write(record.thread_name)
    write('">' + LINE_SEPARATOR)

    write("<log4j:message>" + CDATA_START)
    write(escape_cdata(record.rendered_message))
    write(CDATA_END + "</log4j:message>" + LINE_SEPARATOR)

    # NDC and throwable text is not split-escaped, unlike the message.
    context_stack = record.context_stack
    if context_stack is not None:
        write("<log4j:NDC>" + CDATA_START)
        write(context_stack)
        write(CDATA_END + "</log4j:NDC>" + LINE_SEPARATOR)

    trace = record.throwable_trace
    if trace:
        write("<log4j:throwable>" + CDATA_START)
        for line in trace:
            write(line)
            write(LINE_SEPARATOR)
        write(CDATA_END + "</log4j:throwable>" + LINE_SEPARATOR)

    if options.location_info:
        location = record.location_info
        write('<log4j:locationInfo class="')
        write(location.class_name)
        write('" method="')
        write(escape_tags(location.method_name))
        write('" file="')
        write(location.file_name)
        write('" line="')
        write(str(location.line_number))
        write('"/>' + LINE_SEPARATOR)

    properties = record.properties
    if properties:
        write("<log4j:properties>" + LINE_SEPARATOR)
        for name, value in properties.items():
            write('    <log4j:data name="' + str(name))
            write('" value="' + str(value))
            write('"/>' + LINE_SEPARATOR)
        write("</log4j:properties>" + LINE_SEPARATOR)

    write("</log4j:event>" + LINE_SEPARATOR + LINE_SEPARATOR)


def encode_events(
    records: Iterable[EventSource],
    options: EncoderOptions | None = None,
) -> str:
    """Encode events to concatenated XML fragments.

    Args:
        records: An iterable of events.
        options: Encoding options shared by every event.

    Returns:
        The fragments in input order. Empty string if no events.
    """
    buffer = io.StringIO()
    for record in records:
        encode_event(buffer, record, options)
    return buffer.getvalue()


class XMLEventEncoder:
    """Encoder writing events as log4j.dtd ``log4j:event`` fragments.

    Options are fixed at construction. The encoder keeps no other state, so
    one instance can serve concurrent callers as long as each shared sink
    is serialized by the caller.

    Example:
        ```python
        encoder = XMLEventEncoder(location_info=True)
        encoder.encode(sys.stdout, record)
        ```
    """

    def __init__(
        self,
        options: EncoderOptions | None = None,
        *,
        location_info: bool | None = None,
    ) -> None:
        """Initialize the encoder.

        Args:
            options: Encoding options. Defaults to EncoderOptions().
            location_info: Overrides ``options.location_info`` when given.
        """
        options = options or EncoderOptions()
        if location_info is not None:
            options = EncoderOptions(location_info=location_info)
        self._options = options

    @property
    def options(self) -> EncoderOptions:
        return self._options

    @property
    def location_info(self) -> bool:
        """Whether the location section is written."""
        return self._options.location_info

    def with_location_info(self, flag: bool) -> "XMLEventEncoder":
        """Return a new encoder with the location option set to flag."""
        return XMLEventEncoder(EncoderOptions(location_info=flag))

    def activate_options(self) -> None:
        """No options to activate."""

    def ignores_throwable(self) -> bool:
        """The encoder writes exception traces, so it never ignores them."""
        return False

    def encode(self, sink: TextSink, record: EventSource) -> None:
        """Write one event fragment to sink."""
        encode_event(sink, record, self._options)

    def format(self, record: EventSource) -> str:
        """Return one event fragment as a string."""
        buffer = io.StringIO()
        encode_event(buffer, record, self._options)
        return buffer.getvalue()
