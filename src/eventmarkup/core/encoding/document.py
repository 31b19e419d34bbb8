"""Enclosing log4j:eventSet document for event fragments.

Event fragments are not well-formed on their own. The usual log4j
convention includes them into a document as an external entity; this
module instead writes them directly between the eventSet tags.
"""

import io
from collections.abc import Iterable

from eventmarkup.core.encoding.xml import LINE_SEPARATOR, encode_events
from eventmarkup.core.models import EncoderOptions
from eventmarkup.core.ports import EventSource, TextSink

LOG4J_NAMESPACE = "http://jakarta.apache.org/log4j/"

# "1.1" for output of log4j releases before 1.2 final, "1.2" afterwards.
SUPPORTED_VERSIONS = frozenset({"1.1", "1.2"})
DEFAULT_VERSION = "1.2"


def _check_version(version: str) -> None:
    if version not in SUPPORTED_VERSIONS:
        raise ValueError(
            f"Unsupported eventSet version {version!r}; "
            f"expected one of {sorted(SUPPORTED_VERSIONS)}"
        )


def write_event_set(
    sink: TextSink,
    fragments: Iterable[str],
    version: str = DEFAULT_VERSION,
) -> None:
    """Write a complete eventSet document around pre-encoded fragments.

    Args:
        sink: Writable character sink. It is neither flushed nor closed.
        fragments: Event fragments, written in order.
        version: Value of the eventSet ``version`` attribute.

    Raises:
        ValueError: If version is not a known eventSet version.
    """
    _check_version(version)
    sink.write('<?xml version="1.0" ?>' + LINE_SEPARATOR + LINE_SEPARATOR)
    sink.write(
        f'<log4j:eventSet version="{version}" xmlns:log4j="{LOG4J_NAMESPACE}">'
        + LINE_SEPARATOR
    )
    for fragment in fragments:
        sink.write(fragment)
    sink.write("</log4j:eventSet>" + LINE_SEPARATOR)


def render_event_set(
    records: Iterable[EventSource],
    options: EncoderOptions | None = None,
    version: str = DEFAULT_VERSION,
) -> str:
    """Encode events and wrap them in an eventSet document.

    Args:
        records: Events to encode.
        options: Encoding options shared by every event.
        version: Value of the eventSet ``version`` attribute.

    Returns:
        The complete XML document.

    Raises:
        ValueError: If version is not a known eventSet version.
    """
    _check_version(version)
    buffer = io.StringIO()
    write_event_set(buffer, [encode_events(records, options)], version)
    return buffer.getvalue()
