"""Port interfaces for encoder inputs and outputs.

The encoder reads records and writes text only through these protocols, so
any structure exposing the right attributes can be encoded and any object
with a ``write`` method can receive the output.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocationSource(Protocol):
    """Read-only view of a statement's origin."""

    @property
    def class_name(self) -> str: ...

    @property
    def method_name(self) -> str: ...

    @property
    def file_name(self) -> str: ...

    @property
    def line_number(self) -> int | str: ...


@runtime_checkable
class EventSource(Protocol):
    """Read-only view of a logging event.

    EventRecord satisfies this protocol, as does any other object exposing
    the same attributes.
    """

    @property
    def logger_name(self) -> str: ...

    @property
    def timestamp(self) -> int: ...

    @property
    def sequence_number(self) -> int: ...

    @property
    def level(self) -> object: ...

    @property
    def thread_name(self) -> str: ...

    @property
    def rendered_message(self) -> str: ...

    @property
    def context_stack(self) -> str | None: ...

    @property
    def throwable_trace(self) -> Sequence[str] | None: ...

    @property
    def location_info(self) -> LocationSource | None: ...

    @property
    def properties(self) -> Mapping[str, object] | None: ...


@runtime_checkable
class TextSink(Protocol):
    """Append-only character sink (e.g., an open text file or StringIO)."""

    def write(self, text: str, /) -> object:
        """Append text to the sink."""
        ...
