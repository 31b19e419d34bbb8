"""BDD step definitions for event encoding features."""

import re
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from eventmarkup.core.config import options_from_mapping
from eventmarkup.core.encoding.xml import XMLEventEncoder
from eventmarkup.core.models import EncoderOptions, EventRecord, LocationInfo

_MESSAGE_BLOCKS = re.compile(
    r"<log4j:message>(.*)</log4j:message>", re.S
)
_CDATA_BLOCK = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.S)


@dataclass
class EncodingScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    fields: dict[str, object] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
    options: EncoderOptions = field(default_factory=EncoderOptions)
    output: str = ""


@pytest.fixture
def ctx() -> EncodingScenarioContext:
    """Fresh scenario context for each test."""
    return EncodingScenarioContext()


# === Given ===
@given(
    parsers.parse(
        'an event from logger "{logger}" at timestamp {timestamp:d} '
        "with sequence {sequence:d}"
    )
)
def given_event(
    ctx: EncodingScenarioContext, logger: str, timestamp: int, sequence: int
) -> None:
    ctx.fields.update(
        logger_name=logger, timestamp=timestamp, sequence_number=sequence
    )


@given(parsers.parse('the event has level "{level}" on thread "{thread}"'))
def given_level_and_thread(
    ctx: EncodingScenarioContext, level: str, thread: str
) -> None:
    ctx.fields.update(level=level, thread_name=thread)


@given(parsers.parse('the message "{message}"'))
def given_message(ctx: EncodingScenarioContext, message: str) -> None:
    ctx.fields["rendered_message"] = message


@given(parsers.parse('the property "{name}" is "{value}"'))
def given_property(ctx: EncodingScenarioContext, name: str, value: str) -> None:
    ctx.properties[name] = value


@given(parsers.parse('location info for method "{method}" at line {line:d}'))
def given_location(ctx: EncodingScenarioContext, method: str, line: int) -> None:
    ctx.fields["location_info"] = LocationInfo(
        class_name="com.app.Main",
        method_name=method,
        file_name="Main.java",
        line_number=line,
    )


@given(parsers.parse('the LocationInfo option is "{value}"'))
def given_location_option(ctx: EncodingScenarioContext, value: str) -> None:
    ctx.options = options_from_mapping({"LocationInfo": value})


@given(parsers.parse('an exception trace "{line}"'))
def given_trace(ctx: EncodingScenarioContext, line: str) -> None:
    ctx.fields["throwable_trace"] = [line]


# === When ===
@when("the event is encoded")
def when_encoded(ctx: EncodingScenarioContext) -> None:
    record = EventRecord(properties=ctx.properties or None, **ctx.fields)
    ctx.output = XMLEventEncoder(ctx.options).format(record)


# === Then ===
@then(parsers.parse('the output is exactly the minimal fragment for "{message}"'))
def then_minimal_fragment(ctx: EncodingScenarioContext, message: str) -> None:
    assert ctx.output == (
        '<log4j:event logger="com.app.Main" timestamp="1000" sequenceNumber="1"'
        ' level="INFO" thread="main">\r\n'
        f"<log4j:message><![CDATA[{message}]]></log4j:message>\r\n"
        "</log4j:event>\r\n\r\n"
    )


@then(parsers.parse('no "{section}" section is written'))
def then_no_section(ctx: EncodingScenarioContext, section: str) -> None:
    assert f"<log4j:{section}" not in ctx.output


@then(parsers.parse('no CDATA block contains "{marker}"'))
def then_no_block_contains(ctx: EncodingScenarioContext, marker: str) -> None:
    blocks = _CDATA_BLOCK.findall(ctx.output)
    assert blocks
    assert all(marker not in block for block in blocks)


@then(parsers.parse('the message blocks concatenate to "{message}"'))
def then_blocks_concatenate(ctx: EncodingScenarioContext, message: str) -> None:
    section = _MESSAGE_BLOCKS.search(ctx.output)
    assert section is not None
    assert "".join(_CDATA_BLOCK.findall(section.group(1))) == message


@then(parsers.parse("the properties section has {count:d} entries"))
def then_property_count(ctx: EncodingScenarioContext, count: int) -> None:
    assert ctx.output.count("<log4j:properties>") == 1
    assert ctx.output.count("<log4j:data ") == count


@then(parsers.parse('the property "{name}" is written with value "{value}"'))
def then_property_written(
    ctx: EncodingScenarioContext, name: str, value: str
) -> None:
    assert f'    <log4j:data name="{name}" value="{value}"/>\r\n' in ctx.output


@then(parsers.parse('the location method is written as "{escaped}"'))
def then_location_method(ctx: EncodingScenarioContext, escaped: str) -> None:
    assert f'method="{escaped}"' in ctx.output


@then(parsers.parse('the throwable section holds "{line}"'))
def then_throwable(ctx: EncodingScenarioContext, line: str) -> None:
    assert (
        f"<log4j:throwable><![CDATA[{line}\r\n]]></log4j:throwable>" in ctx.output
    )
