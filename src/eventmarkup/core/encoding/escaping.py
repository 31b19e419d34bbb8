"""Text-safety transforms for event markup.

Two transforms exist: one makes arbitrary text safe inside a CDATA block,
the other makes text safe inside an attribute value or element text.
Neither ever fails.
"""

CDATA_START = "<![CDATA["
CDATA_END = "]]>"

# Closes the current block after "]]" and reopens a new one before ">".
CDATA_EMBEDDED_END = "]]" + CDATA_END + CDATA_START + ">"

_TAG_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}


def escape_cdata(text: str | None) -> str:
    """Split text so it can be embedded in a CDATA block.

    Every "]]>" is replaced so that the block ends after "]]" and a new
    block starts before ">". Concatenating the contents of the resulting
    blocks yields the original text.

    Args:
        text: Text to embed. None is treated as empty.

    Returns:
        The escaped text, identical to the input when it holds no "]]>".
    """
    if not text:
        return ""
    if CDATA_END not in text:
        return text
    return text.replace(CDATA_END, CDATA_EMBEDDED_END)


def escape_tags(text: str | None) -> str:
    """Replace markup-significant characters with named entities.

    Runs in a single pass, so already escaped text is escaped again.

    Args:
        text: Text to escape. None is treated as empty.

    Returns:
        The escaped text, identical to the input when nothing needs escaping.
    """
    if not text:
        return ""
    return "".join(_TAG_ENTITIES.get(char, char) for char in text)
