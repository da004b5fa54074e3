"""
Parsing of glyph records. A record looks like this (the amount of
whitespace between the fields varies between generators):

    char id=65 x=3 y=0 width=8 height=10 xoffset=0 yoffset=3 xadvance=8 page=0 chnl=15

Only the first seven fields are used, the rest is ignored.
"""

import re

from .._errors import FontFormatError
from ._glyph import GlyphMetrics


# The required fields, in the order in which they must appear
RECORD_FIELDS = ("id", "x", "y", "width", "height", "xoffset", "yoffset")

# Leading sign and digits, like strtol(s, NULL, 10)
_int_prefix = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(text):
    """Parse the leading base-10 integer of a string, or return None.

    Parsing stops at the first non-digit, so "12px" gives 12. Hex and
    floating point notations are not supported ("1.5" gives 1).
    """
    m = _int_prefix.match(text)
    if m is None:
        return None
    return int(m.group(1))


def parse_field(token, name, lineno):
    """Parse a "name=value" token and return the value as an int."""
    key, sep, value = token.partition("=")
    if key != name:
        raise FontFormatError(
            f"expected '{name}=<int>', got '{token}'", lineno=lineno, field=name
        )
    if not sep:
        raise FontFormatError(f"missing '=' in '{token}'", lineno=lineno, field=name)
    ival = parse_int(value)
    if ival is None:
        raise FontFormatError(
            f"value '{value}' is not an integer", lineno=lineno, field=name
        )
    return ival


def parse_record(line, lineno):
    """Parse a glyph record line into a (codepoint, GlyphMetrics) tuple.

    The first token (the record tag) is skipped. Raises ``FontFormatError``
    with the line number and the name of the offending field if the line
    does not contain the seven required fields.
    """
    tokens = line.split()[1:]
    values = []
    for i, name in enumerate(RECORD_FIELDS):
        if i >= len(tokens):
            raise FontFormatError(
                f"too few fields, missing '{name}'", lineno=lineno, field=name
            )
        values.append(parse_field(tokens[i], name, lineno))

    codepoint, x, y, width, height, xoffset, yoffset = values
    metrics = GlyphMetrics((x, y), (width, height), (xoffset, yoffset))
    return codepoint, metrics
