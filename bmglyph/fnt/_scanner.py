from .._errors import FontFormatError


RECORD_TAG = "char"


def is_record_line(line):
    """Get whether the line is a glyph record, i.e. whether its first
    token is exactly "char". A summary line like "chars count=95"
    is not a record.
    """
    tokens = line.split(None, 1)
    return bool(tokens) and tokens[0] == RECORD_TAG


def find_first_record(lines):
    """Return the index of the first glyph record in the given list of lines.

    Raises ``FontFormatError`` if there is no glyph record at all.
    """
    for index, line in enumerate(lines):
        if is_record_line(line):
            return index
    raise FontFormatError(f"no glyph-record section in {len(lines)} line(s)")
