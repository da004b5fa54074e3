"""
Loading glyph metrics from BMFont descriptions, in three stages:

* Reading the text of the .fnt file
* Scanning past the header to the first glyph record
* Parsing the glyph records into a GlyphTable

Rasterization, atlas image decoding and text layout are not done here; this
subpackage only provides the per-glyph rectangles and offsets.
"""

from ._glyph import GlyphMetrics  # noqa: F401
from ._table import GlyphTable, GLYPH_DTYPE  # noqa: F401
from ._source import read_font_text  # noqa: F401
from ._scanner import find_first_record, is_record_line  # noqa: F401
from ._parser import parse_record, parse_int, RECORD_FIELDS  # noqa: F401


build = GlyphTable.from_file


def lookup(table, codepoint):
    """Get the GlyphMetrics for the codepoint from the table, or None."""
    return table.lookup(codepoint)


def destroy(table):
    """Release the given table."""
    table.destroy()
