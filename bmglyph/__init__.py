"""Load glyph metrics from BMFont descriptions."""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils

from ._errors import FontFileIOError, FontFormatError
from .fnt import GlyphMetrics, GlyphTable, build, lookup, destroy
from .utils import logger, get_sample_font_path
