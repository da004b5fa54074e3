import numpy as np

from ..utils import logger, get_env_int, ReadOnlyDict
from .._errors import FontFormatError
from ._source import read_font_text
from ._scanner import find_first_record
from ._parser import parse_record


# Line tags that start the kerning section, which follows the glyph records
KERNING_TAGS = ("kernings", "kerning")

# The dtype of the array produced by GlyphTable.to_array()
GLYPH_DTYPE = [
    ("codepoint", np.int32),
    ("origin", np.int32, 2),
    ("size", np.int32, 2),
    ("offset", np.int32, 2),
]


def _parse_glyphs(lines, max_line_length):
    """Parse the lines of a font description into a dict of glyphs,
    and a list of (codepoint, lineno) for the discarded duplicates.
    """
    for lineno, line in enumerate(lines, 1):
        if max_line_length > 0 and len(line) > max_line_length:
            raise FontFormatError(
                f"line is longer than {max_line_length} characters", lineno=lineno
            )

    glyphs = {}
    duplicates = []
    first = find_first_record(lines)
    for index in range(first, len(lines)):
        lineno = index + 1
        line = lines[index]
        tokens = line.split(None, 1)
        if not tokens:
            continue  # blank line
        if tokens[0] in KERNING_TAGS:
            break
        codepoint, metrics = parse_record(line, lineno)
        if codepoint in glyphs:
            logger.warning(
                f"Duplicate glyph {codepoint} on line {lineno} is ignored, "
                "the first definition is used."
            )
            duplicates.append((codepoint, lineno))
        else:
            glyphs[codepoint] = metrics
    return glyphs, duplicates


class GlyphTable:
    """An immutable mapping of codepoints to glyph metrics, loaded from a
    BMFont description (.fnt file in the text format).

    Use ``GlyphTable.from_file()`` or ``GlyphTable.from_text()`` to
    create a table. A table is owned by whoever created it, and should be
    released with ``destroy()`` when no longer needed. The table can also
    be used as a context manager, which destroys it on exit.

    Once created, the table never changes, so it can be read from multiple
    threads without locking, as long as it is not destroyed in the meantime.
    """

    def __init__(self, glyphs, duplicates=(), source=None):
        self._glyphs = ReadOnlyDict(glyphs)
        self._duplicates = tuple(duplicates)
        self._source = source

    @classmethod
    def from_text(cls, text, source=None, *, max_line_length=None):
        """Build a table from the text of a font description.

        Parameters:
            text (str): The full contents of a .fnt file.
            source (str, None): Where the text came from, used in the repr.
            max_line_length (int, None): If positive, lines that are longer
                raise a ``FontFormatError``. Zero or less means no limit.
                Defaults to the value of the ``BMGLYPH_MAX_LINE_LENGTH``
                environment variable, or no limit.

        Raises ``FontFormatError`` if the text has no glyph records or a
        record is malformed.
        """
        if not isinstance(text, str):
            cls_name = type(text).__name__
            raise TypeError(f"Font text must be str, not '{cls_name}'")
        if max_line_length is None:
            max_line_length = get_env_int("BMGLYPH_MAX_LINE_LENGTH", 0)

        # Only "\n" separates lines, other control characters are part of a line
        lines = text.split("\n")
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        glyphs, duplicates = _parse_glyphs(lines, max_line_length)
        table = cls(glyphs, duplicates, source)
        logger.debug(
            f"Loaded {len(glyphs)} glyphs from {source or 'text'}"
            f" ({len(duplicates)} duplicates ignored)"
        )
        return table

    @classmethod
    def from_file(cls, path, *, max_line_length=None):
        """Build a table from a .fnt file.

        Raises ``FontFileIOError`` if the file cannot be read, and
        ``FontFormatError`` if its contents are malformed.
        """
        text = read_font_text(path)
        return cls.from_text(text, str(path), max_line_length=max_line_length)

    def __repr__(self):
        if self._glyphs is None:
            return f"<GlyphTable (destroyed) at {hex(id(self))}>"
        source = f" from {self._source}" if self._source else ""
        count = len(self._glyphs)
        return f"<GlyphTable with {count} glyphs{source} at {hex(id(self))}>"

    def __enter__(self):
        self._check_alive()
        return self

    def __exit__(self, type, value, tb):
        if self._glyphs is not None:
            self.destroy()

    def _check_alive(self):
        if self._glyphs is None:
            raise RuntimeError("Cannot use a GlyphTable after it has been destroyed.")

    def __len__(self):
        self._check_alive()
        return len(self._glyphs)

    def __contains__(self, codepoint):
        self._check_alive()
        return codepoint in self._glyphs

    def __iter__(self):
        self._check_alive()
        return iter(self._glyphs)

    @property
    def source(self):
        """The path (or other description) of where the table was loaded from."""
        return self._source

    @property
    def is_destroyed(self):
        """Whether ``destroy()`` has been called."""
        return self._glyphs is None

    @property
    def duplicates(self):
        """A tuple of (codepoint, lineno) for records that were ignored
        because their codepoint was already defined earlier in the file.
        """
        return self._duplicates

    @property
    def codepoints(self):
        """A tuple with the codepoints in the table, in file order."""
        self._check_alive()
        return tuple(self._glyphs.keys())

    def items(self):
        """Get a list of (codepoint, GlyphMetrics) tuples, in file order."""
        self._check_alive()
        return list(self._glyphs.items())

    def lookup(self, codepoint):
        """Get the GlyphMetrics for the given codepoint, or None if the
        table has no such glyph. The codepoint must be an int.
        """
        self._check_alive()
        if not isinstance(codepoint, (int, np.integer)):
            cls = type(codepoint).__name__
            raise TypeError(f"Codepoint must be int, not '{cls}'")
        codepoint = int(codepoint)
        metrics = self._glyphs.get(codepoint)
        if metrics is None:
            logger.debug(f"Glyph not in table: {codepoint}")
        return metrics

    def to_array(self):
        """Get the glyph metrics as a numpy structured array, with fields
        codepoint, origin, size and offset. Handy to upload the metrics
        to a GPU buffer.
        """
        self._check_alive()
        array = np.zeros((len(self._glyphs),), GLYPH_DTYPE)
        for i, (codepoint, metrics) in enumerate(self._glyphs.items()):
            info = array[i]
            info["codepoint"] = codepoint
            info["origin"] = metrics.position
            info["size"] = metrics.size
            info["offset"] = metrics.offset
        return array

    def destroy(self):
        """Release the table. Any further use of the table raises a RuntimeError."""
        self._check_alive()
        logger.debug(f"Destroying {self!r}")
        self._glyphs = None
        self._duplicates = ()
