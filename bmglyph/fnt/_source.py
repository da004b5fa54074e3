"""
Reading the text of a BMFont description from disk.
"""

import os

from .._errors import FontFileIOError


def read_font_text(path):
    """Read the full text of the font description at the given path.

    Raises ``FontFileIOError`` if the file cannot be opened or read. Bytes
    that are not valid utf-8 (e.g. in a latin-1 face name) are replaced,
    since only the ascii glyph records are interpreted.
    """
    if not isinstance(path, (str, bytes, os.PathLike)):
        cls = type(path).__name__
        raise TypeError(f"Font path must be str or path-like, not '{cls}'")
    try:
        with open(path, "rt", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as err:
        raise FontFileIOError(os.fsdecode(path), err.strerror or str(err)) from err
