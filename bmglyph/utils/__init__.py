"""
Utility functions for bmglyph.

.. currentmodule:: bmglyph.utils

.. autosummary::
    :toctree: utils/

    ReadOnlyDict
    get_resources_dir
    get_sample_font_path
    get_env_int

"""

import os
import logging

from ._dirs import get_resources_dir, get_sample_font_path  # noqa: F401

logger = logging.getLogger("bmglyph")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("BMGLYPH_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid bmglyph log level: {level}")


_set_log_level()


def get_env_int(name, default=0):
    """Get an integer setting from the environment variable with the given name.

    Returns the default if the variable is unset or empty. An invalid value
    is logged and the default is used instead.
    """
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}, using {default}")
        return default


class ReadOnlyDict(dict):
    """A dict that cannot be modified after creation. Used as the storage
    of a GlyphTable, so the table stays immutable once built.
    """

    __slots__ = []

    def __setitem__(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def __delitem__(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def __ior__(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def clear(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def pop(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def popitem(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def setdefault(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def update(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")
