class GlyphMetrics:
    """The metrics of a single glyph in a glyph atlas.

    Parameters:
        position (tuple): The (x, y) pixel coordinate of the top-left corner
            of the glyph's box in the atlas image.
        size (tuple): The (width, height) of the glyph's box, in pixels.
        offset (tuple): The (x, y) displacement, in pixels, to apply when
            placing the glyph relative to the text cursor.

    Instances are immutable and compare (and hash) by value.
    """

    __slots__ = ["_position", "_size", "_offset"]

    def __init__(self, position, size, offset):
        self._position = self._as_pair(position, "position")
        self._size = self._as_pair(size, "size")
        self._offset = self._as_pair(offset, "offset")

    @staticmethod
    def _as_pair(value, name):
        try:
            a, b = value
        except (TypeError, ValueError):
            raise TypeError(f"GlyphMetrics {name} must be a pair of ints") from None
        return int(a), int(b)

    def __setattr__(self, name, value):
        if hasattr(self, "_offset"):
            raise AttributeError("GlyphMetrics is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self):
        return (
            f"<GlyphMetrics position={self._position} size={self._size} "
            f"offset={self._offset}>"
        )

    def __eq__(self, other):
        if not isinstance(other, GlyphMetrics):
            return NotImplemented
        return (
            self._position == other._position
            and self._size == other._size
            and self._offset == other._offset
        )

    def __hash__(self):
        return hash((self._position, self._size, self._offset))

    @property
    def position(self):
        """The (x, y) of the glyph's box in the atlas."""
        return self._position

    @property
    def size(self):
        """The (width, height) of the glyph's box."""
        return self._size

    @property
    def offset(self):
        """The (x, y) offset to apply when placing the glyph."""
        return self._offset

    @property
    def x(self):
        return self._position[0]

    @property
    def y(self):
        return self._position[1]

    @property
    def width(self):
        return self._size[0]

    @property
    def height(self):
        return self._size[1]

    @property
    def xoffset(self):
        return self._offset[0]

    @property
    def yoffset(self):
        return self._offset[1]

    def as_dict(self):
        """Get the metrics as a dict with keys position, size and offset."""
        return {"position": self._position, "size": self._size, "offset": self._offset}
