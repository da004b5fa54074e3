"""
Exceptions raised while loading BMFont descriptions.

Both classes subclass a builtin exception, so that callers can catch
either the specific error or the generic ``OSError`` / ``ValueError``.
"""


class FontFileIOError(OSError):
    """Raised when a font description file cannot be opened or read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f"Could not read BMFont file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class FontFormatError(ValueError):
    """Raised when a font description is malformed.

    Parameters:
        message (str): Description of the problem.
        lineno (int, None): The 1-based number of the offending line, or None
            if the problem does not concern a specific line.
        field (str, None): The name of the missing or invalid field, if any.
    """

    def __init__(self, message, lineno=None, field=None):
        self.message = message
        self.lineno = lineno
        self.field = field
        super().__init__(message, lineno, field)

    def __str__(self):
        where = []
        if self.lineno is not None:
            where.append(f"line {self.lineno}")
        if self.field is not None:
            where.append(f"field '{self.field}'")
        if where:
            return f"BMFont malformed ({', '.join(where)}): {self.message}"
        return f"BMFont malformed: {self.message}"
