"""
Error types for the SQL lexer.

Malformed SQL is never an error at this layer. Only a broken matcher chain
(no progress on non-empty input) and a broken keyword configuration raise.
"""


class SqlLexError(Exception):
    """Base class for all sqllex errors."""

    def __init__(self, message, offset=None, line=None, column=None, filename=None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        location = ""
        if self.filename:
            location += f"File \"{self.filename}\""
        if self.line is not None:
            location += f", line {self.line}"
        if self.column is not None:
            location += f", column {self.column}"
        if self.offset is not None and self.line is None:
            location += f", offset {self.offset}"

        location = location.lstrip(", ")
        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class LexError(SqlLexError):
    """The matcher chain failed to consume input at ``offset``."""

    def __init__(self, message, offset, line=None, column=None, filename=None):
        super().__init__(message, offset, line, column, filename)


class ConfigError(SqlLexError):
    """Keyword configuration cannot produce a well-formed matcher chain."""
    pass
