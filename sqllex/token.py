"""
Token class for representing lexical tokens.
"""

from dataclasses import dataclass, field

from .token_types import TokenKind, COMMENT_KINDS, RESERVED_KINDS, QUOTED_KINDS


@dataclass(frozen=True)
class Token:
    """A classified slice of the input with position information.

    Positions are informational only and are left out of equality, so
    ``Token(TokenKind.WORD, "t")`` equals any emitted ``t`` word.
    """

    kind: TokenKind
    text: str
    offset: int = field(default=0, compare=False)
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __str__(self):
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    def is_kind(self, kind: TokenKind) -> bool:
        """Check if token is of specified kind."""
        return self.kind == kind

    def is_whitespace(self) -> bool:
        return self.kind == TokenKind.WHITESPACE

    def is_comment(self) -> bool:
        """Check if token is a line or block comment."""
        return self.kind in COMMENT_KINDS

    def is_reserved(self) -> bool:
        """Check if token is any flavour of reserved word, function names included."""
        return self.kind in RESERVED_KINDS

    def is_quoted(self) -> bool:
        return self.kind in QUOTED_KINDS

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.name,
            "text": self.text,
            "offset": self.offset,
            "line": self.line,
            "column": self.column,
        }
