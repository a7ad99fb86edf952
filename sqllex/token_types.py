"""
Token kinds for the SQL lexer.
Provides the closed classification every emitted token falls into.
"""

from enum import Enum, auto


class TokenKind(Enum):
    # Layout
    WHITESPACE = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()

    # Quoted
    QUOTED_STRING = auto()
    BACKTICK_QUOTED = auto()

    # Literals and placeholders
    VARIABLE = auto()
    NUMBER = auto()

    # Punctuation
    BOUNDARY = auto()

    # Keywords
    RESERVED = auto()
    RESERVED_TOPLEVEL = auto()
    RESERVED_NEWLINE = auto()

    # Anything else
    WORD = auto()


# Single punctuation characters with structural meaning
BOUNDARY_CHARACTERS = ",;:)(.=<>+-*/!^%|&#"

# Characters that open a quoted string or quoted identifier
QUOTE_CHARACTERS = "`[\"'"

# Quote characters that end a word or number
WORD_QUOTE_CHARACTERS = "\"'`"

VARIABLE_SIGILS = "@:"

COMMENT_KINDS = frozenset({TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT})

RESERVED_KINDS = frozenset({
    TokenKind.RESERVED,
    TokenKind.RESERVED_TOPLEVEL,
    TokenKind.RESERVED_NEWLINE,
})

QUOTED_KINDS = frozenset({TokenKind.QUOTED_STRING, TokenKind.BACKTICK_QUOTED})
