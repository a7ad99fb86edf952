"""
Matcher chain for the SQL tokenizer.

Every matcher is a stateless object with one capability: look at the
remaining input ``text[pos:]`` (plus the previously emitted token) and
either claim a prefix of it as ``(kind, matched_text)`` or return None.
Matchers are built once from a ``TokenizerConfig`` and never mutated, so a
chain can be shared by any number of concurrent ``tokenize`` calls.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, Tuple

from .config import TokenizerConfig
from .errors import ConfigError
from .token import Token
from .token_types import (
    TokenKind,
    BOUNDARY_CHARACTERS,
    QUOTE_CHARACTERS,
    WORD_QUOTE_CHARACTERS,
    VARIABLE_SIGILS,
)

logger = logging.getLogger(__name__)

Match = Tuple[TokenKind, str]

BOUNDARY_CLASS = "[" + re.escape(BOUNDARY_CHARACTERS) + "]"
WORD_QUOTE_CLASS = "[" + re.escape(WORD_QUOTE_CHARACTERS) + "]"

# What may follow a keyword: end of input, whitespace or a boundary character
KEYWORD_END = rf"(?=\Z|\s|{BOUNDARY_CLASS})"

# Numbers may additionally be followed directly by a quote character
NUMBER_END = rf"(?=\Z|\s|{WORD_QUOTE_CLASS}|{BOUNDARY_CLASS})"

# Four quoting styles, each gluing consecutive segments into one match:
# 1. backtick quoted, `` escapes a backtick
# 2. square bracket quoted, ]] escapes a closing bracket
# 3. double quoted, "" or \" escapes a quote
# 4. single quoted, '' or \' escapes a quote
# An unterminated quote runs to the end of input.
QUOTED_STRING_PATTERN = re.compile(
    r"(?:`[^`]*(?:`|\Z))+"
    r"|\[[^\]]*(?:\]|\Z)(?:\][^\]]*(?:\]|\Z))*"
    r'|(?:"[^"\\]*(?:\\(?:.|\Z)[^"\\]*)*(?:"|\Z))+'
    r"|(?:'[^'\\]*(?:\\(?:.|\Z)[^'\\]*)*(?:'|\Z))+",
    re.DOTALL,
)


def match_quoted_string(text: str, pos: int = 0) -> Optional[str]:
    """Return the quoted string starting at ``pos``, or None if none starts there."""
    m = QUOTED_STRING_PATTERN.match(text, pos)
    if m:
        return m.group(0)
    return None


class Matcher(ABC):
    """A single rule of the tokenizer's priority chain."""

    @abstractmethod
    def match(self, text: str, previous: Optional[Token] = None, pos: int = 0) -> Optional[Match]:
        """
        Try to claim a prefix of ``text[pos:]``.

        Args:
            text: The input being tokenized
            previous: The most recently emitted token, None at the start
            pos: Offset where the remaining input begins

        Returns:
            ``(kind, matched_text)`` or None if the rule does not apply.
        """


class RegexMatcher(Matcher):
    """Claims whatever ``pattern`` matches when anchored at the current offset."""

    def __init__(self, kind: TokenKind, pattern: re.Pattern):
        self.kind = kind
        self.pattern = pattern

    def match(self, text, previous=None, pos=0):
        m = self.pattern.match(text, pos)
        if m:
            return (self.kind, m.group(0))
        return None

    def __repr__(self):
        return f"{self.__class__.__name__}({self.kind.name}, {self.pattern.pattern[:40]!r})"


class FirstOfMatcher(Matcher):
    """Tries each member in order; the first success wins."""

    def __init__(self, matchers: Iterable[Matcher]):
        self.matchers = tuple(matchers)

    def match(self, text, previous=None, pos=0):
        for matcher in self.matchers:
            result = matcher.match(text, previous, pos)
            if result:
                return result
        return None

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self.matchers)!r})"


class WhitespaceMatcher(RegexMatcher):
    def __init__(self):
        super().__init__(TokenKind.WHITESPACE, re.compile(r"\s+"))


class LineCommentMatcher(RegexMatcher):
    """``#`` or ``--`` up to and including the next newline."""

    def __init__(self):
        super().__init__(TokenKind.LINE_COMMENT, re.compile(r"(?:#|--)[^\n]*(?:\n|\Z)"))


class BlockCommentMatcher(RegexMatcher):
    """``/* ... */``, running to the end of input when unterminated."""

    def __init__(self):
        super().__init__(TokenKind.BLOCK_COMMENT, re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL))


class CommentMatcher(FirstOfMatcher):
    def __init__(self):
        super().__init__([LineCommentMatcher(), BlockCommentMatcher()])


class QuotedStringMatcher(Matcher):
    """
    Quoted strings and quoted identifiers.

    Backtick and bracket quoting produce BACKTICK_QUOTED, double and single
    quotes produce QUOTED_STRING.
    """

    def match(self, text, previous=None, pos=0):
        if pos >= len(text) or text[pos] not in QUOTE_CHARACTERS:
            return None

        value = match_quoted_string(text, pos)
        if not value:
            return None
        if text[pos] in "`[":
            return (TokenKind.BACKTICK_QUOTED, value)
        return (TokenKind.QUOTED_STRING, value)


class VariableMatcher(Matcher):
    """``@name`` / ``:name`` placeholders, optionally with a quoted name."""

    NAME_PATTERNS = {
        sigil: re.compile(re.escape(sigil) + r"[a-zA-Z0-9._$]+")
        for sigil in VARIABLE_SIGILS
    }

    def match(self, text, previous=None, pos=0):
        if pos + 1 >= len(text) or text[pos] not in VARIABLE_SIGILS:
            return None

        sigil = text[pos]
        if text[pos + 1] in WORD_QUOTE_CHARACTERS:
            quoted = match_quoted_string(text, pos + 1)
            if quoted:
                return (TokenKind.VARIABLE, sigil + quoted)
            return None

        m = self.NAME_PATTERNS[sigil].match(text, pos)
        if m:
            return (TokenKind.VARIABLE, m.group(0))
        return None


class NumberMatcher(RegexMatcher):
    """
    Decimal, hexadecimal and binary numbers.

    A leading minus may be separated from the digits by whitespace, so
    ``- 5`` is a single number.
    """

    def __init__(self):
        super().__init__(
            TokenKind.NUMBER,
            re.compile(
                r"(?:(?:-\s*)?[0-9]+(?:\.[0-9]+)?|0x[0-9a-fA-F]+|0b[01]+)" + NUMBER_END
            ),
        )


class BoundaryMatcher(RegexMatcher):
    def __init__(self):
        super().__init__(TokenKind.BOUNDARY, re.compile(BOUNDARY_CLASS))


def keyword_alternation(words: Sequence[str]) -> Optional[str]:
    """
    Join keywords into a regex alternation.

    Duplicates (compared case-insensitively) are dropped and longer entries
    come first so "ORDER BY" is preferred over "ORDER". Returns None for an
    empty list.
    """
    unique = {}
    for word in words:
        if not word.strip():
            raise ConfigError("Keyword list contains an empty entry")
        unique.setdefault(word.lower(), word)

    if not unique:
        return None
    ordered = sorted(unique.values(), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(word) for word in ordered) + ")"


class KeywordMatcher(Matcher):
    """Case-insensitive match against a keyword list, followed by ``terminator``."""

    def __init__(self, kind: TokenKind, words: Sequence[str], terminator: str = KEYWORD_END):
        self.kind = kind
        alternation = keyword_alternation(words)
        self.pattern = None
        if alternation:
            self.pattern = re.compile(alternation + terminator, re.IGNORECASE)

    def match(self, text, previous=None, pos=0):
        if self.pattern is None:
            return None
        m = self.pattern.match(text, pos)
        if m:
            return (self.kind, m.group(0))
        return None

    def __repr__(self):
        state = "empty" if self.pattern is None else "compiled"
        return f"{self.__class__.__name__}({self.kind.name}, {state})"


class ReservedWordMatcher(FirstOfMatcher):
    """
    Toplevel, then newline, then plain reserved words.

    Skipped right after a ``.`` token: in ``mytable.from`` the member name
    is never a keyword.
    """

    def __init__(self, config: TokenizerConfig):
        super().__init__([
            KeywordMatcher(TokenKind.RESERVED_TOPLEVEL, config.reserved_toplevel_words),
            KeywordMatcher(TokenKind.RESERVED_NEWLINE, config.reserved_newline_words),
            KeywordMatcher(TokenKind.RESERVED, config.reserved_words),
        ])

    def match(self, text, previous=None, pos=0):
        if previous is not None and previous.text == ".":
            return None
        return super().match(text, previous, pos)


class FunctionWordMatcher(KeywordMatcher):
    """A function name immediately followed by ``(``; the paren is not consumed."""

    def __init__(self, config: TokenizerConfig):
        super().__init__(TokenKind.RESERVED, config.function_words, terminator=r"(?=\()")


class WordMatcher(RegexMatcher):
    """Fallback: everything up to the next whitespace, quote or boundary character."""

    def __init__(self):
        super().__init__(
            TokenKind.WORD,
            re.compile(rf"[^\s{re.escape(WORD_QUOTE_CHARACTERS + BOUNDARY_CHARACTERS)}]+"),
        )


def build_matchers(config: TokenizerConfig) -> Tuple[Matcher, ...]:
    """Build the priority-ordered matcher chain for ``config``."""
    if not isinstance(config, TokenizerConfig):
        raise ConfigError(f"Expected a TokenizerConfig, got {type(config).__name__}")

    matchers = (
        WhitespaceMatcher(),
        CommentMatcher(),
        QuotedStringMatcher(),
        VariableMatcher(),
        NumberMatcher(),
        BoundaryMatcher(),
        ReservedWordMatcher(config),
        FunctionWordMatcher(config),
        WordMatcher(),
    )
    logger.debug(
        "Built %d matchers (%d toplevel, %d newline, %d reserved, %d function words)",
        len(matchers),
        len(config.reserved_toplevel_words),
        len(config.reserved_newline_words),
        len(config.reserved_words),
        len(config.function_words),
    )
    return matchers
