"""
SQL tokenizer.
Turns SQL text into a loss-less sequence of classified tokens for a formatter.
"""

import logging
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Optional

from .config import TokenizerConfig
from .errors import ConfigError, LexError
from .matchers import Matcher, Match, build_matchers
from .token import Token

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Priority-ordered matcher chain built once from a keyword configuration.

    The tokenizer holds no per-call state: the remaining input and the
    previous token live inside each ``tokenize`` call, so one instance can
    serve concurrent callers.
    """

    def __init__(self, config, matchers: Optional[Iterable[Matcher]] = None):
        if isinstance(config, Mapping):
            config = TokenizerConfig.from_dict(config)
        if config is not None and not isinstance(config, TokenizerConfig):
            raise ConfigError(f"Expected a TokenizerConfig, got {type(config).__name__}")

        self.config = config
        if matchers is not None:
            self.matchers = tuple(matchers)
        elif config is not None:
            self.matchers = build_matchers(config)
        else:
            raise ConfigError("A tokenizer needs a keyword configuration or a matcher chain")

    @classmethod
    def from_matchers(cls, matchers: Iterable[Matcher]) -> "Tokenizer":
        """Build a tokenizer around an explicit matcher chain."""
        return cls(None, matchers=matchers)

    def next_match(self, text: str, previous: Optional[Token] = None, pos: int = 0) -> Optional[Match]:
        """Return the winning ``(kind, text)`` for ``text[pos:]``, or None if nothing matches."""
        for matcher in self.matchers:
            result = matcher.match(text, previous, pos)
            if result and result[1]:
                return result
        return None

    def iter_tokens(self, text: str, filename: Optional[str] = None) -> Iterator[Token]:
        """
        Lazily tokenize ``text``.

        Args:
            text: SQL source
            filename: Optional name used in error messages

        Yields:
            Tokens whose texts concatenate back to ``text``.
        """
        pos = 0
        line = 1
        column = 1
        previous = None
        length = len(text)

        while pos < length:
            result = self.next_match(text, previous, pos)
            if result is None or not text.startswith(result[1], pos):
                logger.error("No matcher consumed input at offset %d (line %d, column %d)",
                             pos, line, column)
                raise LexError(
                    f"Unable to tokenize input starting with {text[pos:pos + 20]!r}",
                    pos, line, column, filename,
                )

            kind, value = result
            token = Token(kind, value, pos, line, column)
            yield token

            newlines = value.count("\n")
            if newlines:
                line += newlines
                column = len(value) - value.rfind("\n")
            else:
                column += len(value)
            pos += len(value)
            previous = token

    def tokenize(self, text: str, filename: Optional[str] = None) -> List[Token]:
        """
        Tokenize the entire input.

        Returns an empty list for empty input. Raises ``LexError`` only if
        the matcher chain fails to make progress.
        """
        logger.debug("Tokenizing %d characters", len(text))
        tokens = list(self.iter_tokens(text, filename))
        logger.debug("Produced %d tokens", len(tokens))
        return tokens
