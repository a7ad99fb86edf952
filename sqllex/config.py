"""
Keyword configuration for the tokenizer.
"""

import json
import logging
from dataclasses import dataclass, fields
from collections.abc import Iterable, Mapping
from typing import Any, Tuple

from . import keywords
from .errors import ConfigError

logger = logging.getLogger(__name__)

# Accepted spellings for each field in mappings and JSON documents
_FIELD_ALIASES = {
    "reserved_words": ("reserved_words", "reservedWords"),
    "reserved_toplevel_words": ("reserved_toplevel_words", "reservedToplevelWords"),
    "reserved_newline_words": ("reserved_newline_words", "reservedNewlineWords"),
    "function_words": ("function_words", "functionWords"),
}


def _normalize_words(name: str, words: Any) -> Tuple[str, ...]:
    if isinstance(words, str) or not isinstance(words, Iterable):
        raise ConfigError(f"'{name}' must be a sequence of strings, got {type(words).__name__}")

    normalized = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ConfigError(
                f"'{name}[{index}]' must be a string, got {type(word).__name__}"
            )
        if not word.strip():
            # An empty alternative would let the rule match the empty string
            raise ConfigError(f"'{name}[{index}]' is empty")
        normalized.append(word)
    return tuple(normalized)


@dataclass(frozen=True)
class TokenizerConfig:
    """The four case-insensitive keyword lists a tokenizer is built from.

    Empty lists are allowed and mean the category never matches.
    """

    reserved_words: Tuple[str, ...]
    reserved_toplevel_words: Tuple[str, ...]
    reserved_newline_words: Tuple[str, ...]
    function_words: Tuple[str, ...]

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, _normalize_words(f.name, getattr(self, f.name)))

    @classmethod
    def standard(cls) -> "TokenizerConfig":
        """Standard SQL keyword lists."""
        return cls(
            reserved_words=keywords.RESERVED_WORDS,
            reserved_toplevel_words=keywords.RESERVED_TOPLEVEL_WORDS,
            reserved_newline_words=keywords.RESERVED_NEWLINE_WORDS,
            function_words=keywords.FUNCTION_WORDS,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenizerConfig":
        """
        Build a config from a mapping.

        Args:
            data: Mapping with the four keyword lists, keyed by either the
                snake_case field names or their camelCase spellings.

        Returns:
            The validated configuration.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Keyword configuration must be a mapping, got {type(data).__name__}")

        values = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    values[name] = data[alias]
                    break
            else:
                raise ConfigError(f"Missing keyword list '{aliases[1]}'")
        return cls(**values)

    @classmethod
    def from_json_file(cls, path: str, encoding: str = "utf-8") -> "TokenizerConfig":
        """Load a config from a JSON document with the four keyword lists."""
        try:
            with open(path, "r", encoding=encoding) as fp:
                data = json.load(fp)
        except OSError as e:
            raise ConfigError(f"Cannot read keyword configuration: {e}", filename=path) from e
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in keyword configuration: {e.msg}",
                offset=e.pos, line=e.lineno, column=e.colno, filename=path,
            ) from e

        logger.debug("Loaded keyword configuration from %s", path)
        try:
            return cls.from_dict(data)
        except ConfigError as e:
            e.filename = path
            raise
