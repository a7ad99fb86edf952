"""
sqllex
A lexical analyzer that slices SQL text into classified tokens for formatting.

Version: 0.1.0
"""

__version__ = "0.1.0"

from typing import List, Optional

from .config import TokenizerConfig
from .errors import SqlLexError, LexError, ConfigError
from .token_types import TokenKind
from .token import Token
from .tokenizer import Tokenizer

__all__ = [
    "Tokenizer",
    "TokenizerConfig",
    "TokenKind",
    "Token",
    "SqlLexError",
    "LexError",
    "ConfigError",
    "tokenize_sql",
    "tokenize_file",
]


def tokenize_sql(source: str, config: Optional[TokenizerConfig] = None,
                 filename: Optional[str] = None) -> List[Token]:
    """
    Tokenize SQL source text.

    Args:
        source: The SQL text to tokenize
        config: Keyword configuration, the standard SQL lists when omitted
        filename: Optional filename for error reporting

    Returns:
        The token list
    """
    tokenizer = Tokenizer(config if config is not None else TokenizerConfig.standard())
    return tokenizer.tokenize(source, filename)


def tokenize_file(filename: str, config: Optional[TokenizerConfig] = None,
                  encoding: str = "utf-8") -> List[Token]:
    """
    Tokenize a SQL source file.

    The file is read without newline translation so the tokens reproduce
    its contents exactly.
    """
    with open(filename, "r", encoding=encoding, newline="") as file:
        source = file.read()
    return tokenize_sql(source, config, filename)
