#!/usr/bin/env python3
"""
sqllex Command Line Interface
Tokenizes SQL from a file, a command-line string or an interactive prompt.
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

import sqllex

logger = logging.getLogger("sqllex.cli")


def format_tokens(tokens: List[sqllex.Token], as_json: bool = False,
                  skip_whitespace: bool = False) -> str:
    """Render tokens one per line, or as a JSON array."""
    if skip_whitespace:
        tokens = [token for token in tokens if not token.is_whitespace()]

    if as_json:
        return json.dumps([token.to_dict() for token in tokens], indent=2, ensure_ascii=False)

    lines = []
    for token in tokens:
        lines.append(f"{token.line}:{token.column}\t{token.kind.name:<18}\t{token.text!r}")
    return "\n".join(lines)


def interactive(tokenizer: sqllex.Tokenizer, args) -> None:
    """Tokenize each line typed at the prompt."""
    print("sqllex interactive tokenizer")
    print(f"Version {sqllex.__version__}")
    print("Type 'exit' or 'quit' to leave.\n")

    while True:
        try:
            line = input("sqllex> ")

            if line.strip().lower() in ['exit', 'quit']:
                print("Goodbye!")
                break

            if line.strip() == '':
                continue

            tokens = tokenizer.tokenize(line, "<stdin>")
            print(format_tokens(tokens, args.json, args.no_whitespace))

        except sqllex.SqlLexError as e:
            print(str(e), file=sys.stderr)
        except KeyboardInterrupt:
            print("\nKeyboardInterrupt")
            break
        except EOFError:
            print("\nGoodbye!")
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqllex",
        description="SQL lexical analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Interactive prompt
  %(prog)s query.sql                    # Tokenize a SQL file
  %(prog)s -c "SELECT * FROM t"         # Tokenize a string directly
  %(prog)s --config words.json q.sql    # Use custom keyword lists
        """
    )

    parser.add_argument(
        'file',
        nargs='?',
        help='SQL source file to tokenize'
    )

    parser.add_argument(
        '-c', '--command',
        help='Tokenize a single SQL string'
    )

    parser.add_argument(
        '--config',
        help='JSON file with reservedWords, reservedToplevelWords, '
             'reservedNewlineWords and functionWords lists'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print tokens as a JSON array'
    )

    parser.add_argument(
        '--no-whitespace',
        action='store_true',
        help='Leave whitespace tokens out of the listing'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'sqllex {sqllex.__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sqllex CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        if args.config:
            config = sqllex.TokenizerConfig.from_json_file(args.config)
        else:
            config = sqllex.TokenizerConfig.standard()
        tokenizer = sqllex.Tokenizer(config)

        if args.command is not None:
            tokens = tokenizer.tokenize(args.command, "<command>")
        elif args.file:
            with open(args.file, 'r', encoding='utf-8', newline='') as file:
                source = file.read()
            tokens = tokenizer.tokenize(source, args.file)
        else:
            interactive(tokenizer, args)
            return 0

    except sqllex.SqlLexError as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("Failed to read %s", args.file, exc_info=True)
        print(f"Error: cannot read '{args.file}': {e.strerror}", file=sys.stderr)
        return 1

    output = format_tokens(tokens, args.json, args.no_whitespace)
    if output:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
