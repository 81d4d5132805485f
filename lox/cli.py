"""
Command line entry point for the Lox scanner.

    lox script.lox      # print the tokens of a file
    lox                 # interactive prompt, one line at a time
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer.errors import ErrorReporter
from .lexer.lexer import scan
from .lexer.tokens import Token

logger = logging.getLogger(__name__)

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def format_token(token: Token) -> str:
    literal = "" if token.literal is None else repr(token.literal)
    return f"{token.kind.name}\t{token.lexeme!r}\t{literal}\t(line {token.line})"


def run(source: str, reporter: ErrorReporter) -> List[Token]:
    tokens = scan(source, reporter)
    for token in tokens:
        print(format_token(token))
    return tokens


def run_file(path: str) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return EX_NOINPUT

    reporter = ErrorReporter()
    run(source, reporter)
    return EX_DATAERR if reporter.had_error else EX_OK


def run_prompt() -> int:
    reporter = ErrorReporter()
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return EX_OK
        run(line, reporter)
        # A mistake on one line should not poison the next
        reporter.reset()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")
    else:
        # Lexical errors surface as "[line N] Error: ..." on stderr
        logging.basicConfig(level=logging.WARNING, format="%(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""

    parser = argparse.ArgumentParser(
        prog="lox",
        description="Tokenize Lox source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox hello.lox            # Print the tokens of hello.lox
    lox                      # Start an interactive token prompt
    lox -v hello.lox         # Same, with debug logging
        """
    )
    parser.add_argument('script', nargs='?',
                        help='Lox source file to tokenize')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EX_OK if e.code == 0 else EX_USAGE

    _configure_logging(args.verbose)

    if args.script:
        logger.debug("Tokenizing %s", args.script)
        return run_file(args.script)
    return run_prompt()


if __name__ == "__main__":
    sys.exit(main())
