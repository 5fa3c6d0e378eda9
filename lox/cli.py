"""
Command line driver for the Lox front end.

Usage:
    lox                      Interactive prompt, one line at a time
    lox <script>             Run a script file
    lox --mode ast <script>  Parse an expression and print its tree

Author: lox-frontend contributors
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Scanner
from .parser import Parser, print_ast
from .reporter import ErrorReporter

logger = logging.getLogger(__name__)

# sysexits.h
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


def run(source: str, mode: str = "tokens", out: Optional[TextIO] = None,
        err: Optional[TextIO] = None) -> ErrorReporter:
    """
    Scan (and in "ast" mode parse) one chunk of source, printing the result.

    Returns:
        The reporter for this run; check `had_error` for the outcome
    """
    out = out if out is not None else sys.stdout
    reporter = ErrorReporter(stream=err if err is not None else sys.stderr)
    tokens = Scanner(source, reporter).scan_tokens()
    logger.debug("scanned %d tokens", len(tokens))

    if mode == "tokens":
        for token in tokens:
            print(token, file=out)
        return reporter

    if reporter.had_error:
        return reporter

    expr = Parser(tokens, reporter).parse()
    if expr is not None:
        print(print_ast(expr), file=out)
    return reporter


def run_file(path: str, mode: str) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EX_NOINPUT

    reporter = run(source, mode)
    return EX_DATAERR if reporter.had_error else 0


def run_prompt(mode: str, stdin: Optional[TextIO] = None) -> int:
    """Read-print loop; an error on one line does not end the session."""
    stdin = stdin if stdin is not None else sys.stdin
    while True:
        print(PROMPT, end="", flush=True)
        line = stdin.readline()
        if not line:
            print()
            return 0
        run(line, mode)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan and parse Lox source.",
    )
    parser.add_argument("script", nargs="?", help="source file; omit for an interactive prompt")
    parser.add_argument(
        "--mode", choices=("tokens", "ast"), default="tokens",
        help="print the token stream (default) or the parsed expression tree",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.script:
        return run_file(args.script, args.mode)
    return run_prompt(args.mode)


if __name__ == "__main__":
    sys.exit(main())
