import argparse
import sys
from typing import Optional

from infixcalc.parser import unparse
from infixcalc.runtime import Failure, LineResult, format_value, run_line


def make_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="infixcalc",
        description="Evaluate integer arithmetic expressions with + - * / and parentheses.",
    )
    argparser.add_argument("-e", "--expression", help="evaluate a single expression and exit")
    argparser.add_argument("-v", "--verbose", action="store_true", help="print tokens and expression tree to stderr")
    argparser.add_argument("--prompt", default=">>> ", help="interactive prompt (default: %(default)r)")
    return argparser


def print_debug(result: LineResult) -> None:
    print(f"tokens: {' '.join(str(t) for t in result.tokens)}", file=sys.stderr)
    if not isinstance(result, Failure) and result.expression is not None:
        print(f"ast: {unparse(result.expression)}", file=sys.stderr)


def report(result: LineResult, verbose: bool = False) -> None:
    if verbose:
        print_debug(result)
    if isinstance(result, Failure):
        print(result.error, file=sys.stderr)
    else:
        print(f"  = {format_value(result.value)}")


def main(argv: Optional[list[str]] = None) -> int:
    args = make_argparser().parse_args(argv)

    if args.expression is not None:
        result = run_line(args.expression)
        report(result, verbose=args.verbose)
        return 1 if isinstance(result, Failure) else 0

    while True:
        try:
            code = input(args.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not code.strip():
            continue

        report(run_line(code), verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
