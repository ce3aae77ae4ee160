"""Command line calculator: evaluates expressions given as arguments or read from stdin."""

import argparse
import sys
from typing import List, TextIO

from bzcalc.bzcalc import BZCalc
from bzcalc.bzcalc_error import BZCalcError
from bzcalc.bzcalc_tokenizer import DEFAULT_MAX_LITERAL


def evaluate_expressions(
    calculator: BZCalc,
    expressions: List[str],
    show_rpn: bool,
    out: TextIO,
    err: TextIO
) -> bool:
    """
    Evaluate each expression and print the result or error.

    Returns:
        True if every expression evaluated successfully
    """
    all_ok = True
    for expression in expressions:
        try:
            if show_rpn:
                print(calculator.format_rpn(expression), file=out)

            else:
                print(f"Result: {calculator.evaluate(expression)}", file=out)

        except BZCalcError as e:
            print(str(e), file=err)
            all_ok = False

    return all_ok


def main(argv: List[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Evaluate integer arithmetic expressions with +, -, *, / and brackets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "2+3*4"                  # Result: 14
  %(prog)s --rpn "(2+3)*4"          # 2 3 + 4 *
  echo "100/20/2" | %(prog)s        # Result: 2
        """
    )

    parser.add_argument(
        'expressions',
        nargs='*',
        help='Expressions to evaluate (read one per line from stdin if omitted)'
    )

    parser.add_argument(
        '-r', '--rpn',
        action='store_true',
        help='Print the Reverse Polish Notation form instead of the result'
    )

    parser.add_argument(
        '--max-literal',
        type=int,
        default=DEFAULT_MAX_LITERAL,
        help='Largest integer literal accepted (default: %(default)s)'
    )

    args = parser.parse_args(argv)

    expressions = args.expressions
    if not expressions:
        expressions = [line.rstrip('\n') for line in sys.stdin if line.strip()]

    calculator = BZCalc(max_literal=args.max_literal)
    ok = evaluate_expressions(calculator, expressions, args.rpn, sys.stdout, sys.stderr)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
