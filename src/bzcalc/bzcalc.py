"""Main BZCalc class: tokenize, convert to RPN, evaluate."""

from fractions import Fraction
from typing import List

from bzcalc.bzcalc_converter import BZCalcConverter
from bzcalc.bzcalc_evaluator import BZCalcEvaluator
from bzcalc.bzcalc_token import BZCalcToken
from bzcalc.bzcalc_tokenizer import BZCalcTokenizer, DEFAULT_MAX_LITERAL


class BZCalc:
    """
    Integer arithmetic calculator supporting +, -, *, / and brackets.

    Expressions are converted to Reverse Polish Notation with the Bauer-Zamelson operator precedence
    automaton and then evaluated with exact rational arithmetic.  The final value is rounded to the
    nearest integer, ties to even.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, max_literal: int = DEFAULT_MAX_LITERAL):
        """
        Initialize calculator.

        Args:
            max_literal: Largest integer literal accepted in an expression
        """
        self.max_literal = max_literal

    def evaluate(self, expression: str) -> int:
        """
        Evaluate an arithmetic expression.

        Args:
            expression: Expression string to evaluate

        Returns:
            The value of the expression rounded to the nearest integer

        Raises:
            BZCalcTokenError: If tokenization fails
            BZCalcParseError: If brackets are unmatched
            BZCalcEvalError: If evaluation fails (division by zero, missing operands)
        """
        return BZCalcEvaluator.round_result(self.evaluate_exact(expression))

    def evaluate_exact(self, expression: str) -> Fraction:
        """
        Evaluate an arithmetic expression without rounding the result.

        Args:
            expression: Expression string to evaluate

        Returns:
            The exact rational value of the expression

        Raises:
            BZCalcTokenError: If tokenization fails
            BZCalcParseError: If brackets are unmatched
            BZCalcEvalError: If evaluation fails
        """
        rpn = self.to_rpn(expression)
        return BZCalcEvaluator().evaluate(rpn)

    def to_rpn(self, expression: str) -> List[BZCalcToken]:
        """
        Tokenize an expression and convert it to Reverse Polish Notation.

        Raises:
            BZCalcTokenError: If tokenization fails
            BZCalcParseError: If brackets are unmatched
        """
        tokens = BZCalcTokenizer(self.max_literal).tokenize(expression)
        return BZCalcConverter().to_rpn(tokens)

    def format_rpn(self, expression: str) -> str:
        """Return the RPN form of an expression as space separated text, e.g. "2 3 4 * +"."""
        return " ".join(token.text() for token in self.to_rpn(expression))
