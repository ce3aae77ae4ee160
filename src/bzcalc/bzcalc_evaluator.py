"""Evaluator for Reverse Polish Notation token sequences."""

from fractions import Fraction
from typing import List

from bzcalc.bzcalc_error import (
    BZCalcDivisionByZeroError, BZCalcMalformedRpnError, BZCalcStackUnderflowError
)
from bzcalc.bzcalc_token import BZCalcOperation, BZCalcToken


class BZCalcEvaluator:
    """
    Reduces an RPN token sequence to a single value using an operand stack.

    Arithmetic is exact: every intermediate value is a Fraction, so the only rounding step is the one
    applied by round_result().
    """

    def evaluate(self, rpn: List[BZCalcToken]) -> Fraction:
        """
        Evaluate an RPN token sequence.

        Args:
            rpn: Operand and arithmetic operator tokens in postfix order

        Returns:
            The exact value of the expression

        Raises:
            BZCalcStackUnderflowError: If an operator has fewer than two operands available
            BZCalcDivisionByZeroError: If a division has a zero right-hand operand
            BZCalcMalformedRpnError: If the sequence holds other tokens or does not reduce to one value
        """
        stack: List[Fraction] = []

        for token in rpn:
            if token.is_operand():
                stack.append(Fraction(token.value))
                continue

            if not token.is_arithmetic():
                raise BZCalcMalformedRpnError(
                    message=f"Token {token.type.name} cannot appear in an RPN sequence",
                    position=token.position,
                    received=repr(token),
                    expected="Operand or arithmetic operator"
                )

            if len(stack) < 2:
                raise BZCalcStackUnderflowError(
                    message=f"Not enough operands for operator {token.text()}",
                    position=token.position,
                    received=f"{len(stack)} operand(s) available",
                    expected="2 operands",
                    suggestion="Every operator needs a value on both sides"
                )

            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(self._apply(token, lhs, rhs))

        if len(stack) != 1:
            if not stack:
                raise BZCalcMalformedRpnError(
                    message="Expression has no value",
                    received="0 values after evaluation",
                    expected="Exactly 1 value",
                    suggestion="Provide at least one number, e.g. 1+2"
                )

            raise BZCalcMalformedRpnError(
                message="Expression has values that are not joined by operators",
                received=f"{len(stack)} values after evaluation",
                expected="Exactly 1 value",
                suggestion="Put an operator between each pair of numbers"
            )

        return stack[0]

    def _apply(self, token: BZCalcToken, lhs: Fraction, rhs: Fraction) -> Fraction:
        """Apply an arithmetic operator token to two operands."""
        operation = token.value
        if operation == BZCalcOperation.ADD:
            return lhs + rhs

        if operation == BZCalcOperation.SUB:
            return lhs - rhs

        if operation == BZCalcOperation.MUL:
            return lhs * rhs

        assert operation == BZCalcOperation.DIV, f"Unexpected operation ({operation}) encountered"
        if rhs == 0:
            raise BZCalcDivisionByZeroError(
                message="Division by zero",
                position=token.position,
                received=f"{self.format_value(lhs)} / 0",
                context="The right-hand side of '/' evaluated to zero"
            )

        return lhs / rhs

    @staticmethod
    def round_result(value: Fraction) -> int:
        """
        Round an exact value to the nearest integer.

        Ties go to the even neighbour, so 5/2 rounds to 2 and 7/2 rounds to 4.
        """
        return round(value)

    @staticmethod
    def format_value(value: Fraction) -> str:
        """Format an exact value as an integer or as numerator/denominator."""
        if value.denominator == 1:
            return str(value.numerator)

        return f"{value.numerator}/{value.denominator}"
