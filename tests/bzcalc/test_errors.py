"""Tests for error detection and exception reporting through the facade."""

import pytest

from bzcalc import (
    BZCalcError, BZCalcTokenError, BZCalcParseError, BZCalcEvalError,
    BZCalcUnknownSymbolError, BZCalcUnexpectedTokenError, BZCalcMalformedRpnError,
    BZCalcStackUnderflowError, BZCalcDivisionByZeroError, BZCalcLiteralOverflowError,
    BZCalcMalformedInputError, BZCalcInternalError
)


class TestErrors:
    """Each pipeline stage fails fast with a typed error."""

    # ========== Tokenization Errors ==========

    def test_unknown_symbol(self, calc):
        """Unknown characters report the symbol and position."""
        with pytest.raises(BZCalcUnknownSymbolError) as exc_info:
            calc.evaluate("1+a")

        assert exc_info.value.symbol == 'a'
        assert exc_info.value.position == 2

    def test_unknown_symbol_beats_later_errors(self, calc):
        """Tokenization runs before conversion, so a bad character wins over a bad bracket."""
        with pytest.raises(BZCalcUnknownSymbolError):
            calc.evaluate(")1/0 ?")

    # ========== Conversion Errors ==========

    @pytest.mark.parametrize("expression", ["(1+2", "1+2)", ")", "(", "((1)", "(1))", "2*(3+4", ")("])
    def test_unmatched_brackets(self, calc, expression):
        """Unmatched brackets in either direction fail during conversion."""
        with pytest.raises(BZCalcUnexpectedTokenError):
            calc.evaluate(expression)

    def test_bracket_error_beats_division_by_zero(self, calc):
        """Conversion errors are raised before anything is evaluated."""
        with pytest.raises(BZCalcUnexpectedTokenError):
            calc.evaluate("(1/0")

    # ========== Evaluation Errors ==========

    def test_division_by_zero(self, calc):
        """Dividing by a literal zero fails."""
        with pytest.raises(BZCalcDivisionByZeroError):
            calc.evaluate("1/0")

    def test_division_by_zero_subexpression(self, calc):
        """Dividing by a zero-valued sub-expression fails."""
        with pytest.raises(BZCalcDivisionByZeroError):
            calc.evaluate("(5+3)*(7-2)/(1-1)")

    def test_division_by_fraction_is_not_zero(self, calc):
        """A small non-zero divisor is fine."""
        assert calc.evaluate("1/(1/3)") == 3

    def test_empty_expression(self, calc):
        """An empty expression converts to empty RPN and then has no value."""
        with pytest.raises(BZCalcMalformedRpnError, match="Expression has no value"):
            calc.evaluate("")

    def test_empty_brackets(self, calc):
        """Brackets with nothing inside have no value."""
        with pytest.raises(BZCalcMalformedRpnError):
            calc.evaluate("()")

    @pytest.mark.parametrize("expression", ["1+", "+1", "*", "1 + * 2", "-5", "(1+)"])
    def test_missing_operands(self, calc, expression):
        """Operators without two operands underflow the stack."""
        with pytest.raises(BZCalcStackUnderflowError):
            calc.evaluate(expression)

    @pytest.mark.parametrize("expression", ["1 2", "(1)(2)", "3 (4)"])
    def test_missing_operators(self, calc, expression):
        """Adjacent operands leave more than one value."""
        with pytest.raises(BZCalcMalformedRpnError, match="not joined by operators"):
            calc.evaluate(expression)

    # ========== Error hierarchy ==========

    @pytest.mark.parametrize("error_class,base", [
        (BZCalcUnknownSymbolError, BZCalcTokenError),
        (BZCalcLiteralOverflowError, BZCalcTokenError),
        (BZCalcMalformedInputError, BZCalcParseError),
        (BZCalcUnexpectedTokenError, BZCalcParseError),
        (BZCalcMalformedRpnError, BZCalcEvalError),
        (BZCalcStackUnderflowError, BZCalcMalformedRpnError),
        (BZCalcDivisionByZeroError, BZCalcEvalError),
        (BZCalcInternalError, BZCalcError),
        (BZCalcTokenError, BZCalcError),
        (BZCalcParseError, BZCalcError),
        (BZCalcEvalError, BZCalcError),
    ])
    def test_error_hierarchy(self, error_class, base):
        """Every concrete error sits under its stage base and BZCalcError."""
        assert issubclass(error_class, base)

    def test_same_input_same_error(self, calc):
        """Errors are deterministic."""
        messages = set()
        for _ in range(5):
            with pytest.raises(BZCalcError) as exc_info:
                calc.evaluate("2*(3+4")

            messages.add(str(exc_info.value))

        assert len(messages) == 1


class TestErrorMessages:
    """Detailed error message formatting."""

    def test_detailed_message_layout(self):
        """All supplied fields appear in order, one per line."""
        error = BZCalcError(
            message="Something failed",
            position=3,
            received="Token: x",
            expected="A number",
            context="While testing",
            suggestion="Try again"
        )

        assert str(error) == (
            "Error: Something failed\n"
            "Position: 3\n"
            "Received: Token: x\n"
            "Expected: A number\n"
            "Context: While testing\n"
            "Suggestion: Try again"
        )

    def test_minimal_message(self):
        """Only the message line appears when nothing else is supplied."""
        assert str(BZCalcError("Bare")) == "Error: Bare"

    def test_position_zero_is_reported(self):
        """Position 0 is a real position."""
        assert "Position: 0" in str(BZCalcError("At start", position=0))

    def test_unknown_symbol_message(self, calc):
        """Unknown symbol errors describe the character."""
        with pytest.raises(BZCalcUnknownSymbolError) as exc_info:
            calc.evaluate("2 # 3")

        message = str(exc_info.value)
        assert "Unknown symbol: '#'" in message
        assert "Position: 2" in message
        assert "code 35" in message

    def test_division_by_zero_message(self, calc):
        """Division by zero errors show the dividend."""
        with pytest.raises(BZCalcDivisionByZeroError) as exc_info:
            calc.evaluate("7/(2-2)")

        assert "Received: 7 / 0" in str(exc_info.value)
        assert exc_info.value.position == 1

    def test_unexpected_token_message(self, calc):
        """Unexpected token errors name the token."""
        with pytest.raises(BZCalcUnexpectedTokenError) as exc_info:
            calc.evaluate("1+2)")

        message = str(exc_info.value)
        assert "Unexpected closing bracket" in message
        assert "CLOSE_BRACKET" in message
