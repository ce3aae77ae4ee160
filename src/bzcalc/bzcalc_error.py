"""Exception classes for BZCalc arithmetic expressions with detailed context."""

from typing import Optional


class BZCalcError(Exception):
    """Base exception for BZCalc errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            position: Character position where error occurred
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class BZCalcTokenError(BZCalcError):
    """Tokenization errors with detailed context."""


class BZCalcParseError(BZCalcError):
    """Infix to RPN conversion errors with detailed context."""


class BZCalcEvalError(BZCalcError):
    """RPN evaluation errors with detailed context."""


class BZCalcInternalError(BZCalcError):
    """Raised when the converter reaches a state its transition table does not cover."""


class BZCalcUnknownSymbolError(BZCalcTokenError):
    """A character outside digits, whitespace, brackets and the four operators."""

    SUGGESTIONS = {
        '.': "Only integer literals are supported, use / to produce fractions",
        ',': "Only integer literals are supported, digit grouping is not allowed",
        '^': "There is no power operator, use repeated multiplication",
        '%': "There is no modulo operator",
        '[': "Use parentheses ( ) for grouping, not brackets [ ]",
        ']': "Use parentheses ( ) for grouping, not brackets [ ]",
        '{': "Use parentheses ( ) for grouping, not braces { }",
        '}': "Use parentheses ( ) for grouping, not braces { }",
        'x': "Use * for multiplication",
        '×': "Use * for multiplication",
        '÷': "Use / for division",
    }

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        super().__init__(
            message=f"Unknown symbol: {symbol!r}",
            position=position,
            received=f"Character: {symbol!r} (code {ord(symbol)})",
            expected="Digits, whitespace, (, ), +, -, * or /",
            suggestion=self.SUGGESTIONS.get(symbol)
        )


class BZCalcLiteralOverflowError(BZCalcTokenError):
    """An integer literal larger than the configured maximum."""

    def __init__(self, literal: str, position: int, max_literal: int):
        self.literal = literal
        self.max_literal = max_literal
        super().__init__(
            message="Integer literal is too large",
            position=position,
            received=f"Literal starting: {literal[:20]}{'...' if len(literal) > 20 else ''}",
            expected=f"Integer literal no larger than {max_literal}",
            suggestion="Split the value into a product of smaller literals"
        )


class BZCalcMalformedInputError(BZCalcParseError):
    """The token stream handed to the converter is not framed by BEGIN/END sentinels."""


class BZCalcUnexpectedTokenError(BZCalcParseError):
    """A structurally invalid operator sequence, such as an unmatched bracket."""

    def __init__(self, token: object, message: str, position: Optional[int] = None, suggestion: Optional[str] = None):
        self.token = token
        super().__init__(
            message=message,
            position=position,
            received=f"Token: {token!r}",
            suggestion=suggestion
        )


class BZCalcMalformedRpnError(BZCalcEvalError):
    """The RPN sequence does not reduce to exactly one value."""


class BZCalcStackUnderflowError(BZCalcMalformedRpnError):
    """An operator was reached with fewer than two operands available."""


class BZCalcDivisionByZeroError(BZCalcEvalError):
    """The right-hand operand of a division is exactly zero."""
