"""Tokenizer for BZCalc arithmetic expressions with detailed error messages."""

from typing import Dict, List

from bzcalc.bzcalc_error import BZCalcLiteralOverflowError, BZCalcUnknownSymbolError
from bzcalc.bzcalc_token import BZCalcOperation, BZCalcToken, BZCalcTokenType


# Largest literal accepted by default (signed 64-bit maximum)
DEFAULT_MAX_LITERAL = 2**63 - 1


class BZCalcTokenizer:
    """Tokenizes arithmetic expressions into a BEGIN ... END framed token list."""

    OPERATOR_SYMBOLS: Dict[str, BZCalcOperation] = {
        '+': BZCalcOperation.ADD,
        '-': BZCalcOperation.SUB,
        '*': BZCalcOperation.MUL,
        '/': BZCalcOperation.DIV,
    }

    def __init__(self, max_literal: int = DEFAULT_MAX_LITERAL):
        """
        Initialize tokenizer.

        Args:
            max_literal: Largest integer literal the tokenizer will accept
        """
        self.max_literal = max_literal

    def tokenize(self, expression: str) -> List[BZCalcToken]:
        """
        Tokenize an arithmetic expression.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens, always starting with BEGIN and ending with END

        Raises:
            BZCalcUnknownSymbolError: If a character is not a digit, whitespace, bracket or operator
            BZCalcLiteralOverflowError: If an integer literal exceeds max_literal
        """
        tokens = [BZCalcToken.begin()]

        value = 0
        is_parsing_digits = False
        start = 0

        # The trailing space flushes a number that runs to the end of the expression
        for i, ch in enumerate(expression + " "):
            if '0' <= ch <= '9':
                if not is_parsing_digits:
                    is_parsing_digits = True
                    start = i
                    value = 0

                value = value * 10 + (ord(ch) - ord('0'))
                if value > self.max_literal:
                    raise BZCalcLiteralOverflowError(self._read_literal(expression, start), start, self.max_literal)

                continue

            if is_parsing_digits:
                tokens.append(BZCalcToken.operand(value, start))
                is_parsing_digits = False

            if ch.isspace():
                continue

            if ch == '(':
                tokens.append(BZCalcToken(BZCalcTokenType.OPEN_BRACKET, None, i))
                continue

            if ch == ')':
                tokens.append(BZCalcToken(BZCalcTokenType.CLOSE_BRACKET, None, i))
                continue

            operation = self.OPERATOR_SYMBOLS.get(ch)
            if operation is None:
                raise BZCalcUnknownSymbolError(ch, i)

            tokens.append(BZCalcToken.operator(operation, i))

        tokens.append(BZCalcToken.end(len(expression)))
        return tokens

    def _read_literal(self, expression: str, start: int) -> str:
        """Return the full run of digits starting at start."""
        end = start
        while end < len(expression) and '0' <= expression[end] <= '9':
            end += 1

        return expression[start:end]
