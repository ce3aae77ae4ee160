"""Shared fixtures and utilities for BZCalc tests."""

import pytest
from typing import List

from bzcalc import BZCalc, BZCalcConverter, BZCalcEvaluator, BZCalcTokenizer
from bzcalc import BZCalcOperation, BZCalcToken, BZCalcTokenType


@pytest.fixture
def calc():
    """Create a fresh BZCalc instance for each test."""
    return BZCalc()


@pytest.fixture
def tokenizer():
    """Create a fresh tokenizer for each test."""
    return BZCalcTokenizer()


@pytest.fixture
def converter():
    """Create a fresh converter for each test."""
    return BZCalcConverter()


@pytest.fixture
def evaluator():
    """Create a fresh evaluator for each test."""
    return BZCalcEvaluator()


class BZCalcTestHelpers:
    """Helper utilities for building token streams by hand."""

    OPERATIONS = {
        '+': BZCalcOperation.ADD,
        '-': BZCalcOperation.SUB,
        '*': BZCalcOperation.MUL,
        '/': BZCalcOperation.DIV,
    }

    @staticmethod
    def tokens(*items: object) -> List[BZCalcToken]:
        """
        Build a token list from ints (operands) and the strings +, -, *, /, (, ), BEGIN and END.

        Positions are left at zero, which is fine because they are not compared.
        """
        result = []
        for item in items:
            if isinstance(item, int):
                result.append(BZCalcToken.operand(item))
            elif item in BZCalcTestHelpers.OPERATIONS:
                result.append(BZCalcToken.operator(BZCalcTestHelpers.OPERATIONS[item]))
            elif item == '(':
                result.append(BZCalcToken(BZCalcTokenType.OPEN_BRACKET))
            elif item == ')':
                result.append(BZCalcToken(BZCalcTokenType.CLOSE_BRACKET))
            elif item == 'BEGIN':
                result.append(BZCalcToken.begin())
            elif item == 'END':
                result.append(BZCalcToken.end())
            else:
                raise ValueError(f"Cannot build token from {item!r}")

        return result

    @staticmethod
    def framed(*items: object) -> List[BZCalcToken]:
        """Build a BEGIN ... END framed token list."""
        return BZCalcTestHelpers.tokens('BEGIN', *items, 'END')

    @staticmethod
    def rpn_text(rpn: List[BZCalcToken]) -> str:
        """Render an RPN token list as space separated text."""
        return " ".join(token.text() for token in rpn)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return BZCalcTestHelpers
