"""Token types and token representation for BZCalc expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BZCalcTokenType(Enum):
    """Token types for BZCalc expressions."""
    OPERAND = "OPERAND"
    BEGIN = "BEGIN"
    END = "END"
    OPEN_BRACKET = "("
    CLOSE_BRACKET = ")"
    WEAK_OP = "WEAK_OP"
    STRONG_OP = "STRONG_OP"


class BZCalcOperation(Enum):
    """Arithmetic operations carried by WEAK_OP and STRONG_OP tokens."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class BZCalcToken:
    """
    Represents a single token in a BZCalc expression.

    Operand tokens carry an int value, WEAK_OP/STRONG_OP tokens carry a BZCalcOperation and all
    other tokens carry None.  The position is informational only and does not take part in equality.
    """
    type: BZCalcTokenType
    value: Any = None
    position: int = field(default=0, compare=False)

    @classmethod
    def operand(cls, value: int, position: int = 0) -> "BZCalcToken":
        """Create an operand token."""
        return cls(BZCalcTokenType.OPERAND, value, position)

    @classmethod
    def operator(cls, operation: BZCalcOperation, position: int = 0) -> "BZCalcToken":
        """Create a WEAK_OP or STRONG_OP token for an arithmetic operation."""
        if operation in (BZCalcOperation.ADD, BZCalcOperation.SUB):
            return cls(BZCalcTokenType.WEAK_OP, operation, position)

        return cls(BZCalcTokenType.STRONG_OP, operation, position)

    @classmethod
    def begin(cls) -> "BZCalcToken":
        """Create the start-of-input sentinel."""
        return cls(BZCalcTokenType.BEGIN, None, 0)

    @classmethod
    def end(cls, position: int = 0) -> "BZCalcToken":
        """Create the end-of-input sentinel."""
        return cls(BZCalcTokenType.END, None, position)

    def is_operand(self) -> bool:
        """Return True if this token is an integer operand."""
        return self.type == BZCalcTokenType.OPERAND

    def is_arithmetic(self) -> bool:
        """Return True if this token is one of the four arithmetic operators."""
        return self.type in (BZCalcTokenType.WEAK_OP, BZCalcTokenType.STRONG_OP)

    def text(self) -> str:
        """Return the source text this token stands for."""
        if self.type == BZCalcTokenType.OPERAND:
            return str(self.value)

        if self.is_arithmetic():
            return self.value.value

        if self.type in (BZCalcTokenType.OPEN_BRACKET, BZCalcTokenType.CLOSE_BRACKET):
            return self.type.value

        return self.type.name

    def __repr__(self) -> str:
        if self.type == BZCalcTokenType.OPERAND or self.is_arithmetic():
            return f"BZCalcToken({self.type.name}, {self.text()!r}, pos={self.position})"

        return f"BZCalcToken({self.type.name}, pos={self.position})"
