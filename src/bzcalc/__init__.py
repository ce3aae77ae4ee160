"""BZCalc integer arithmetic calculator package."""

# Main API
from bzcalc.bzcalc import BZCalc

# Exceptions
from bzcalc.bzcalc_error import (
    BZCalcError, BZCalcTokenError, BZCalcParseError, BZCalcEvalError, BZCalcInternalError,
    BZCalcUnknownSymbolError, BZCalcLiteralOverflowError, BZCalcMalformedInputError,
    BZCalcUnexpectedTokenError, BZCalcMalformedRpnError, BZCalcStackUnderflowError,
    BZCalcDivisionByZeroError
)

# Lower-level components
from bzcalc.bzcalc_token import BZCalcToken, BZCalcTokenType, BZCalcOperation
from bzcalc.bzcalc_tokenizer import BZCalcTokenizer, DEFAULT_MAX_LITERAL
from bzcalc.bzcalc_converter import BZCalcConverter, BZCalcAction, TRANSITION_TABLE, lookup_action, apply_action
from bzcalc.bzcalc_evaluator import BZCalcEvaluator


__all__ = [
    # Main API
    "BZCalc",

    # Exceptions
    "BZCalcError", "BZCalcTokenError", "BZCalcParseError", "BZCalcEvalError", "BZCalcInternalError",
    "BZCalcUnknownSymbolError", "BZCalcLiteralOverflowError", "BZCalcMalformedInputError",
    "BZCalcUnexpectedTokenError", "BZCalcMalformedRpnError", "BZCalcStackUnderflowError",
    "BZCalcDivisionByZeroError",

    # Lower-level components
    "BZCalcToken", "BZCalcTokenType", "BZCalcOperation", "BZCalcTokenizer", "DEFAULT_MAX_LITERAL",
    "BZCalcConverter", "BZCalcAction", "TRANSITION_TABLE", "lookup_action", "apply_action",
    "BZCalcEvaluator"
]
