"""
Infix to Reverse Polish Notation converter using the Bauer-Zamelson algorithm.

The converter is a shift/reduce automaton.  Its state is the type of the token on top of the
operator stack and its input symbol is the type of the next operator token in the expression.
Operands never drive a transition: they go straight to the output.
"""

from enum import Enum
from typing import Dict, List, Tuple

from bzcalc.bzcalc_error import (
    BZCalcInternalError, BZCalcMalformedInputError, BZCalcUnexpectedTokenError
)
from bzcalc.bzcalc_token import BZCalcToken, BZCalcTokenType


class BZCalcAction(Enum):
    """Actions the automaton can take for a (state, symbol) pair."""
    PUSH = "push"
    MOVE_TOP_THEN_PUSH = "move_top_then_push"
    DISCARD = "discard"
    MOVE_TOP_STAY = "move_top_stay"
    END = "end"
    ERROR = "error"


_BEGIN = BZCalcTokenType.BEGIN
_END = BZCalcTokenType.END
_OPEN = BZCalcTokenType.OPEN_BRACKET
_CLOSE = BZCalcTokenType.CLOSE_BRACKET
_WEAK = BZCalcTokenType.WEAK_OP
_STRONG = BZCalcTokenType.STRONG_OP


TRANSITION_TABLE: Dict[Tuple[BZCalcTokenType, BZCalcTokenType], BZCalcAction] = {
    (_BEGIN, _WEAK): BZCalcAction.PUSH,
    (_BEGIN, _STRONG): BZCalcAction.PUSH,
    (_BEGIN, _OPEN): BZCalcAction.PUSH,
    (_BEGIN, _CLOSE): BZCalcAction.ERROR,
    (_BEGIN, _END): BZCalcAction.END,

    (_WEAK, _WEAK): BZCalcAction.MOVE_TOP_THEN_PUSH,
    (_WEAK, _STRONG): BZCalcAction.PUSH,
    (_WEAK, _OPEN): BZCalcAction.PUSH,
    (_WEAK, _CLOSE): BZCalcAction.MOVE_TOP_STAY,
    (_WEAK, _END): BZCalcAction.MOVE_TOP_STAY,

    (_STRONG, _WEAK): BZCalcAction.MOVE_TOP_STAY,
    (_STRONG, _STRONG): BZCalcAction.MOVE_TOP_THEN_PUSH,
    (_STRONG, _OPEN): BZCalcAction.PUSH,
    (_STRONG, _CLOSE): BZCalcAction.MOVE_TOP_STAY,
    (_STRONG, _END): BZCalcAction.MOVE_TOP_STAY,

    (_OPEN, _WEAK): BZCalcAction.PUSH,
    (_OPEN, _STRONG): BZCalcAction.PUSH,
    (_OPEN, _OPEN): BZCalcAction.PUSH,
    (_OPEN, _CLOSE): BZCalcAction.DISCARD,
    (_OPEN, _END): BZCalcAction.ERROR,
}


def lookup_action(state: BZCalcTokenType, symbol: BZCalcTokenType) -> BZCalcAction:
    """
    Look up the action for a (state, symbol) pair.

    Args:
        state: Type of the token on top of the operator stack
        symbol: Type of the next operator token

    Returns:
        The action to take

    Raises:
        BZCalcInternalError: If the pair is not covered by the transition table
    """
    action = TRANSITION_TABLE.get((state, symbol))
    if action is None:
        raise BZCalcInternalError(
            message=f"No transition from state {state.name} on symbol {symbol.name}",
            context="The operator stack or token stream contains a token the converter cannot handle here"
        )

    return action


def apply_action(
    action: BZCalcAction,
    operator_stack: List[BZCalcToken],
    rpn: List[BZCalcToken],
    token: BZCalcToken
) -> bool:
    """
    Apply a non-terminal action to the operator stack and RPN output.

    Args:
        action: One of PUSH, MOVE_TOP_THEN_PUSH, DISCARD or MOVE_TOP_STAY
        operator_stack: Pending operators, top of stack last
        rpn: RPN output being built
        token: The operator token that selected the action

    Returns:
        True if the input should advance past token, False if token must be re-examined

    Raises:
        BZCalcInternalError: If action is END or ERROR, which only the conversion loop handles
    """
    if action == BZCalcAction.PUSH:
        operator_stack.append(token)
        return True

    if action == BZCalcAction.MOVE_TOP_THEN_PUSH:
        rpn.append(operator_stack.pop())
        operator_stack.append(token)
        return True

    if action == BZCalcAction.DISCARD:
        operator_stack.pop()
        return True

    if action != BZCalcAction.MOVE_TOP_STAY:
        raise BZCalcInternalError(
            message=f"Action {action.name} cannot be applied to the operator stack",
            received=repr(token),
            context="Only PUSH, MOVE_TOP_THEN_PUSH, DISCARD and MOVE_TOP_STAY change the stacks"
        )

    rpn.append(operator_stack.pop())
    return False


class BZCalcConverter:
    """Converts a BEGIN ... END framed infix token list into RPN."""

    def to_rpn(self, tokens: List[BZCalcToken]) -> List[BZCalcToken]:
        """
        Convert infix tokens to Reverse Polish Notation.

        Args:
            tokens: Token list produced by BZCalcTokenizer

        Returns:
            RPN token list holding only operands and arithmetic operators

        Raises:
            BZCalcMalformedInputError: If the list does not start with BEGIN or ends without END
            BZCalcUnexpectedTokenError: If brackets are unmatched
            BZCalcInternalError: If a token pair is not covered by the transition table
        """
        if not tokens or tokens[0].type != BZCalcTokenType.BEGIN:
            received = repr(tokens[0]) if tokens else "empty token list"
            raise BZCalcMalformedInputError(
                message="Token stream does not start with BEGIN",
                received=received,
                expected="BZCalcToken(BEGIN) as the first token",
                context="Token lists must come from BZCalcTokenizer.tokenize()"
            )

        operator_stack: List[BZCalcToken] = [tokens[0]]
        rpn: List[BZCalcToken] = []

        i = 1
        while True:
            if i >= len(tokens):
                raise BZCalcMalformedInputError(
                    message="Token stream ended without END",
                    expected="BZCalcToken(END) as the last token",
                    context="Token lists must come from BZCalcTokenizer.tokenize()"
                )

            token = tokens[i]
            if token.is_operand():
                rpn.append(token)
                i += 1
                continue

            action = lookup_action(operator_stack[-1].type, token.type)
            if action == BZCalcAction.END:
                return rpn

            if action == BZCalcAction.ERROR:
                raise self._unexpected_token(token)

            if apply_action(action, operator_stack, rpn, token):
                i += 1

    def _unexpected_token(self, token: BZCalcToken) -> BZCalcUnexpectedTokenError:
        """Build the error for a token that arrives in a state that cannot accept it."""
        if token.type == BZCalcTokenType.CLOSE_BRACKET:
            return BZCalcUnexpectedTokenError(
                token,
                message="Unexpected closing bracket",
                position=token.position,
                suggestion="Remove the ')' or add a matching '(' before it"
            )

        return BZCalcUnexpectedTokenError(
            token,
            message="Unexpected end of expression",
            position=token.position,
            suggestion="Add ')' to close every open bracket"
        )
