# evaluator.py
"""
Evaluator for grouped token lists.

Each call resolves literal values, evaluates nested groups recursively, folds postfix
factorials and then reduces the remaining operators tier by tier (A, then B, then C),
always picking the leftmost operator of the active tier. Every scan builds a fresh list;
the list being scanned is never modified.
"""

import logging
import math
from typing import Callable, Dict, List, Optional

from .errors import (
    DivideByZeroError, EmptyExpressionError, LogDomainError, MissingOperandError,
    NonIntegerModuloError, NumberFormatError, TooManyResultsError, ZeroOverZero,
)
from .numeric import (
    absolute, degrees_to_radians, factorial, format_number, ieee_pow, n_choose_r,
    n_permute_r, nth_root,
)
from .tokens import REDUCTION_TIERS, Arity, Priority, Token, TokenKind

logger = logging.getLogger(__name__)


# --------------------------
# Operator implementations
# --------------------------

def _divide(a: Token, b: Token) -> float:
    if b.value == 0:
        if a.value == 0:
            raise ZeroOverZero(f"You can't divide by 0: {a.text} / {b.text}")
        raise DivideByZeroError(f"You can't divide by 0: {a.text} / {b.text}")
    return a.value / b.value


def _modulo(a: Token, b: Token) -> float:
    if '.' in a.text or '.' in b.text or not (math.isfinite(a.value) and math.isfinite(b.value)):
        raise NonIntegerModuloError(f"Cannot perform modulo on float values: {a.text} % {b.text}")
    if b.value == 0:
        raise DivideByZeroError(f"You can't get the remainder of a division by 0: {a.text} % {b.text}")
    # Truncated remainder: the sign follows the dividend.
    x, y = int(a.value), int(b.value)
    remainder = abs(x) % abs(y)
    return float(remainder if x >= 0 else -remainder)


def _logarithm(a: Token, b: Token) -> float:
    if a.value == 0 or b.value == 0:
        raise LogDomainError(f"Logarithm with zero as base or x: {a.text} log {b.text}")
    if a.value < 0 or b.value < 0:
        return math.nan
    if b.value == 1:
        # ln(1) is 0, so this is x / 0 in IEEE arithmetic.
        return math.nan if a.value == 1 else math.copysign(math.inf, math.log(a.value))
    return math.log(a.value) / math.log(b.value)


def _trig(func: Callable[[float], float], degrees: bool = False) -> Callable[[Token, Token], float]:
    def apply(a: Token, b: Token) -> float:
        x = degrees_to_radians(b.value) if degrees else b.value
        if not math.isfinite(x):
            return math.nan
        return func(x)
    return apply


_OPERATIONS: Dict[TokenKind, Callable[[Token, Token], float]] = {
    TokenKind.POW: lambda a, b: ieee_pow(a.value, b.value),
    TokenKind.ROOT: lambda a, b: nth_root(a.value, b.value),
    TokenKind.MUL: lambda a, b: a.value * b.value,
    TokenKind.DIV: _divide,
    TokenKind.MODULO: _modulo,
    TokenKind.LOG: _logarithm,
    TokenKind.ABS: lambda a, b: absolute(b.value),
    TokenKind.COMBINATION: lambda a, b: n_choose_r(a.value, b.value),
    TokenKind.PERMUTATION: lambda a, b: n_permute_r(a.value, b.value),
    TokenKind.ADD: lambda a, b: a.value + b.value,
    TokenKind.SUB: lambda a, b: a.value - b.value,
    TokenKind.SIN: _trig(math.sin),
    TokenKind.COS: _trig(math.cos),
    TokenKind.TAN: _trig(math.tan),
    TokenKind.SIN_DEG: _trig(math.sin, degrees=True),
    TokenKind.COS_DEG: _trig(math.cos, degrees=True),
    TokenKind.TAN_DEG: _trig(math.tan, degrees=True),
}


def apply_operator(op: Token, left: Optional[Token], right: Optional[Token]) -> Token:
    """
    Apply `op` to its operand tokens and return the synthesized number token.

    Operands the operator's arity does not consume may be None.
    """
    operation = _OPERATIONS.get(op.kind)
    if operation is None:
        raise ValueError(f"Not a reducible operator: {op.kind.name}")
    value = float(operation(left, right))
    return Token.number(format_number(value), value)


# --------------------------
# Evaluation passes
# --------------------------

def _resolve_values(tokens: List[Token]) -> List[Token]:
    resolved: List[Token] = []
    for tok in tokens:
        if tok.kind == TokenKind.NUMBER:
            try:
                value = float(tok.text)
            except ValueError:
                raise NumberFormatError(tok.text)
            resolved.append(Token.number(tok.text, value))
        elif tok.kind == TokenKind.OPEN_GROUP:
            value = evaluate(tok.children or [])
            resolved.append(Token.number(format_number(value), value))
        else:
            resolved.append(tok)
    return resolved


def _fold_factorials(tokens: List[Token]) -> List[Token]:
    folded: List[Token] = []
    for i, tok in enumerate(tokens):
        if tok.kind == TokenKind.FACTORIAL:
            if not folded or not folded[-1].is_number:
                raise MissingOperandError(i, tok.text)
            operand = folded.pop()
            value = factorial(operand.value)
            folded.append(Token.number(format_number(value), value))
        else:
            folded.append(tok)
    return folded


def _operand(tokens: List[Token], index: int, op_index: int) -> Token:
    if index < 0 or index >= len(tokens) or not tokens[index].is_number:
        raise MissingOperandError(op_index, tokens[op_index].text)
    return tokens[index]


def _reduce_once(tokens: List[Token], tier: Priority) -> Optional[List[Token]]:
    """Reduce the leftmost operator of `tier`; None when the tier is exhausted."""
    for i, tok in enumerate(tokens):
        if tok.priority != tier or tok.is_number:
            continue
        start, end = i, i + 1
        left = right = None
        if tok.arity in (Arity.LEFT, Arity.LEFT_RIGHT):
            left = _operand(tokens, i - 1, i)
            start = i - 1
        if tok.arity in (Arity.RIGHT, Arity.LEFT_RIGHT):
            right = _operand(tokens, i + 1, i)
            end = i + 2
        result = apply_operator(tok, left, right)
        logger.debug("Reduced %s %s %s -> %s",
                     left.text if left else '', tok.text, right.text if right else '', result.text)
        return tokens[:start] + [result] + tokens[end:]
    return None


def evaluate(tokens: List[Token]) -> float:
    """
    Evaluate a grouped token list to a single number.

    Args:
        tokens: output of group(tokenize(line))

    Returns:
        The value of the expression

    Raises:
        EvalError: on missing operands, domain errors or leftover results
        ZeroOverZero: for 0 / 0
    """
    current = _fold_factorials(_resolve_values(tokens))
    for tier in REDUCTION_TIERS:
        reduced = _reduce_once(current, tier)
        while reduced is not None:
            current = reduced
            reduced = _reduce_once(current, tier)

    if not current:
        raise EmptyExpressionError()
    if len(current) > 1:
        raise TooManyResultsError(current[0].text, current[1].text)
    return current[0].value
