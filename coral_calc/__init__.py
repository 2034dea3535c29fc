"""coral-calc - a space-delimited terminal calculator with tiered left-to-right evaluation."""

__version__ = "0.5.0"

from .errors import (
    CalculatorError, ParseError, EvalError, UnknownTokenError, MixedDelimiterError,
    UnmatchedParenError, NoPriorAnswerError, NumberFormatError, MissingOperandError,
    EmptyExpressionError, TooManyResultsError, FactorialDomainError, ZeroRootError,
    NegativeEvenRootError, DivideByZeroError, NonIntegerModuloError, LogDomainError,
    ZeroOverZero,
)
from .tokens import Token, TokenKind, Priority, Arity, classify
from .lexer import tokenize
from .grouper import group
from .evaluator import evaluate
from .session import Session, Outcome

__all__ = [
    'CalculatorError', 'ParseError', 'EvalError', 'UnknownTokenError', 'MixedDelimiterError',
    'UnmatchedParenError', 'NoPriorAnswerError', 'NumberFormatError', 'MissingOperandError',
    'EmptyExpressionError', 'TooManyResultsError', 'FactorialDomainError', 'ZeroRootError',
    'NegativeEvenRootError', 'DivideByZeroError', 'NonIntegerModuloError', 'LogDomainError',
    'ZeroOverZero', 'Token', 'TokenKind', 'Priority', 'Arity', 'classify', 'tokenize',
    'group', 'evaluate', 'Session', 'Outcome', '__version__',
]
