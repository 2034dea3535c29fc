# errors.py
"""
Exception hierarchy for the calculator.

Every recoverable failure derives from CalculatorError so the single-shot driver and the REPL
can handle them in one place. ZeroOverZero is deliberately outside that hierarchy: it is the
0 / 0 easter egg and always ends the process with its own exit status.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


# ---------------------------
# Parse errors (tokenize)
# ---------------------------

class ParseError(CalculatorError):
    """Raised when the input line cannot be turned into a token stream."""
    pass

class UnknownTokenError(ParseError):
    def __init__(self, atom: str):
        super().__init__(f"Unknown token: {atom}")
        self.atom = atom

class MixedDelimiterError(ParseError):
    def __init__(self, chunk: str):
        super().__init__(f"One token may never contain both '(' and ')': {chunk}")
        self.chunk = chunk

class UnmatchedParenError(ParseError):
    def __init__(self, delimiter: str):
        super().__init__(f"Unmatched '{delimiter}'")
        self.delimiter = delimiter


class NoPriorAnswerError(CalculatorError):
    """Raised when `ans` is used before any expression succeeded."""

    def __init__(self):
        super().__init__("Can't use `ans` without previous answer!")


# ---------------------------
# Evaluation errors
# ---------------------------

class EvalError(CalculatorError):
    """Raised for errors during evaluation, e.g. domain errors or missing operands."""
    pass

class NumberFormatError(EvalError):
    def __init__(self, text: str):
        super().__init__(f"Cannot convert to number: {text}")
        self.text = text

class MissingOperandError(EvalError):
    def __init__(self, index: int, operator: str):
        super().__init__(
            f"Operator at index {index} missing argument(s): {operator}\n"
            "Note: The first index is 0"
        )
        self.index = index
        self.operator = operator

class EmptyExpressionError(EvalError):
    def __init__(self):
        super().__init__("Nothing to calculate")

class TooManyResultsError(EvalError):
    def __init__(self, first: str, second: str):
        super().__init__(f"Too many calculation results: {first} {second}\nMaybe you forgot an operator?")

class FactorialDomainError(EvalError):
    pass

class ZeroRootError(EvalError):
    pass

class NegativeEvenRootError(EvalError):
    pass

class DivideByZeroError(EvalError):
    pass

class NonIntegerModuloError(EvalError):
    pass

class LogDomainError(EvalError):
    pass


# ---------------------------
# Fatal easter egg
# ---------------------------

class ZeroOverZero(Exception):
    """
    Signals the 0 / 0 case. It is not a CalculatorError: callers must let it reach the
    entry point, which prints `message` and exits with `exit_code`.
    """
    exit_code = 69
    message = "Never gonna give you up!\nNever gonna let you down\n..."

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or "You can't divide by 0: 0 / 0"
        super().__init__(self.detail)
