# session.py
"""Per-process calculation state: the `ans` value and whether the last line failed."""

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import CalculatorError
from .evaluator import evaluate
from .grouper import group
from .lexer import tokenize
from .numeric import format_number

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of one line: either a value or the error that stopped it."""
    ok: bool
    text: str
    value: Optional[float] = None
    error: Optional[CalculatorError] = None


@dataclass
class Session:
    last_answer: Optional[float] = None
    last_failed: bool = False

    def calculate(self, line: str) -> float:
        """
        Tokenize, group and evaluate one line, remembering the result as `ans`.

        On failure the error propagates and `last_answer` is left untouched.
        """
        try:
            result = evaluate(group(tokenize(line, self.last_answer)))
        except CalculatorError as e:
            self.last_failed = True
            logger.info("Calculation of %r failed: %s", line, e)
            raise
        self.last_failed = False
        self.last_answer = result
        return result

    def run_line(self, line: str) -> Outcome:
        try:
            value = self.calculate(line)
        except CalculatorError as e:
            return Outcome(ok=False, text=str(e), error=e)
        return Outcome(ok=True, text=format_number(value), value=value)
