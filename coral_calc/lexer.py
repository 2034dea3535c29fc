# lexer.py
"""
Lexer: turns one space-delimited input line into a flat list of classified tokens.

Chunks are split on single spaces, parentheses glued to other text are split off,
constants are resolved to number literals and parenthesis balance is validated.
"""

import logging
import math
from typing import Dict, List, Optional

from .errors import MixedDelimiterError, NoPriorAnswerError, UnmatchedParenError
from .numeric import format_number
from .tokens import Token, TokenKind, classify

logger = logging.getLogger(__name__)

CONSTANT_VALUES: Dict[str, float] = {
    'pi': math.pi,
    'tau': math.tau,
    'e': math.e,
    'phi': (1 + math.sqrt(5)) / 2,
    'g': 9.80665,        # standard gravity, https://oeis.org/A072915
    'c': 299792458.0,    # speed of light in m/s, https://oeis.org/A003678
}


def split_chunk(chunk: str) -> List[str]:
    """
    Split a whitespace-free chunk like '(6' or '9)' into atoms.

    '(' is emitted before whatever follows it, ')' after whatever precedes it.
    """
    if not chunk:
        return []
    if '(' in chunk and ')' in chunk:
        raise MixedDelimiterError(chunk)
    if '(' in chunk:
        before, _, after = chunk.partition('(')
        return split_chunk(before) + ['('] + split_chunk(after)
    if ')' in chunk:
        before, _, after = chunk.partition(')')
        return split_chunk(before) + [')'] + split_chunk(after)
    return [chunk]


def resolve_constant(atom: str, last_answer: Optional[float] = None) -> float:
    """Numeric value of a constant atom such as 'pi', '-tau' or 'ans'."""
    negate = atom.startswith('-')
    name = atom[1:] if negate else atom
    if name == 'ans':
        if last_answer is None:
            raise NoPriorAnswerError()
        value = last_answer
    else:
        value = CONSTANT_VALUES[name]
    return -value if negate else value


def _check_balance(tokens: List[Token]) -> None:
    depth = 0
    for tok in tokens:
        if tok.kind == TokenKind.OPEN_GROUP:
            depth += 1
        elif tok.kind == TokenKind.CLOSE_GROUP:
            depth -= 1
            if depth < 0:
                raise UnmatchedParenError(')')
    if depth > 0:
        raise UnmatchedParenError('(')


def tokenize(line: str, last_answer: Optional[float] = None) -> List[Token]:
    """
    Convert an input line into a flat token list.

    Args:
        line: expression with atoms separated by spaces, e.g. "5 * (5 + 5)"
        last_answer: value substituted for the `ans` constant

    Returns:
        Flat list of tokens, still containing OPEN_GROUP and CLOSE_GROUP tokens

    Raises:
        ParseError: on unknown atoms, mixed delimiters or unbalanced parentheses
        NoPriorAnswerError: if `ans` is used while last_answer is None
    """
    tokens: List[Token] = []
    for chunk in line.split(' '):
        for atom in split_chunk(chunk):
            kind, priority, arity = classify(atom)
            if kind == TokenKind.CONSTANT:
                # Constants become plain number literals right away.
                tokens.append(Token.number(format_number(resolve_constant(atom, last_answer))))
            else:
                tokens.append(Token(kind, priority, arity, atom))
    _check_balance(tokens)
    logger.debug("Tokenized %r into %s", line, tokens)
    return tokens
