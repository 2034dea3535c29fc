# tokens.py
"""
Token model and the classifier that maps an isolated atom to its kind, priority and arity.

Priorities:
    X  numbers, factorials (after the pre-pass) and groups; never reduced
    A  powers, roots, abs and the trigonometric functions
    B  multiplication, division, nCr, nPr and modulo
    C  addition, subtraction and logarithms

Within each tier operators are reduced strictly from left to right.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import UnknownTokenError


class TokenKind(Enum):
    NUMBER = "number"
    CONSTANT = "constant"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    ROOT = "root"
    FACTORIAL = "factorial"
    MODULO = "modulo"
    LOG = "log"
    COMBINATION = "nCr"
    PERMUTATION = "nPr"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SIN_DEG = "dsin"
    COS_DEG = "dcos"
    TAN_DEG = "dtan"
    ABS = "abs"
    OPEN_GROUP = "open"
    CLOSE_GROUP = "close"


class Priority(Enum):
    X = 0
    A = 1
    B = 2
    C = 3


class Arity(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    LEFT_RIGHT = "left_right"


# Tiers in reduction order.
REDUCTION_TIERS = (Priority.A, Priority.B, Priority.C)

OPERATORS: Dict[str, Tuple[TokenKind, Priority, Arity]] = {
    '+': (TokenKind.ADD, Priority.C, Arity.LEFT_RIGHT),
    '-': (TokenKind.SUB, Priority.C, Arity.LEFT_RIGHT),
    '*': (TokenKind.MUL, Priority.B, Arity.LEFT_RIGHT),
    '/': (TokenKind.DIV, Priority.B, Arity.LEFT_RIGHT),
    '%': (TokenKind.MODULO, Priority.B, Arity.LEFT_RIGHT),
    '**': (TokenKind.POW, Priority.A, Arity.LEFT_RIGHT),
    '//': (TokenKind.ROOT, Priority.A, Arity.LEFT_RIGHT),
    '!': (TokenKind.FACTORIAL, Priority.A, Arity.LEFT),
    'log': (TokenKind.LOG, Priority.C, Arity.LEFT_RIGHT),
    'nCr': (TokenKind.COMBINATION, Priority.B, Arity.LEFT_RIGHT),
    'nPr': (TokenKind.PERMUTATION, Priority.B, Arity.LEFT_RIGHT),
    'sin': (TokenKind.SIN, Priority.A, Arity.RIGHT),
    'cos': (TokenKind.COS, Priority.A, Arity.RIGHT),
    'tan': (TokenKind.TAN, Priority.A, Arity.RIGHT),
    'dsin': (TokenKind.SIN_DEG, Priority.A, Arity.RIGHT),
    'dcos': (TokenKind.COS_DEG, Priority.A, Arity.RIGHT),
    'dtan': (TokenKind.TAN_DEG, Priority.A, Arity.RIGHT),
    'abs': (TokenKind.ABS, Priority.A, Arity.RIGHT),
    '(': (TokenKind.OPEN_GROUP, Priority.X, Arity.NONE),
    ')': (TokenKind.CLOSE_GROUP, Priority.X, Arity.NONE),
}

CONSTANT_NAMES = ('pi', 'tau', 'e', 'g', 'phi', 'c', 'ans')

NUMBER_RE = re.compile(r'-?[0-9]+(?:\.[0-9]+)?')


@dataclass
class Token:
    """One unit of the intermediate representation."""
    kind: TokenKind
    priority: Priority
    arity: Arity
    text: str
    children: Optional[List['Token']] = None
    value: Optional[float] = None

    @classmethod
    def number(cls, text: str, value: Optional[float] = None) -> 'Token':
        return cls(TokenKind.NUMBER, Priority.X, Arity.NONE, text, value=value)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    def __repr__(self) -> str:
        if self.children is not None:
            return f"Token({self.kind.name}, children={self.children!r})"
        return f"Token({self.kind.name}, {self.text!r})"


def is_constant_name(atom: str) -> bool:
    name = atom[1:] if atom.startswith('-') else atom
    return name in CONSTANT_NAMES


def classify(atom: str) -> Tuple[TokenKind, Priority, Arity]:
    """
    Get the kind, priority and arity of an isolated atom such as "3.5", "*", "sin" or "(".

    Raises:
        UnknownTokenError: if the atom is not a number, constant or known operator
    """
    if NUMBER_RE.fullmatch(atom):
        return TokenKind.NUMBER, Priority.X, Arity.NONE
    if is_constant_name(atom):
        return TokenKind.CONSTANT, Priority.X, Arity.NONE
    if atom in OPERATORS:
        return OPERATORS[atom]
    raise UnknownTokenError(atom)
