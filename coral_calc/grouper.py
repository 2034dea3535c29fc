# grouper.py
"""Nest every parenthesised span into the `children` of its opening token."""

from typing import List

from .tokens import Token, TokenKind


def _matching_close(tokens: List[Token], open_index: int) -> int:
    depth = 1
    for i in range(open_index + 1, len(tokens)):
        if tokens[i].kind == TokenKind.OPEN_GROUP:
            depth += 1
        elif tokens[i].kind == TokenKind.CLOSE_GROUP:
            depth -= 1
            if depth == 0:
                return i
    raise ValueError(f"No matching ')' for '(' at index {open_index}")


def group(flat: List[Token]) -> List[Token]:
    """
    Replace each matched '(' ... ')' span with a single OPEN_GROUP token whose
    children hold the recursively grouped contents.

    The input must already be balanced, which tokenize() guarantees.
    """
    grouped: List[Token] = []
    i = 0
    while i < len(flat):
        tok = flat[i]
        if tok.kind == TokenKind.OPEN_GROUP:
            close = _matching_close(flat, i)
            grouped.append(Token(tok.kind, tok.priority, tok.arity, tok.text,
                                 children=group(flat[i + 1:close])))
            i = close + 1
            continue
        grouped.append(tok)
        i += 1
    return grouped
