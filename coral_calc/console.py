# console.py
"""Help and licence texts plus coloured output for terminals."""

import sys
from typing import Optional, TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

HELP_TEXT = """
Terminal Calculator Help
------------------------
Every number, operator and function must be separated by spaces.
Parentheses may touch the neighbouring token: (1 + 2) * 3

Priorities (evaluated from left to right within each tier):
  A: **  power               2 ** 10
     //  root (degree // x)  3 // 27
     !   factorial           5 !
     sin cos tan             sin pi
     dsin dcos dtan          dsin 90
     abs                     abs -4
  B: *  /  %                 7 % 3
     nCr nPr                 5 nCr 2
  C: +  -                    1 - 2
     log (x log base)        8 log 2

Constants: pi, tau, e, g, phi, c and ans (the previous result).
Prefix a constant with '-' to negate it: -pi

Commands:
  help              show this help message
  licence           show the licence notice
  :q, exit, quit    exit the calculator
"""

LICENCE_TEXT = """
coral-calc - minimal terminal calculator
This program comes with ABSOLUTELY NO WARRANTY.
This is free software, and you are welcome to redistribute it
under certain conditions.
"""

ISSUE_HINT = "If you believe this is a bug, please open an issue."


def _styled(text: str, style: str, stream: TextIO, color: bool) -> None:
    if color and stream.isatty():
        print_formatted_text(FormattedText([(style, text)]), file=stream)
    else:
        print(text, file=stream)


def print_error(message: str, color: bool = True, stream: Optional[TextIO] = None) -> None:
    _styled(message, 'ansired', stream or sys.stderr, color)


def print_notice(message: str, color: bool = True, stream: Optional[TextIO] = None) -> None:
    _styled(message, 'ansiblue', stream or sys.stdout, color)


def show_help() -> str:
    return HELP_TEXT.strip()


def show_licence() -> str:
    return LICENCE_TEXT.strip()
