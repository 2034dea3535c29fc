# repl.py
"""Interactive read-eval-print loop built on prompt_toolkit."""

import logging
import sys
from typing import Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from .config import Settings
from .console import print_error, print_notice, show_help, show_licence
from .session import Session
from .tokens import CONSTANT_NAMES, OPERATORS

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {':q', 'exit', 'exit()', 'quit'}
HELP_COMMANDS = {'help'}
LICENCE_COMMANDS = {'licence', 'license'}

COMPLETION_WORDS = sorted(
    [op for op in OPERATORS if op.isalpha()] + list(CONSTANT_NAMES) + ['help', 'licence', 'exit']
)


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, prompt_session=None):
        self.settings = settings or Settings()
        self.session = Session()
        # Created lazily so that tests can inject a fake without a terminal.
        self.prompt_session = prompt_session

    def _make_prompt_session(self) -> PromptSession:
        return PromptSession(
            history=FileHistory(self.settings.history_file),
            completer=WordCompleter(COMPLETION_WORDS),
        )

    def _process_command(self, line: str) -> Optional[str]:
        """Return the response for a meta-command, or None if the line is an expression."""
        s = line.strip()
        if s in HELP_COMMANDS:
            return show_help()
        if s in LICENCE_COMMANDS:
            return show_licence()
        return None

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """
        Evaluate a single line (either command or expression). Returns (ok, output).

        ZeroOverZero is not caught here; it ends the whole loop.
        """
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out

        try:
            outcome = self.session.run_line(line.strip())
        except (ArithmeticError, ValueError, RecursionError) as e:
            logger.error("Unhandled error while evaluating %r: %s", line, e)
            self.session.last_failed = True
            return False, f"Unhandled error: {e}"
        if not outcome.ok:
            return False, f"Error: {outcome.text}"
        return True, outcome.text

    def repl_loop(self) -> int:
        """Run until an exit command or EOF; returns the exit status."""
        color = self.settings.color
        print_notice(show_licence(), color)
        if self.prompt_session is None:
            self.prompt_session = self._make_prompt_session()
        while True:
            try:
                line = self.prompt_session.prompt(self.settings.prompt)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                return 0
            if not line.strip():
                continue
            if line.strip() in EXIT_COMMANDS:
                return 0
            ok, out = self.evaluate_line(line)
            if ok:
                print(out)
            else:
                print_error(out, color, sys.stdout)
