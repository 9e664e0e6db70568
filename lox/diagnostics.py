"""Diagnostic sink shared by the scanner, parser and interpreter.

None of the front-end phases print on their own; they hand every problem
to a `Reporter`, which renders it and remembers that an error happened.
The command line owns the reporter and decides what the flags mean for
the process exit code.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .errors import LoxRuntimeError
from .tokens import Token, TokenType


class Reporter:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.diagnostics: List[str] = []

    def reset(self):
        """Forget earlier errors, e.g. between two lines of the prompt."""
        self.had_error = False
        self.had_runtime_error = False
        self.diagnostics.clear()

    def report(self, line: int, location: str, message: str):
        self.had_error = True
        self._emit(f"[line {line}] Error{location}: {message}")

    def error(self, line: int, message: str):
        self.report(line, "", message)

    def token_error(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error: LoxRuntimeError):
        self.had_runtime_error = True
        self._emit(f"Runtime error: {error.message}")

    def _emit(self, text: str):
        self.diagnostics.append(text)
        # sys.stderr is looked up per call; it may have been replaced.
        stream = self.stream if self.stream is not None else sys.stderr
        print(text, file=stream)
