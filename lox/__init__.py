# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .interpreter import run_program, Interpreter, Lox
from .parser import parse_program
from .errors import LoxRuntimeError
from .diagnostics import Reporter

__all__ = [
    'run_program',
    'parse_program',
    'Interpreter',
    'Lox',
    'LoxRuntimeError',
    'Reporter',
]
