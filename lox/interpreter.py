"""Tree-walking interpreter for the Lox language.

The interpreter executes declarations directly against a chain of
`Environment` scopes. Entering a block swaps in a fresh child scope and
the previous scope is restored on every exit path, including when a
runtime error propagates out of the block. Each top-level declaration is
run on its own: a runtime error is reported once and execution carries on
with the next declaration.

`Lox` ties the pipeline together for the command line: it scans, parses
and runs one chunk of source at a time against a global scope that lives
as long as the session.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO

from .ast import (
    Node, Literal, Grouping, Unary, Binary, Variable, Assign,
    VarDecl, ExprStmt, PrintStmt, Block, UnOp, BinOp,
)
from .ast_printer import print_ast
from .diagnostics import Reporter
from .environment import Environment
from .errors import LoxRuntimeError
from .parser import Parser
from .scanner import scan
from .values import is_number, is_truthy, to_string, type_name, values_equal


def divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise LoxRuntimeError('ZeroDivisionError', 'Division by zero.')
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Interpreter:
    """Core interpreter that executes the Lox AST."""
    def __init__(self, reporter: Optional[Reporter] = None, out: Optional[TextIO] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.reporter = reporter if reporter is not None else Reporter()
        self.out = out
        self.globals = Environment()
        self.environment = self.globals
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, declarations: List[Node]):
        for decl in declarations:
            try:
                self.execute(decl)
            except LoxRuntimeError as ex:
                if self.debug_level >= 1:
                    self.debug(f"runtime error in {print_ast(decl)}: {ex}")
                self.reporter.runtime_error(ex)

    def execute(self, node: Node):
        if isinstance(node, ExprStmt):
            self.evaluate(node.expression)
            return
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.expression)
            print(to_string(value), file=self.out if self.out is not None else sys.stdout)
            return
        if isinstance(node, VarDecl):
            value = self.evaluate(node.initializer) if node.initializer is not None else None
            self.environment.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"define {node.name.lexeme}: {type_name(value)} = {to_string(value)}")
            return
        if isinstance(node, Block):
            self.execute_block(node.declarations, Environment(self.environment))
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def execute_block(self, declarations: List[Node], env: Environment):
        previous = self.environment
        self.environment = env
        if self.debug_level >= 3:
            self.debug(f"enter block ({len(declarations)} declarations)")
        try:
            for decl in declarations:
                self.execute(decl)
        finally:
            self.environment = previous
            if self.debug_level >= 3:
                self.debug("leave block")

    def evaluate(self, node: Node) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression)
        if isinstance(node, Unary):
            right = self.evaluate(node.right)
            if node.op == UnOp.MINUS:
                if not is_number(right):
                    raise LoxRuntimeError('TypeError', 'Operand must be a number!')
                return -right
            return not is_truthy(right)
        if isinstance(node, Binary):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, Variable):
            return self.environment.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.environment.assign(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name.lexeme}: {type_name(value)} = {to_string(value)}")
            return value
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_binary_op(self, op: BinOp, a: Any, b: Any) -> Any:
        if is_number(a) and is_number(b):
            if op == BinOp.EQUAL_EQUAL: return a == b
            if op == BinOp.BANG_EQUAL: return a != b
            if op == BinOp.LESS: return a < b
            if op == BinOp.LESS_EQUAL: return a <= b
            if op == BinOp.GREATER: return a > b
            if op == BinOp.GREATER_EQUAL: return a >= b
            if op == BinOp.PLUS: return a + b
            if op == BinOp.MINUS: return a - b
            if op == BinOp.STAR: return a * b
            if op == BinOp.SLASH: return divide(a, b)
        if isinstance(a, str) and isinstance(b, str):
            if op == BinOp.EQUAL_EQUAL: return a == b
            if op == BinOp.BANG_EQUAL: return a != b
            if op == BinOp.PLUS: return a + b
            raise LoxRuntimeError('TypeError', 'Operands must be numbers.')
        if op == BinOp.EQUAL_EQUAL:
            return values_equal(a, b)
        if op == BinOp.BANG_EQUAL:
            return not values_equal(a, b)
        raise LoxRuntimeError('TypeError', 'Operands must be two numbers or two strings.')


class Lox:
    """A running session: one global scope shared by every chunk it runs."""
    def __init__(self, reporter: Optional[Reporter] = None, out: Optional[TextIO] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.reporter = reporter if reporter is not None else Reporter()
        self.interpreter = Interpreter(self.reporter, out, debug_level, debug_file)

    def parse(self, source: str) -> List[Node]:
        tokens = scan(source, self.reporter)
        declarations = Parser(tokens, self.reporter).parse()
        if self.interpreter.debug_level >= 1:
            for decl in declarations:
                self.interpreter.debug(print_ast(decl))
        return declarations

    def run(self, source: str):
        """Scan, parse and execute one chunk of source.

        Nothing in the chunk runs if it contained a syntax error.
        """
        self.reporter.reset()
        declarations = self.parse(source)
        # The parser still returns the declarations that parsed cleanly, but
        # a chunk with any scan or parse error runs none of them.
        if self.reporter.had_error:
            return
        self.interpreter.interpret(declarations)

    def close(self):
        self.interpreter.close()


def run_program(source: str, debug_level: int = 0) -> Reporter:
    """Convenience function to run a Lox program from a source string."""
    lox = Lox(debug_level=debug_level)
    try:
        lox.run(source)
    finally:
        lox.close()
    return lox.reporter
