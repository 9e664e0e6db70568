"""Fully parenthesized prefix rendering of the AST, for tracing and tests."""

from typing import Any

from .ast import (
    Node, Literal, Grouping, Unary, Binary, Variable, Assign,
    VarDecl, ExprStmt, PrintStmt, Block,
)


def parenthesize(name: str, *parts: Any) -> str:
    return '(' + ' '.join([name] + [print_ast(p) for p in parts]) + ')'


def print_ast(node: Node) -> str:
    if isinstance(node, Literal):
        if node.literal_type == 'String':
            return f'"{node.value}"'
        if node.literal_type == 'Number':
            return str(node.value)
        return node.literal_type.lower()
    if isinstance(node, Grouping):
        return parenthesize('group', node.expression)
    if isinstance(node, Unary):
        return parenthesize(node.op.value, node.right)
    if isinstance(node, Binary):
        return parenthesize(node.op.value, node.left, node.right)
    if isinstance(node, Variable):
        return node.name.lexeme
    if isinstance(node, Assign):
        return f'(= {node.name.lexeme} {print_ast(node.value)})'
    if isinstance(node, VarDecl):
        if node.initializer is None:
            return f'(var {node.name.lexeme})'
        return f'(var {node.name.lexeme} {print_ast(node.initializer)})'
    if isinstance(node, ExprStmt):
        return parenthesize(';', node.expression)
    if isinstance(node, PrintStmt):
        return parenthesize('print', node.expression)
    if isinstance(node, Block):
        return parenthesize('block', *node.declarations)
    raise NotImplementedError(f"print_ast: unexpected node type {type(node)}")
