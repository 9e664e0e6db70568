"""Abstract Syntax Tree (AST) definitions for the Lox language.

Expressions and statements are plain dataclasses. A program is a list of
declarations: a `VarDecl` or one of the statement nodes (`ExprStmt`,
`PrintStmt`, `Block`). The interpreter pattern-matches on the node class.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from .tokens import Token


class UnOp(enum.Enum):
    MINUS = '-'
    BANG = '!'


class BinOp(enum.Enum):
    EQUAL_EQUAL = '=='
    BANG_EQUAL = '!='
    LESS = '<'
    LESS_EQUAL = '<='
    GREATER = '>'
    GREATER_EQUAL = '>='
    PLUS = '+'
    MINUS = '-'
    STAR = '*'
    SLASH = '/'


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Literal(Node):
    value: Any
    literal_type: str  # 'Number', 'String', 'True', 'False', 'Nil'


@dataclass
class Grouping(Node):
    expression: Node


@dataclass
class Unary(Node):
    op: UnOp
    right: Node


@dataclass
class Binary(Node):
    left: Node
    op: BinOp
    right: Node


@dataclass
class Variable(Node):
    name: Token


@dataclass
class Assign(Node):
    name: Token
    value: Node


@dataclass
class VarDecl(Node):
    name: Token
    initializer: Optional[Node]


@dataclass
class ExprStmt(Node):
    expression: Node


@dataclass
class PrintStmt(Node):
    expression: Node


@dataclass
class Block(Node):
    declarations: List[Node]


Expr = Union[Literal, Grouping, Unary, Binary, Variable, Assign]
Stmt = Union[ExprStmt, PrintStmt, Block]
Decl = Union[VarDecl, ExprStmt, PrintStmt, Block]
