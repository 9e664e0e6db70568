"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that a program can be
parsed once, written out with ``--emit-ast`` and executed later with
``--ast``. Tokens are kept whole (kind, lexeme, payload and line) so that
diagnostics from a reloaded program still name the right source line.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Literal,
    Grouping,
    Unary,
    Binary,
    Variable,
    Assign,
    VarDecl,
    ExprStmt,
    PrintStmt,
    Block,
    UnOp,
    BinOp,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"kind": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["kind"]], o["lexeme"], o.get("literal"), o["line"])


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_obj(n) for n in node]

    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value, "literal_type": node.literal_type}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {"type": "Unary", "op": node.op.value, "right": ast_to_obj(node.right)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "op": node.op.value,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, VarDecl):
        return {
            "type": "VarDecl",
            "name": token_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expression": ast_to_obj(node.expression)}
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Block):
        return {"type": "Block", "declarations": [ast_to_obj(d) for d in node.declarations]}

    raise ValueError(f"Unsupported AST node for serialization: {type(node)}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, list):
        return [ast_from_obj(x) for x in obj]
    if not isinstance(obj, dict):
        raise ValueError(f"Invalid AST object: {obj!r}")

    t = obj.get("type")
    if t == "Literal":
        return Literal(obj["value"], obj["literal_type"])
    if t == "Grouping":
        return Grouping(ast_from_obj(obj["expression"]))
    if t == "Unary":
        return Unary(UnOp(obj["op"]), ast_from_obj(obj["right"]))
    if t == "Binary":
        return Binary(ast_from_obj(obj["left"]), BinOp(obj["op"]), ast_from_obj(obj["right"]))
    if t == "Variable":
        return Variable(token_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(token_from_obj(obj["name"]), ast_from_obj(obj["value"]))
    if t == "VarDecl":
        return VarDecl(token_from_obj(obj["name"]), ast_from_obj(obj.get("initializer")))
    if t == "ExprStmt":
        return ExprStmt(ast_from_obj(obj["expression"]))
    if t == "PrintStmt":
        return PrintStmt(ast_from_obj(obj["expression"]))
    if t == "Block":
        declarations: List[Any] = [ast_from_obj(d) for d in obj.get("declarations", [])]
        return Block(declarations)

    raise ValueError(f"Unknown AST node type: {t!r}")
