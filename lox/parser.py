"""Recursive-descent parser for the Lox language.

Grammar, lowest to highest precedence::

    declaration  := "var" IDENT ("=" expression)? ";" | statement
    statement    := "print" expression ";" | "{" declaration* "}" | expression ";"
    expression   := assignment
    assignment   := IDENT "=" assignment | equality
    equality     := comparison ( ("==" | "!=") comparison )*
    comparison   := term ( ("<" | "<=" | ">" | ">=") term )*
    term         := factor ( ("+" | "-") factor )*
    factor       := unary ( ("*" | "/") unary )*
    unary        := ("!" | "-") unary | primary
    primary      := NUMBER | STRING | "true" | "false" | "nil"
                  | IDENT | "(" expression ")"

Every binary level parses one operand at the next level up and then folds
further operands into a left-nested `Binary`, which makes all of them
left-associative. Assignment is right-associative and only accepts a plain
variable on its left.

Tokens are matched by kind only; payloads are read from the consumed
token afterwards. A syntax error is reported to the diagnostic sink and
unwinds to `declaration()`, which skips ahead to the next statement
boundary so that later declarations still parse.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Node, Literal, Grouping, Unary, Binary, Variable, Assign,
    VarDecl, ExprStmt, PrintStmt, Block, UnOp, BinOp,
)
from .diagnostics import Reporter
from .errors import ParseError
from .scanner import scan
from .tokens import Token, TokenType

# Grouping, unary and block nesting beyond this is rejected rather than
# allowed to exhaust the Python stack.
MAX_NESTING = 48

# No expression tree is deeper than this, counting every operator folded
# into a chain, so walks over the tree stay within the Python stack.
MAX_TREE_DEPTH = 128

BINARY_OPS = {
    TokenType.EQUAL_EQUAL: BinOp.EQUAL_EQUAL,
    TokenType.BANG_EQUAL: BinOp.BANG_EQUAL,
    TokenType.LESS: BinOp.LESS,
    TokenType.LESS_EQUAL: BinOp.LESS_EQUAL,
    TokenType.GREATER: BinOp.GREATER,
    TokenType.GREATER_EQUAL: BinOp.GREATER_EQUAL,
    TokenType.PLUS: BinOp.PLUS,
    TokenType.MINUS: BinOp.MINUS,
    TokenType.STAR: BinOp.STAR,
    TokenType.SLASH: BinOp.SLASH,
}

UNARY_OPS = {
    TokenType.MINUS: UnOp.MINUS,
    TokenType.BANG: UnOp.BANG,
}

STATEMENT_STARTS = {
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], reporter: Optional[Reporter] = None):
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else Reporter()
        self.pos = 0
        self.depth = 0
        self.last_depth = 0  # depth of the expression most recently built

    def parse(self) -> List[Node]:
        declarations: List[Node] = []
        while not self.is_at_end():
            decl = self.declaration()
            if decl is not None:
                declarations.append(decl)
        return declarations

    # Token helpers

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type == token_type

    def match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.reporter.token_error(token, message)
        return ParseError(token, message)

    def synchronize(self):
        """Discard tokens until a likely statement boundary."""
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    def enter(self):
        self.depth += 1
        if self.depth > MAX_NESTING:
            raise self.error(self.peek(), 'Too much nesting.')

    def leave(self):
        self.depth -= 1

    def sized(self, expr: Node, depth: int) -> Node:
        if depth > MAX_TREE_DEPTH:
            raise self.error(self.peek(), 'Expression too complex.')
        self.last_depth = depth
        return expr

    # Declarations and statements

    def declaration(self) -> Optional[Node]:
        depth = self.depth
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.depth = depth
            self.synchronize()
            return None

    def var_declaration(self) -> VarDecl:
        name = self.consume(TokenType.IDENTIFIER, 'Expect variable name.')
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDecl(name, initializer)

    def statement(self) -> Node:
        if self.match(TokenType.PRINT):
            value = self.expression()
            self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
            return PrintStmt(value)
        if self.match(TokenType.LEFT_BRACE):
            return Block(self.block())
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExprStmt(expr)

    def block(self) -> List[Node]:
        self.enter()
        declarations: List[Node] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            decl = self.declaration()
            if decl is not None:
                declarations.append(decl)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        self.leave()
        return declarations

    # Expressions

    def expression(self) -> Node:
        return self.assignment()

    def assignment(self) -> Node:
        expr = self.equality()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            self.enter()
            value = self.assignment()
            self.leave()
            if isinstance(expr, Variable):
                return self.sized(Assign(expr.name, value), self.last_depth + 1)
            raise self.error(equals, 'Invalid assignment target.')
        return expr

    def binary(self, operand, *types: TokenType) -> Node:
        expr = operand()
        depth = self.last_depth
        while self.match(*types):
            op = BINARY_OPS[self.previous().type]
            right = operand()
            # each fold pushes the operands before it one level deeper
            depth = max(depth, self.last_depth) + 1
            expr = self.sized(Binary(expr, op, right), depth)
        return expr

    def equality(self) -> Node:
        return self.binary(self.comparison, TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)

    def comparison(self) -> Node:
        return self.binary(self.term, TokenType.LESS, TokenType.LESS_EQUAL,
                           TokenType.GREATER, TokenType.GREATER_EQUAL)

    def term(self) -> Node:
        return self.binary(self.factor, TokenType.PLUS, TokenType.MINUS)

    def factor(self) -> Node:
        return self.binary(self.unary, TokenType.STAR, TokenType.SLASH)

    def unary(self) -> Node:
        if self.match(TokenType.BANG, TokenType.MINUS):
            op = UNARY_OPS[self.previous().type]
            self.enter()
            right = self.unary()
            self.leave()
            return self.sized(Unary(op, right), self.last_depth + 1)
        return self.primary()

    def primary(self) -> Node:
        if self.match(TokenType.FALSE):
            return self.sized(Literal(False, 'False'), 1)
        if self.match(TokenType.TRUE):
            return self.sized(Literal(True, 'True'), 1)
        if self.match(TokenType.NIL):
            return self.sized(Literal(None, 'Nil'), 1)
        if self.match(TokenType.NUMBER):
            return self.sized(Literal(self.previous().literal, 'Number'), 1)
        if self.match(TokenType.STRING):
            return self.sized(Literal(self.previous().literal, 'String'), 1)
        if self.match(TokenType.IDENTIFIER):
            return self.sized(Variable(self.previous()), 1)
        if self.match(TokenType.LEFT_PAREN):
            self.enter()
            expr = self.expression()
            inner = self.last_depth
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            self.leave()
            return self.sized(Grouping(expr), inner + 1)
        raise self.error(self.peek(), 'Expect expression.')


def parse_program(source: str, reporter: Optional[Reporter] = None) -> List[Node]:
    """Scan and parse Lox source into a list of declarations.

    Syntax errors are reported to `reporter` and the declarations that
    contained them are left out of the result.
    """
    if reporter is None:
        reporter = Reporter()
    tokens = scan(source, reporter)
    return Parser(tokens, reporter).parse()
