"""Scanner turning Lox source text into a list of tokens.

The scanner makes a single left-to-right pass over the source, keeping a
``start`` and ``current`` cursor plus a line counter. It never fails:
characters it cannot make sense of are reported to the diagnostic sink
and skipped, and scanning carries on with the next character. The token
list always ends with an ``EOF`` token so the parser never needs a
separate end-of-input check.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .diagnostics import Reporter
from .tokens import KEYWORDS, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# first char -> (kind when followed by '=', kind otherwise)
ONE_OR_TWO_CHAR_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alpha_numeric(c: str) -> bool:
    # Identifiers continue with letters and digits only.
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or is_digit(c)


class Scanner:
    def __init__(self, source: str, reporter: Optional[Reporter] = None):
        self.source = source
        self.reporter = reporter if reporter is not None else Reporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def add_token(self, token_type: TokenType, literal: Any = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.line))

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in ONE_OR_TWO_CHAR_TOKENS:
            double, single = ONE_OR_TWO_CHAR_TOKENS[c]
            self.add_token(double if self.match('=') else single)
        elif c == '/':
            if self.match('/'):
                # A comment runs until the end of the line.
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.reporter.error(self.line, 'Unexpected character.')

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.reporter.error(self.line, 'Unterminated string.')
            return
        self.advance()  # closing quote
        # No escape sequences: the contents are taken verbatim.
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        integral_end = self.current
        # A trailing '.' without a digit after it is not part of the number.
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        # Lox numbers are integers; a fractional part is dropped.
        self.add_token(TokenType.NUMBER, int(self.source[self.start:integral_end]))

    def identifier(self):
        while is_alpha_numeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text)
        if token_type is None:
            self.add_token(TokenType.IDENTIFIER, text)
        else:
            self.add_token(token_type)


def scan(source: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    return Scanner(source, reporter).scan_tokens()
