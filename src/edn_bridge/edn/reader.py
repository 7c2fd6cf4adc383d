"""
EDN Reader

Reads EDN text into the value model: nil, booleans, numbers, strings,
keywords, vectors, lists and maps. Symbols, characters and ``#``
dispatch forms (sets, tagged literals, discards) are rejected.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional

from ..models import Keyword, Vector, EdnList, EdnMap
from ..types import EdnSyntaxError


# ============================================================
# Lexer
# ============================================================

class TokenType:
    EOF = "EOF"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    NIL = "NIL"
    BOOL = "BOOL"
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"
    KEYWORD = "KEYWORD"


@dataclass
class Token:
    type: str
    value: Any
    pos: int


WHITESPACE = " \t\r\n,"
DELIMITERS = WHITESPACE + '{}[]()";'
SYMBOL_CHARS = ".*+!-_?$%&=<>/'#:"
SYMBOL_START_CHARS = ".*+!-_?$%&=<>/'"

NUMBER_RE = re.compile(
    r"[+-]?(?:0|[1-9][0-9]*)"
    r"(?P<frac>\.[0-9]*)?"
    r"(?P<exp>[eE][+-]?[0-9]+)?"
    r"(?P<suffix>[NM])?"
)

SIMPLE_ESCAPES = {
    '"': '"',
    '\\': '\\',
    'n': '\n',
    't': '\t',
    'r': '\r',
    'b': '\b',
    'f': '\f',
}

SINGLE_CHAR_TOKENS = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


class Lexer:
    """Tokenizer for EDN text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek_char(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index >= self.length:
            return ""
        return self.text[index]

    def skip_whitespace_and_comments(self) -> None:
        while self.pos < self.length:
            c = self.text[self.pos]
            if c in WHITESPACE:
                self.pos += 1
            elif c == ";":
                while self.pos < self.length and self.text[self.pos] != "\n":
                    self.pos += 1
            else:
                break

    def next_token(self) -> Token:
        self.skip_whitespace_and_comments()

        if self.pos >= self.length:
            return Token(TokenType.EOF, None, self.pos)

        start = self.pos
        c = self.peek_char()

        if c in SINGLE_CHAR_TOKENS:
            self.pos += 1
            return Token(SINGLE_CHAR_TOKENS[c], c, start)

        if c == '"':
            return self._read_string()

        if c == ":":
            return self._read_keyword()

        if c.isdigit() or (c in "+-" and self.peek_char(1).isdigit()):
            return self._read_number()

        if c == "#":
            raise EdnSyntaxError("dispatch forms ('#') are not supported", start)

        if c == "\\":
            raise EdnSyntaxError("character literals are not supported", start)

        if c.isalpha() or c in SYMBOL_START_CHARS:
            return self._read_symbol()

        raise EdnSyntaxError(f"unexpected character '{c}'", start)

    def _read_while_symbol(self) -> str:
        start = self.pos
        while self.pos < self.length:
            c = self.text[self.pos]
            if c.isalnum() or c in SYMBOL_CHARS:
                self.pos += 1
            else:
                break
        return self.text[start:self.pos]

    def _expect_delimiter(self, start: int, what: str) -> None:
        c = self.peek_char()
        if c and c not in DELIMITERS:
            raise EdnSyntaxError(f"invalid {what} '{self.text[start:self.pos + 1]}'", start)

    def _read_string(self) -> Token:
        start = self.pos
        self.pos += 1  # Skip opening quote
        result = []

        while self.pos < self.length:
            c = self.text[self.pos]
            if c == '"':
                self.pos += 1
                return Token(TokenType.STRING, "".join(result), start)
            if c == '\\':
                self.pos += 1
                if self.pos >= self.length:
                    raise EdnSyntaxError("unterminated escape sequence", self.pos)
                esc = self.text[self.pos]
                if esc in SIMPLE_ESCAPES:
                    result.append(SIMPLE_ESCAPES[esc])
                elif esc == 'u':
                    hex_str = self.text[self.pos + 1:self.pos + 5]
                    if len(hex_str) != 4 or not all(h in "0123456789abcdefABCDEF" for h in hex_str):
                        raise EdnSyntaxError("invalid unicode escape", self.pos - 1)
                    result.append(chr(int(hex_str, 16)))
                    self.pos += 4
                else:
                    raise EdnSyntaxError(f"unsupported escape '\\{esc}'", self.pos - 1)
            else:
                result.append(c)
            self.pos += 1

        raise EdnSyntaxError("unterminated string", start)

    def _read_keyword(self) -> Token:
        start = self.pos
        self.pos += 1  # Skip colon
        name = self._read_while_symbol()
        if not name:
            raise EdnSyntaxError("keyword name cannot be empty", start)
        return Token(TokenType.KEYWORD, Keyword(":" + name), start)

    def _read_number(self) -> Token:
        start = self.pos
        match = NUMBER_RE.match(self.text, self.pos)
        if match is None:
            raise EdnSyntaxError("invalid number", start)
        self.pos = match.end()
        self._expect_delimiter(start, "number")

        literal = match.group(0)
        suffix = match.group("suffix")
        if suffix:
            literal = literal[:-1]

        if match.group("frac") is not None or match.group("exp") is not None or suffix == "M":
            return Token(TokenType.FLOAT, float(literal), start)
        return Token(TokenType.INT, int(literal), start)

    def _read_symbol(self) -> Token:
        start = self.pos
        s = self._read_while_symbol()

        if s == "nil":
            return Token(TokenType.NIL, None, start)
        if s == "true":
            return Token(TokenType.BOOL, True, start)
        if s == "false":
            return Token(TokenType.BOOL, False, start)

        raise EdnSyntaxError(f"symbols are not supported: '{s}'", start)


# ============================================================
# Parser
# ============================================================

CLOSERS = {
    TokenType.LBRACKET: TokenType.RBRACKET,
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACE: TokenType.RBRACE,
}

SCALAR_TOKENS = (
    TokenType.NIL,
    TokenType.BOOL,
    TokenType.INT,
    TokenType.FLOAT,
    TokenType.STRING,
    TokenType.KEYWORD,
)


class Parser:
    """Recursive descent parser for EDN text."""

    def __init__(self, text: str):
        self.lexer = Lexer(text)
        self.current: Optional[Token] = None

    def advance(self) -> Token:
        self.current = self.lexer.next_token()
        return self.current

    def parse(self) -> Any:
        """Parse exactly one top-level form."""
        self.advance()
        if self.current.type == TokenType.EOF:
            raise EdnSyntaxError("no EDN form found", self.current.pos)

        value = self._parse_value()

        if self.current.type != TokenType.EOF:
            raise EdnSyntaxError("unexpected content after top-level form", self.current.pos)
        return value

    def _parse_value(self) -> Any:
        tok = self.current

        if tok.type in SCALAR_TOKENS:
            self.advance()
            return tok.value

        if tok.type == TokenType.LBRACKET:
            return Vector(self._parse_forms(tok))

        if tok.type == TokenType.LPAREN:
            return EdnList(self._parse_forms(tok))

        if tok.type == TokenType.LBRACE:
            return self._parse_map(tok)

        if tok.type == TokenType.EOF:
            raise EdnSyntaxError("unexpected end of input", tok.pos)

        raise EdnSyntaxError(f"unexpected '{tok.value}'", tok.pos)

    def _parse_forms(self, opener: Token) -> List[Any]:
        """Parse forms up to the closer matching ``opener``."""
        closer = CLOSERS[opener.type]
        items = []
        self.advance()

        while self.current.type != closer:
            if self.current.type == TokenType.EOF:
                raise EdnSyntaxError(f"unterminated '{opener.value}'", opener.pos)
            if self.current.type in CLOSERS.values():
                raise EdnSyntaxError(
                    f"expected '{closer}' but found '{self.current.value}'", self.current.pos
                )
            items.append(self._parse_value())

        self.advance()
        return items

    def _parse_map(self, opener: Token) -> EdnMap:
        forms = self._parse_forms(opener)
        if len(forms) % 2 != 0:
            raise EdnSyntaxError("map literal must contain an even number of forms", opener.pos)
        return EdnMap(tuple(forms[0::2]), tuple(forms[1::2]))


def parse_edn(text: str) -> Any:
    """
    Parse EDN text into an EDN value tree.

    Args:
        text: EDN source text holding a single form

    Returns:
        EDN value (None, bool, int, float, str, Keyword, Vector, EdnList or EdnMap)

    Raises:
        EdnSyntaxError: If the text is not a single well-formed EDN form
    """
    return Parser(text).parse()
