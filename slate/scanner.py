"""Scanner for the Slate language.

Tokenization is delegated to Lark's basic lexer, configured with a
grammar that only declares terminals. The scanner wraps it to collect
lexical errors instead of stopping at the first one: after an unexpected
character the lexer is restarted just past it, and line numbers of the
restarted stream are shifted back onto the full input.

Each restart lexes only the text after the bad character, so tokens are
never produced twice. The restart does copy that remaining text, which
makes input with very many bad characters cost more than one pass; since
every such character is also a reported error, that case is kept simple.

`scan` is the public entry point and returns a `ScanResult` holding the
token list (always terminated by an EOF token) and the collected errors.
"""

from __future__ import annotations

from typing import List, NamedTuple

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import LexError
from .tokens import KEYWORDS, Token, TokenKind


SLATE_TERMINALS = r"""
    start: _token*

    _token: LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE
          | COMMA | DOT | MINUS | PLUS | SEMICOLON | SLASH | STAR
          | BANG_EQUAL | BANG | EQUAL_EQUAL | EQUAL
          | GREATER_EQUAL | GREATER | LESS_EQUAL | LESS
          | IDENTIFIER | STRING | NUMBER

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"
    BANG_EQUAL: "!="
    BANG: "!"
    EQUAL_EQUAL: "=="
    EQUAL: "="
    GREATER_EQUAL: ">="
    GREATER: ">"
    LESS_EQUAL: "<="
    LESS: "<"

    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    STRING: /"[^"]*"/
    NUMBER: /[0-9]+(\.[0-9]+)?/

    // Comments and whitespace
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
    WHITESPACE: /[ \t\r\n]+/
    %ignore WHITESPACE
"""


SLATE_LEXER = Lark(
    SLATE_TERMINALS,
    parser='lalr',
    lexer='basic',
)


class ScanResult(NamedTuple):
    tokens: List[Token]
    errors: List[LexError]


def _make_token(kind_name: str, text: str, line: int) -> Token:
    if kind_name == 'IDENTIFIER':
        return Token(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, None, line)
    if kind_name == 'NUMBER':
        return Token(TokenKind.NUMBER, text, float(text), line)
    if kind_name == 'STRING':
        return Token(TokenKind.STRING, text, text[1:-1], line)
    return Token(TokenKind[kind_name], text, None, line)


def scan(source: str) -> ScanResult:
    """Convert source text into tokens, collecting lexical errors."""
    tokens: List[Token] = []
    errors: List[LexError] = []
    offset = 0
    # Lark numbers lines from 1 for every restarted stream
    line_base = 0
    while offset < len(source):
        try:
            for tok in SLATE_LEXER.lex(source[offset:]):
                tokens.append(_make_token(tok.type, tok.value, tok.line + line_base))
            break
        except UnexpectedCharacters as e:
            line = e.line + line_base
            if e.char == '"':
                # A string with no closing quote swallows the rest of the input
                errors.append(LexError(line, 'Unterminated string.'))
                offset = len(source)
                break
            errors.append(LexError(line, f"Unexpected character '{e.char}'."))
            resume = offset + e.pos_in_stream + 1
            line_base += source.count('\n', offset, resume)
            offset = resume
    final_line = source.count('\n') + 1
    tokens.append(Token(TokenKind.EOF, '', None, final_line))
    return ScanResult(tokens, errors)
