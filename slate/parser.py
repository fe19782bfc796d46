"""Recursive-descent parser for the Slate language.

The parser consumes the token list produced by `slate.scanner.scan` and
builds a `Program`. Syntax errors do not stop the parse: each one is
recorded, the parser skips ahead to the next statement boundary and
carries on, so a single pass reports every independent error.

`for` loops are desugared here into `while` loops wrapped in blocks, so
the interpreter never sees them.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .ast import (
    Program, ExprStmt, PrintStmt, VarDecl, Block, IfStmt, WhileStmt,
    Literal, Grouping, UnaryOp, BinaryOp, LogicalOp, Variable, Assign,
    Expr, Stmt,
)
from .errors import ParseError
from .tokens import Token, TokenKind


# Tokens that can start a statement; resynchronization stops in front of them
STATEMENT_STARTS = {
    TokenKind.VAR, TokenKind.FUN, TokenKind.FOR, TokenKind.IF,
    TokenKind.WHILE, TokenKind.PRINT,
}


class ParseResult(NamedTuple):
    program: Program
    errors: List[ParseError]


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.errors: List[ParseError] = []

    # Token stream helpers

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise ParseError(self.peek(), message)

    def synchronize(self) -> None:
        """Discard tokens until a likely statement boundary."""
        self.advance()
        while not self.is_at_end():
            if self.previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind in STATEMENT_STARTS:
                return
            self.advance()

    def skip_function(self) -> None:
        """Discard the rest of a `fun` declaration, body included."""
        depth = 0
        while not self.is_at_end():
            kind = self.advance().kind
            if kind == TokenKind.LEFT_BRACE:
                depth += 1
            elif kind == TokenKind.RIGHT_BRACE:
                depth -= 1
                if depth <= 0:
                    return
            elif kind == TokenKind.SEMICOLON and depth == 0:
                return

    # Declarations and statements

    def parse_program(self) -> Program:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.parse_declaration()
            if stmt is not None:
                statements.append(stmt)
        return Program(tuple(statements))

    def parse_declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenKind.VAR):
                return self.parse_var_decl()
            if self.match(TokenKind.FUN):
                self.errors.append(ParseError(self.previous(), 'Function declarations are not supported.'))
                self.skip_function()
                return None
            return self.parse_statement()
        except ParseError as e:
            self.errors.append(e)
            self.synchronize()
            return None

    def parse_var_decl(self) -> VarDecl:
        name = self.consume(TokenKind.IDENTIFIER, 'Expect variable name.')
        initializer = None
        if self.match(TokenKind.EQUAL):
            initializer = self.parse_expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDecl(name, initializer)

    def parse_statement(self) -> Stmt:
        if self.match(TokenKind.IF):
            return self.parse_if_stmt()
        if self.match(TokenKind.PRINT):
            return self.parse_print_stmt()
        if self.match(TokenKind.WHILE):
            return self.parse_while_stmt()
        if self.match(TokenKind.FOR):
            return self.parse_for_stmt()
        if self.match(TokenKind.LEFT_BRACE):
            return Block(tuple(self.parse_block()))
        return self.parse_expr_stmt()

    def parse_block(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.check(TokenKind.RIGHT_BRACE) and not self.is_at_end():
            stmt = self.parse_declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenKind.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def parse_if_stmt(self) -> IfStmt:
        self.consume(TokenKind.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self.parse_expression()
        self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self.parse_statement()
        else_branch = None
        # A dangling else belongs to the innermost if
        if self.match(TokenKind.ELSE):
            else_branch = self.parse_statement()
        return IfStmt(condition, then_branch, else_branch)

    def parse_print_stmt(self) -> PrintStmt:
        value = self.parse_expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def parse_while_stmt(self) -> WhileStmt:
        self.consume(TokenKind.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self.parse_expression()
        self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after condition.")
        body = self.parse_statement()
        return WhileStmt(condition, body)

    def parse_for_stmt(self) -> Stmt:
        self.consume(TokenKind.LEFT_PAREN, "Expect '(' after 'for'.")
        initializer: Optional[Stmt]
        if self.match(TokenKind.SEMICOLON):
            initializer = None
        elif self.match(TokenKind.VAR):
            initializer = self.parse_var_decl()
        else:
            initializer = self.parse_expr_stmt()

        condition: Optional[Expr] = None
        if not self.check(TokenKind.SEMICOLON):
            condition = self.parse_expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after loop condition.")

        increment: Optional[Expr] = None
        if not self.check(TokenKind.RIGHT_PAREN):
            increment = self.parse_expression()
        self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self.parse_statement()
        if increment is not None:
            body = Block((body, ExprStmt(increment)))
        if condition is None:
            condition = Literal(True)
        loop: Stmt = WhileStmt(condition, body)
        if initializer is not None:
            loop = Block((initializer, loop))
        return loop

    def parse_expr_stmt(self) -> ExprStmt:
        expr = self.parse_expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after expression.")
        return ExprStmt(expr)

    # Expressions, lowest precedence first

    def parse_expression(self) -> Expr:
        return self.parse_assignment()

    def parse_assignment(self) -> Expr:
        expr = self.parse_or()
        if self.match(TokenKind.EQUAL):
            equals = self.previous()
            value = self.parse_assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # Recorded without unwinding; parsing continues normally
            self.errors.append(ParseError(equals, 'Invalid assignment target.'))
        return expr

    def parse_or(self) -> Expr:
        expr = self.parse_and()
        while self.match(TokenKind.OR):
            operator = self.previous()
            right = self.parse_and()
            expr = LogicalOp(expr, operator, right)
        return expr

    def parse_and(self) -> Expr:
        expr = self.parse_equality()
        while self.match(TokenKind.AND):
            operator = self.previous()
            right = self.parse_equality()
            expr = LogicalOp(expr, operator, right)
        return expr

    def parse_equality(self) -> Expr:
        expr = self.parse_comparison()
        while self.match(TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL):
            operator = self.previous()
            right = self.parse_comparison()
            expr = BinaryOp(expr, operator, right)
        return expr

    def parse_comparison(self) -> Expr:
        expr = self.parse_term()
        while self.match(TokenKind.GREATER, TokenKind.GREATER_EQUAL,
                         TokenKind.LESS, TokenKind.LESS_EQUAL):
            operator = self.previous()
            right = self.parse_term()
            expr = BinaryOp(expr, operator, right)
        return expr

    def parse_term(self) -> Expr:
        expr = self.parse_factor()
        while self.match(TokenKind.MINUS, TokenKind.PLUS):
            operator = self.previous()
            right = self.parse_factor()
            expr = BinaryOp(expr, operator, right)
        return expr

    def parse_factor(self) -> Expr:
        expr = self.parse_unary()
        while self.match(TokenKind.SLASH, TokenKind.STAR):
            operator = self.previous()
            right = self.parse_unary()
            expr = BinaryOp(expr, operator, right)
        return expr

    def parse_unary(self) -> Expr:
        if self.match(TokenKind.BANG, TokenKind.MINUS):
            operator = self.previous()
            right = self.parse_unary()
            return UnaryOp(operator, right)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        if self.match(TokenKind.FALSE):
            return Literal(False)
        if self.match(TokenKind.TRUE):
            return Literal(True)
        if self.match(TokenKind.NIL):
            return Literal(None)
        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenKind.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenKind.LEFT_PAREN):
            expr = self.parse_expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise ParseError(self.peek(), 'Expect expression.')


def parse(tokens: List[Token]) -> ParseResult:
    """Parse a token list into a Program, collecting syntax errors."""
    parser = Parser(tokens)
    program = parser.parse_program()
    return ParseResult(program, parser.errors)
