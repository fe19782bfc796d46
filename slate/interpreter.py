"""Tree-walk interpreter for the Slate language.

The interpreter executes a parsed `Program` statement by statement,
evaluating expressions to plain Python values (see `slate.values`). It
keeps the innermost scope in `self.environment` and swaps it on block
entry and exit, restoring the previous scope even when a runtime error
unwinds through the block.

Runtime errors are raised as `SlateRuntimeError` and abort the rest of
the program; reporting them is left to the caller.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, Sequence, TextIO

from .ast import (
    Program, ExprStmt, PrintStmt, VarDecl, Block, IfStmt, WhileStmt,
    Literal, Grouping, UnaryOp, BinaryOp, LogicalOp, Variable, Assign,
    Expr, Stmt,
)
from .environment import Environment
from .errors import SlateRuntimeError
from .tokens import Token, TokenKind
from .values import is_truthy, stringify, values_equal


class Interpreter:
    """Core interpreter that executes Slate ASTs."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt',
                 out: Optional[TextIO] = None):
        self.globals = Environment()
        self.environment = self.globals
        self.out = out
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None

    def debug(self, level: int, msg: str) -> None:
        if self.debug_level < level:
            return
        indent = '  ' * self.environment.depth()
        if self.debug_fp:
            self.debug_fp.write(indent + msg + '\n')
            self.debug_fp.flush()
        else:
            print(indent + msg, file=sys.stderr)

    def close(self) -> None:
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> None:
        if env is None:
            env = self.globals
        previous = self.environment
        self.environment = env
        try:
            for stmt in program.body:
                self.execute(stmt)
        finally:
            self.environment = previous

    def execute_block(self, statements: Sequence[Stmt], env: Environment) -> None:
        previous = self.environment
        try:
            self.environment = env
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous

    def execute(self, stmt: Stmt) -> None:
        self.debug(1, type(stmt).__name__)
        if isinstance(stmt, ExprStmt):
            self.evaluate(stmt.expression)
            return
        if isinstance(stmt, PrintStmt):
            value = self.evaluate(stmt.expression)
            print(stringify(value), file=self.out if self.out is not None else sys.stdout)
            return
        if isinstance(stmt, VarDecl):
            value = None
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer)
            self.environment.define(stmt.name.lexeme, value)
            self.debug(2, f"define {stmt.name.lexeme} = {stringify(value)}")
            return
        if isinstance(stmt, Block):
            self.execute_block(stmt.statements, Environment(self.environment))
            return
        if isinstance(stmt, IfStmt):
            truthy = is_truthy(self.evaluate(stmt.condition))
            self.debug(3, f"if condition -> {stringify(truthy)}")
            if truthy:
                self.execute(stmt.then_branch)
            elif stmt.else_branch is not None:
                self.execute(stmt.else_branch)
            return
        if isinstance(stmt, WhileStmt):
            while True:
                truthy = is_truthy(self.evaluate(stmt.condition))
                self.debug(3, f"while condition -> {stringify(truthy)}")
                if not truthy:
                    break
                self.execute(stmt.body)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(stmt)}")

    def evaluate(self, expr: Expr) -> Any:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression)
        if isinstance(expr, Variable):
            return self.environment.get(expr.name)
        if isinstance(expr, Assign):
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            self.debug(2, f"assign {expr.name.lexeme} = {stringify(value)}")
            return value
        if isinstance(expr, LogicalOp):
            left = self.evaluate(expr.left)
            if expr.operator.kind == TokenKind.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(expr.right)
        if isinstance(expr, UnaryOp):
            right = self.evaluate(expr.right)
            return self.apply_unary_op(expr.operator, right)
        if isinstance(expr, BinaryOp):
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            return self.apply_binary_op(expr.operator, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr)}")

    def apply_unary_op(self, op: Token, right: Any) -> Any:
        if op.kind == TokenKind.BANG:
            return not is_truthy(right)
        if op.kind == TokenKind.MINUS:
            if not is_number(right):
                raise SlateRuntimeError(op, "Operand of '-' must be a number.")
            return -right
        raise SlateRuntimeError(op, f"Unknown unary operator '{op.lexeme}'.")

    def apply_binary_op(self, op: Token, a: Any, b: Any) -> Any:
        kind = op.kind
        if kind == TokenKind.EQUAL_EQUAL:
            return values_equal(a, b)
        if kind == TokenKind.BANG_EQUAL:
            return not values_equal(a, b)
        if kind == TokenKind.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise SlateRuntimeError(op, "Operands of '+' must be two numbers or two strings.")
        # Everything left is numeric only
        if not (is_number(a) and is_number(b)):
            raise SlateRuntimeError(op, f"Operands of '{op.lexeme}' must be numbers.")
        if kind == TokenKind.MINUS:
            return a - b
        if kind == TokenKind.STAR:
            return a * b
        if kind == TokenKind.SLASH:
            if b == 0.0:
                raise SlateRuntimeError(op, 'Division by zero.')
            return a / b
        if kind == TokenKind.GREATER:
            return a > b
        if kind == TokenKind.GREATER_EQUAL:
            return a >= b
        if kind == TokenKind.LESS:
            return a < b
        if kind == TokenKind.LESS_EQUAL:
            return a <= b
        raise SlateRuntimeError(op, f"Unknown binary operator '{op.lexeme}'.")


def is_number(value: Any) -> bool:
    # bool is never a float
    return isinstance(value, float)
