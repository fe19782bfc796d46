"""Abstract Syntax Tree (AST) definitions for the Slate language.

Nodes are frozen dataclasses. Each node owns its children exclusively,
so a parsed program is a plain tree that can be compared structurally.
Expressions and statements are grouped under the `Expr` and `Stmt`
aliases; the interpreter dispatches on the concrete node type.

There is no node for `for` loops: the parser rewrites them into a
`Block` holding the initializer and a `WhileStmt`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .tokens import Token


@dataclass(frozen=True)
class Literal:
    value: Union[float, str, bool, None]


@dataclass(frozen=True)
class Grouping:
    expression: 'Expr'


@dataclass(frozen=True)
class UnaryOp:
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class BinaryOp:
    left: 'Expr'
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class LogicalOp:
    left: 'Expr'
    operator: Token  # AND or OR
    right: 'Expr'


@dataclass(frozen=True)
class Variable:
    name: Token


@dataclass(frozen=True)
class Assign:
    name: Token
    value: 'Expr'


Expr = Union[Literal, Grouping, UnaryOp, BinaryOp, LogicalOp, Variable, Assign]


@dataclass(frozen=True)
class ExprStmt:
    expression: Expr


@dataclass(frozen=True)
class PrintStmt:
    expression: Expr


@dataclass(frozen=True)
class VarDecl:
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block:
    statements: Tuple['Stmt', ...]


@dataclass(frozen=True)
class IfStmt:
    condition: Expr
    then_branch: 'Stmt'
    else_branch: Optional['Stmt']


@dataclass(frozen=True)
class WhileStmt:
    condition: Expr
    body: 'Stmt'


Stmt = Union[ExprStmt, PrintStmt, VarDecl, Block, IfStmt, WhileStmt]


@dataclass(frozen=True)
class Program:
    body: Tuple[Stmt, ...]
