"""JSON serialization/deserialization for Slate ASTs.

This module converts between the AST dataclasses (and the tokens they
carry) and plain Python dict/list structures suitable for JSON
encoding. It supports a full round-trip for every node type.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    ExprStmt,
    PrintStmt,
    VarDecl,
    Block,
    IfStmt,
    WhileStmt,
    Literal,
    Grouping,
    UnaryOp,
    BinaryOp,
    LogicalOp,
    Variable,
    Assign,
)
from .tokens import Token, TokenKind


def token_to_obj(tok: Token) -> Dict[str, Any]:
    return {"kind": tok.kind.name, "lexeme": tok.lexeme, "literal": tok.literal, "line": tok.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    literal = o.get("literal")
    if isinstance(literal, int) and not isinstance(literal, bool):
        literal = float(literal)
    return Token(TokenKind[o["kind"]], o["lexeme"], literal, int(o["line"]))


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(s) for s in node.body]}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expression": ast_to_obj(node.expression)}
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "expression": ast_to_obj(node.expression)}
    if isinstance(node, VarDecl):
        return {
            "type": "VarDecl",
            "name": token_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, IfStmt):
        return {
            "type": "IfStmt",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, WhileStmt):
        return {"type": "WhileStmt", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "operator": token_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, (BinaryOp, LogicalOp)):
        return {
            "type": type(node).__name__,
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=tuple(ast_from_obj(s) for s in obj["body"]))
    if t == "ExprStmt":
        return ExprStmt(expression=ast_from_obj(obj["expression"]))
    if t == "PrintStmt":
        return PrintStmt(expression=ast_from_obj(obj["expression"]))
    if t == "VarDecl":
        return VarDecl(name=token_from_obj(obj["name"]), initializer=ast_from_obj(obj.get("initializer")))
    if t == "Block":
        return Block(statements=tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "IfStmt":
        return IfStmt(
            condition=ast_from_obj(obj["condition"]),
            then_branch=ast_from_obj(obj["then_branch"]),
            else_branch=ast_from_obj(obj.get("else_branch")),
        )
    if t == "WhileStmt":
        return WhileStmt(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))
    if t == "Literal":
        value = obj["value"]
        # JSON does not distinguish 3 from 3.0; Slate numbers are always floats
        if isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        return Literal(value=value)
    if t == "Grouping":
        return Grouping(expression=ast_from_obj(obj["expression"]))
    if t == "UnaryOp":
        return UnaryOp(operator=token_from_obj(obj["operator"]), right=ast_from_obj(obj["right"]))
    if t == "BinaryOp":
        return BinaryOp(
            left=ast_from_obj(obj["left"]),
            operator=token_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "LogicalOp":
        return LogicalOp(
            left=ast_from_obj(obj["left"]),
            operator=token_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Variable":
        return Variable(name=token_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(name=token_from_obj(obj["name"]), value=ast_from_obj(obj["value"]))

    raise ValueError(f"Unknown AST node type: {t}")
