from slate.ast import (
    Assign, BinaryOp, Block, ExprStmt, Grouping, IfStmt, Literal, LogicalOp,
    PrintStmt, UnaryOp, VarDecl, Variable, WhileStmt,
)
from slate.parser import parse
from slate.scanner import scan
from slate.tokens import TokenKind


def parse_ok(source):
    tokens, lex_errors = scan(source)
    assert lex_errors == []
    program, errors = parse(tokens)
    assert errors == []
    return program.body


def parse_errors(source):
    tokens, _ = scan(source)
    return parse(tokens).errors


def test_multiplication_binds_tighter_than_addition():
    (stmt,) = parse_ok('1 + 2 * 3;')
    expr = stmt.expression
    assert isinstance(expr, BinaryOp)
    assert expr.operator.kind == TokenKind.PLUS
    assert expr.left == Literal(1.0)
    assert isinstance(expr.right, BinaryOp)
    assert expr.right.operator.kind == TokenKind.STAR


def test_subtraction_is_left_associative():
    (stmt,) = parse_ok('8 - 4 - 2;')
    expr = stmt.expression
    assert isinstance(expr.left, BinaryOp)
    assert expr.left.left == Literal(8.0)
    assert expr.left.right == Literal(4.0)
    assert expr.right == Literal(2.0)


def test_assignment_is_right_associative():
    (stmt,) = parse_ok('a = b = 1;')
    expr = stmt.expression
    assert isinstance(expr, Assign)
    assert expr.name.lexeme == 'a'
    assert isinstance(expr.value, Assign)
    assert expr.value.name.lexeme == 'b'


def test_logical_and_binds_tighter_than_or():
    (stmt,) = parse_ok('print a or b and c;')
    expr = stmt.expression
    assert isinstance(expr, LogicalOp)
    assert expr.operator.kind == TokenKind.OR
    assert isinstance(expr.right, LogicalOp)
    assert expr.right.operator.kind == TokenKind.AND


def test_unary_and_grouping():
    (stmt,) = parse_ok('print -(1 + 2) == !true;')
    expr = stmt.expression
    assert expr.operator.kind == TokenKind.EQUAL_EQUAL
    assert isinstance(expr.left, UnaryOp)
    assert isinstance(expr.left.right, Grouping)
    assert isinstance(expr.right, UnaryOp)
    assert expr.right.operator.kind == TokenKind.BANG


def test_var_declaration_without_initializer():
    (stmt,) = parse_ok('var x;')
    assert isinstance(stmt, VarDecl)
    assert stmt.name.lexeme == 'x'
    assert stmt.initializer is None


def test_for_loop_desugars_to_while():
    (stmt,) = parse_ok('for (var i = 0; i < 3; i = i + 1) print i;')
    assert isinstance(stmt, Block)
    init, loop = stmt.statements
    assert isinstance(init, VarDecl)
    assert isinstance(loop, WhileStmt)
    assert loop.condition.operator.kind == TokenKind.LESS
    body, increment = loop.body.statements
    assert isinstance(body, PrintStmt)
    assert isinstance(increment, ExprStmt)
    assert isinstance(increment.expression, Assign)


def test_for_loop_with_empty_clauses():
    (stmt,) = parse_ok('for (;;) print 1;')
    assert isinstance(stmt, WhileStmt)
    assert stmt.condition == Literal(True)
    assert isinstance(stmt.body, PrintStmt)


def test_else_binds_to_nearest_if():
    (stmt,) = parse_ok('if (a) if (b) print 1; else print 2;')
    assert isinstance(stmt, IfStmt)
    assert stmt.else_branch is None
    inner = stmt.then_branch
    assert isinstance(inner, IfStmt)
    assert isinstance(inner.else_branch, PrintStmt)


def test_block_contains_declarations():
    (stmt,) = parse_ok('{ var a = 1; print a; }')
    assert isinstance(stmt, Block)
    assert isinstance(stmt.statements[0], VarDecl)
    assert isinstance(stmt.statements[1].expression, Variable)


def test_parsing_twice_yields_equal_trees():
    tokens, _ = scan('var x = 1; while (x < 10) { x = x * 2; } print x;')
    assert parse(tokens).program == parse(tokens).program


def test_invalid_assignment_target():
    errors = parse_errors('1 = 2;\nprint "after";')
    assert len(errors) == 1
    assert errors[0].message == 'Invalid assignment target.'
    assert errors[0].line == 1


def test_recovers_and_reports_every_error():
    source = 'print 1;\nprint 1 +;\nvar = 3;\nprint 2;'
    tokens, _ = scan(source)
    program, errors = parse(tokens)
    assert [e.line for e in errors] == [2, 3]
    assert str(errors[0]) == "[line 2] Error at ';': Expect expression."
    assert str(errors[1]) == "[line 3] Error at '=': Expect variable name."
    assert len(program.body) == 2


def test_missing_closing_brace_reported_at_end():
    errors = parse_errors('{ print 1;')
    assert len(errors) == 1
    assert errors[0].message == "Expect '}' after block."
    assert str(errors[0]) == "[line 1] Error at end: Expect '}' after block."


def test_missing_semicolon():
    errors = parse_errors('print 1\nprint 2;')
    assert len(errors) == 1
    assert errors[0].message == "Expect ';' after value."
    assert errors[0].line == 2


def test_function_declarations_are_rejected():
    errors = parse_errors('fun greet;\nprint 1;')
    assert len(errors) == 1
    assert errors[0].message == 'Function declarations are not supported.'


def test_function_body_is_skipped_with_a_single_error():
    tokens, _ = scan('fun f() { if (true) { print 1; } }\nprint 2;')
    program, errors = parse(tokens)
    assert [str(e) for e in errors] == ["[line 1] Error at 'fun': Function declarations are not supported."]
    assert len(program.body) == 1
    assert isinstance(program.body[0], PrintStmt)
    assert program.body[0].expression == Literal(2.0)
