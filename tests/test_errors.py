from slate.errors import LexError, ParseError, SlateError, SlateRuntimeError
from slate.tokens import Token, TokenKind


def test_lex_error_keeps_bare_message():
    error = LexError(3, "Unexpected character '#'.")
    assert error.message == "Unexpected character '#'."
    assert error.line == 3
    assert str(error) == "[line 3] Error: Unexpected character '#'."


def test_parse_error_renders_location():
    token = Token(TokenKind.SEMICOLON, ';', None, 2)
    error = ParseError(token, 'Expect expression.')
    assert error.message == 'Expect expression.'
    assert error.token is token
    assert str(error) == "[line 2] Error at ';': Expect expression."


def test_parse_error_at_end():
    error = ParseError(Token(TokenKind.EOF, '', None, 5), "Expect '}' after block.")
    assert str(error) == "[line 5] Error at end: Expect '}' after block."


def test_runtime_error_uses_default_rendering():
    error = SlateRuntimeError(Token(TokenKind.MINUS, '-', None, 4), "Operand of '-' must be a number.")
    assert isinstance(error, SlateError)
    assert str(error) == "[line 4] Operand of '-' must be a number."
    assert error.report() == "Operand of '-' must be a number.\n[line 4]"
