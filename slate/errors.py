from typing import Optional

from slate.tokens import Token, TokenKind


class SlateError(Exception):
    """Base class for all diagnostics raised or collected by Slate.

    `message` is the bare description; `str()` gives the rendered report,
    which defaults to `[line N] message`.
    """
    def __init__(self, line: int, message: str, text: Optional[str] = None):
        super().__init__(text if text is not None else f"[line {line}] {message}")
        self.line = line
        self.message = message


class LexError(SlateError):
    """A scanning problem: unterminated string or unexpected character."""
    def __init__(self, line: int, message: str):
        super().__init__(line, message, f"[line {line}] Error: {message}")


class ParseError(SlateError):
    """A syntax error reported at the offending token."""
    def __init__(self, token: Token, message: str):
        where = 'at end' if token.kind == TokenKind.EOF else f"at '{token.lexeme}'"
        super().__init__(token.line, message, f"[line {token.line}] Error {where}: {message}")
        self.token = token


class SlateRuntimeError(SlateError):
    """Raised while evaluating a program; aborts the current run."""
    def __init__(self, token: Optional[Token], message: str):
        line = token.line if token is not None else 0
        super().__init__(line, message)
        self.token = token

    def report(self) -> str:
        return f"{self.message}\n[line {self.line}]"
