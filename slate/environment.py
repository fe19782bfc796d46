from typing import Any, Dict, Optional

from slate.errors import SlateRuntimeError
from slate.tokens import Token


class Environment:
    """Represents a scope mapping variable names to runtime values."""
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any) -> None:
        # Redefinition in the same scope simply replaces the old value
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.enclosing
        raise SlateRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.enclosing
        raise SlateRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def depth(self) -> int:
        """Number of enclosing scopes between this one and the globals."""
        count = 0
        env = self.enclosing
        while env is not None:
            count += 1
            env = env.enclosing
        return count
