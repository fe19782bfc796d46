"""Source-to-effects pipeline: scan, parse, then run.

Lexical and syntax errors are collected by their stages; if any were
found the program is never executed. A runtime error stops execution
and is recorded on the result rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ast import Program
from .errors import LexError, ParseError, SlateError, SlateRuntimeError
from .interpreter import Interpreter
from .parser import parse
from .scanner import scan


@dataclass
class RunResult:
    lex_errors: List[LexError] = field(default_factory=list)
    parse_errors: List[ParseError] = field(default_factory=list)
    runtime_error: Optional[SlateRuntimeError] = None

    @property
    def had_error(self) -> bool:
        return bool(self.lex_errors or self.parse_errors)

    @property
    def had_runtime_error(self) -> bool:
        return self.runtime_error is not None

    @property
    def diagnostics(self) -> List[SlateError]:
        return [*self.lex_errors, *self.parse_errors]


def parse_source(source: str) -> Tuple[Program, List[SlateError]]:
    """Scan and parse source text; errors from both stages are returned."""
    tokens, lex_errors = scan(source)
    program, parse_errors = parse(tokens)
    return program, [*lex_errors, *parse_errors]


def run_source(source: str, interpreter: Optional[Interpreter] = None) -> RunResult:
    if interpreter is None:
        interpreter = Interpreter()
    tokens, lex_errors = scan(source)
    program, parse_errors = parse(tokens)
    result = RunResult(lex_errors, parse_errors)
    if result.had_error:
        return result
    try:
        interpreter.run(program)
    except SlateRuntimeError as e:
        result.runtime_error = e
    return result


def run_program(source: str, debug_level: int = 0) -> None:
    """Convenience function to run a Slate program from a source string.

    Unlike `run_source`, the first diagnostic is raised as an exception.
    """
    program, errors = parse_source(source)
    if errors:
        raise errors[0]
    with Interpreter(debug_level=debug_level) as interpreter:
        interpreter.run(program)
