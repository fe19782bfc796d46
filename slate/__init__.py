# Slate language package
# This package provides a scanner, parser and tree-walk interpreter for Slate.
from .interpreter import Interpreter
from .errors import SlateError, LexError, ParseError, SlateRuntimeError
from .parser import parse
from .scanner import scan
from .session import run_source, run_program, parse_source

__all__ = [
    'Interpreter',
    'SlateError',
    'LexError',
    'ParseError',
    'SlateRuntimeError',
    'parse',
    'scan',
    'run_source',
    'run_program',
    'parse_source',
]
