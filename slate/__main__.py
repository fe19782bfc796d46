"""CLI entry point for the Slate interpreter.

Usage:
    python -m slate [-v|-vv|-vvv] [script]
    python -m slate [-v...] --emit-ast <script>
    python -m slate [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script an interactive prompt is started; type `exit` or `quit`
(or send EOF) to leave it. Debug information is written to `debug.txt`
in the current directory when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .errors import SlateRuntimeError
from .interpreter import Interpreter
from .session import parse_source, run_source

EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EXIT_NO_INPUT)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def report(errors) -> None:
    for err in errors:
        print(str(err), file=sys.stderr)


def run_prompt(interpreter: Interpreter) -> None:
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            break
        if line.strip() in ('exit', 'quit'):
            break
        result = run_source(line, interpreter)
        report(result.diagnostics)
        if result.runtime_error is not None:
            print(result.runtime_error.report(), file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Slate language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='SCRIPT', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Slate script to execute; omit for a prompt')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        script = Path(args.emit_ast)
        program, errors = parse_source(read_source(script))
        if errors:
            report(errors)
            sys.exit(EXIT_DATA_ERROR)
        out_path = script.with_name(script.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        program = ast_from_obj(json.loads(read_source(ast_path)))
        with Interpreter(debug_level=args.v) as interpreter:
            try:
                interpreter.run(program)
            except SlateRuntimeError as e:
                print(e.report(), file=sys.stderr)
                sys.exit(EXIT_SOFTWARE)
        return

    with Interpreter(debug_level=args.v) as interpreter:
        if not args.script:
            run_prompt(interpreter)
            return
        result = run_source(read_source(Path(args.script)), interpreter)
    report(result.diagnostics)
    if result.had_error:
        sys.exit(EXIT_DATA_ERROR)
    if result.had_runtime_error:
        print(result.runtime_error.report(), file=sys.stderr)
        sys.exit(EXIT_SOFTWARE)


if __name__ == '__main__':
    main()
