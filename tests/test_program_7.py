from pathlib import Path

from slate.interpreter import Interpreter
from slate.session import run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_syntax_errors(capsys):
    source = (EXAMPLES / 'program_7.slate').read_text(encoding='utf-8')
    result = run_source(source, Interpreter())
    assert result.had_error
    assert [e.line for e in result.parse_errors] == [2, 3]
    assert [e.message for e in result.parse_errors] == ['Expect expression.', 'Expect variable name.']
    # Nothing runs when the program has syntax errors
    assert capsys.readouterr().out == ''
