from pathlib import Path

from slate.interpreter import Interpreter
from slate.session import run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_loops(capsys):
    source = (EXAMPLES / 'program_3.slate').read_text(encoding='utf-8')
    run_source(source, Interpreter())
    out_lines = capsys.readouterr().out.strip().split('\n')
    expected = [
        '0', '1', '2', '3',
        'countdown tick', 'countdown tick', 'countdown tick',
        '0',
    ]
    assert out_lines == expected
