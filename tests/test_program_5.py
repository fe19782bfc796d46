from pathlib import Path

from slate.interpreter import Interpreter
from slate.session import run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_truthiness(capsys):
    source = (EXAMPLES / 'program_5.slate').read_text(encoding='utf-8')
    run_source(source, Interpreter())
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['zero is truthy', 'fallback', 'false', 'true', '3.5', 'false']
