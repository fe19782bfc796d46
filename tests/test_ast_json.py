import json

import pytest

from slate.ast_json import ast_from_obj, ast_to_obj
from slate.interpreter import Interpreter
from slate.session import parse_source


SOURCE = '''
var limit = 3;
for (var i = 0; i < limit and true; i = i + 1) {
  if (!(i == 1)) print -i; else print "one";
}
'''


def test_round_trip_through_json_gives_equal_tree():
    program, errors = parse_source(SOURCE)
    assert errors == []
    restored = ast_from_obj(json.loads(json.dumps(ast_to_obj(program))))
    assert restored == program


def test_restored_tree_runs(capsys):
    program, _ = parse_source(SOURCE)
    restored = ast_from_obj(json.loads(json.dumps(ast_to_obj(program))))
    Interpreter().run(restored)
    assert capsys.readouterr().out.split('\n')[:-1] == ['-0', 'one', '-2']


def test_integer_literals_become_numbers():
    node = ast_from_obj({"type": "Literal", "value": 3})
    assert node.value == 3.0
    assert isinstance(node.value, float)


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({"type": "ClassDecl"})
