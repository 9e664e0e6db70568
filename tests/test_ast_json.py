import json

import pytest

from lox.ast_json import ast_from_obj, ast_to_obj
from lox.diagnostics import Reporter
from lox.parser import parse_program


def test_round_trip_preserves_program():
    source = 'var a = -(1 + 2) * 3; { a = a / 2 != nil; print "x" + "y"; } print !a;'
    decls = parse_program(source, Reporter())
    encoded = json.dumps(ast_to_obj(decls))
    assert ast_from_obj(json.loads(encoded)) == decls


def test_token_fields_are_kept():
    decls = parse_program('\nvar answer = 42;', Reporter())
    obj = ast_to_obj(decls)
    assert obj[0]['name'] == {'kind': 'IDENTIFIER', 'lexeme': 'answer', 'literal': 'answer', 'line': 2}


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})


def test_unsupported_object():
    with pytest.raises(ValueError):
        ast_to_obj(object())
