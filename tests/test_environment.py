import pytest

from lox.environment import Environment
from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType


def name(text):
    return Token(TokenType.IDENTIFIER, text, text, 1)


def test_define_and_get():
    env = Environment()
    env.define('a', 1)
    assert env.get(name('a')) == 1


def test_redefine_overwrites():
    env = Environment()
    env.define('a', 1)
    env.define('a', 'two')
    assert env.get(name('a')) == 'two'


def test_get_walks_enclosing():
    outer = Environment()
    outer.define('a', 1)
    inner = Environment(outer)
    assert inner.get(name('a')) == 1


def test_shadowing_keeps_outer_binding():
    outer = Environment()
    outer.define('a', 1)
    inner = Environment(outer)
    inner.define('a', 2)
    assert inner.get(name('a')) == 2
    assert outer.get(name('a')) == 1


def test_assign_updates_nearest_definition():
    outer = Environment()
    outer.define('a', 1)
    middle = Environment(outer)
    middle.define('a', 2)
    inner = Environment(middle)
    inner.assign(name('a'), 3)
    assert middle.values['a'] == 3
    assert outer.values['a'] == 1
    assert 'a' not in inner.values


def test_get_undefined():
    with pytest.raises(LoxRuntimeError) as exc:
        Environment().get(name('missing'))
    assert exc.value.kind == 'NameError'
    assert exc.value.message == "Undefined variable 'missing'."


def test_assign_never_creates_binding():
    env = Environment()
    with pytest.raises(LoxRuntimeError) as exc:
        env.assign(name('a'), 5)
    assert exc.value.kind == 'NameError'
    assert "'a'" in exc.value.message
    assert env.values == {}


def test_sibling_scope_is_invisible():
    root = Environment()
    first = Environment(root)
    first.define('x', 1)
    second = Environment(root)
    with pytest.raises(LoxRuntimeError):
        second.get(name('x'))
