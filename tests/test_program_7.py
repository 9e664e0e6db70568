from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_error_inside_block(capsys):
    source = (EXAMPLES / 'program_7.lox').read_text(encoding='utf-8')
    lox = Lox()
    lox.run(source)
    captured = capsys.readouterr()
    # total = 3 never runs, but the statement after the block does
    assert captured.out.strip() == '2'
    assert captured.err.strip() == "Runtime error: Undefined variable 'missing'."
    # the block's scope was popped on the way out
    assert lox.interpreter.environment is lox.interpreter.globals
