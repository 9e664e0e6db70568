from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_8_syntax_errors(capsys):
    source = (EXAMPLES / 'program_8.lox').read_text(encoding='utf-8')
    lox = Lox()
    lox.run(source)
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.strip().splitlines() == [
        "[line 2] Error at ';': Expect expression.",
        "[line 3] Error at '=': Expect variable name.",
    ]
    assert lox.reporter.had_error
