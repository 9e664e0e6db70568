from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_shadowing(capsys):
    source = (EXAMPLES / 'program_3.lox').read_text(encoding='utf-8')
    Lox().run(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['2', '1']
