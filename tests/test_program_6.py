from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_strings_booleans_nil(capsys):
    source = (EXAMPLES / 'program_6.lox').read_text(encoding='utf-8')
    Lox().run(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['Hello, Lox', 'true', 'true', 'true', 'false', 'false', 'false', 'true']
