from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_assignment(capsys):
    source = (EXAMPLES / 'program_4.lox').read_text(encoding='utf-8')
    Lox().run(source)
    captured = capsys.readouterr()
    assert captured.out.strip().splitlines() == ['11', 'nil', '5']
    assert captured.err == ''
