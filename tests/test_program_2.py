from pathlib import Path

from lox.interpreter import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_precedence_and_associativity(capsys):
    source = (EXAMPLES / 'program_2.lox').read_text(encoding='utf-8')
    Lox().run(source)
    out = capsys.readouterr().out.strip().splitlines()
    # 10 - 2 - 3 is (10 - 2) - 3, not 10 - (2 - 3)
    assert out == ['7', '9', '5', '2', '9']
