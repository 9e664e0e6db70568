import io
import json

import pytest

from lox.__main__ import main


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return path


def test_runs_script(tmp_path, capsys):
    script = write(tmp_path, 'ok.lox', 'var a = 2;\nprint a * 21;\n')
    main([str(script)])
    assert capsys.readouterr().out == '42\n'


def test_missing_file_is_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'nope.lox')])
    assert exc.value.code == 64
    assert 'not found' in capsys.readouterr().err


def test_too_many_arguments(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['a.lox', 'b.lox'])
    assert exc.value.code == 64
    capsys.readouterr()


def test_syntax_error_exit_code(tmp_path, capsys):
    script = write(tmp_path, 'bad.lox', 'print 1 +;\n')
    with pytest.raises(SystemExit) as exc:
        main([str(script)])
    assert exc.value.code == 65
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "[line 1] Error at ';': Expect expression.\n"


def test_runtime_error_exit_code(tmp_path, capsys):
    script = write(tmp_path, 'boom.lox', 'print "a";\nprint -nil;\nprint "b";\n')
    with pytest.raises(SystemExit) as exc:
        main([str(script)])
    assert exc.value.code == 70
    captured = capsys.readouterr()
    assert captured.out == 'a\nb\n'
    assert captured.err == 'Runtime error: Operand must be a number!\n'


def test_prompt_keeps_state(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('var a = 1;\nprint a + 1;\nprint ;\nprint a;\n'))
    main([])
    captured = capsys.readouterr()
    assert captured.out == '> > 2\n> > 1\n> \n'
    assert captured.err == "[line 1] Error at ';': Expect expression.\n"


def test_emit_ast_then_run(tmp_path, capsys):
    script = write(tmp_path, 'prog.lox', 'var s = "lo" + "x";\n{ print s; }\n')
    main(['--emit-ast', str(script)])
    out_path = capsys.readouterr().out.strip()
    assert out_path == str(tmp_path / 'prog.lox.ast.json')
    data = json.loads((tmp_path / 'prog.lox.ast.json').read_text(encoding='utf-8'))
    assert [d['type'] for d in data] == ['VarDecl', 'Block']
    main(['--ast', out_path])
    assert capsys.readouterr().out == 'lox\n'


def test_emit_ast_rejects_syntax_errors(tmp_path, capsys):
    script = write(tmp_path, 'bad.lox', 'var = 1;')
    with pytest.raises(SystemExit) as exc:
        main(['--emit-ast', str(script)])
    assert exc.value.code == 65
    assert not (tmp_path / 'bad.lox.ast.json').exists()
    capsys.readouterr()


def test_invalid_ast_file(tmp_path, capsys):
    path = write(tmp_path, 'broken.json', json.dumps([{'type': 'Mystery'}]))
    with pytest.raises(SystemExit) as exc:
        main(['--ast', str(path)])
    assert exc.value.code == 65
    assert 'invalid AST file' in capsys.readouterr().err


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    script = write(tmp_path, 'p.lox', 'print 1 + 2;')
    main(['-v', str(script)])
    assert capsys.readouterr().out == '3\n'
    assert (tmp_path / 'debug.txt').read_text(encoding='utf-8') == '(print (+ 1 2))\n'


def test_malformed_ast_json(tmp_path, capsys):
    path = write(tmp_path, 'broken.json', '[{"type": "PrintStmt",')
    with pytest.raises(SystemExit) as exc:
        main(['--ast', str(path)])
    assert exc.value.code == 65
    assert 'invalid AST file' in capsys.readouterr().err
