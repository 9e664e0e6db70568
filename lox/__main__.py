"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [script]
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script the interpreter starts an interactive prompt where each
line is run as it is entered and variables persist between lines. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.

Exit status is 64 for usage errors, 65 when the script has a syntax error
and 70 when it raised a runtime error.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .diagnostics import Reporter
from .interpreter import Lox

EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EX_USAGE)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_prompt(lox: Lox):
    while True:
        print('> ', end='', flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return
        lox.run(line)


def exit_status(reporter: Reporter) -> int:
    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script (.lox) to execute; omit for a prompt')
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2; keep the conventional usage status.
        sys.exit(EX_USAGE if e.code else 0)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        lox = Lox(debug_level=args.v)
        try:
            declarations = lox.parse(source)
        finally:
            lox.close()
        if lox.reporter.had_error:
            sys.exit(EX_DATAERR)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(declarations), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            sys.exit(EX_USAGE)
        try:
            with open(ast_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            declarations = ast_from_obj(data)
        except (ValueError, KeyError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(EX_DATAERR)
        lox = Lox(debug_level=args.v)
        try:
            lox.interpreter.interpret(declarations)
        finally:
            lox.close()
        status = exit_status(lox.reporter)
        if status:
            sys.exit(status)
        return

    lox = Lox(debug_level=args.v)
    try:
        if not args.script:
            run_prompt(lox)
            return
        lox.run(read_source(Path(args.script)))
    finally:
        lox.close()
    status = exit_status(lox.reporter)
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
