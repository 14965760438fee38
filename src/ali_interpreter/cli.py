# ali_interpreter/cli.py
"""
ALIインタプリタのコマンドラインエントリポイント。

プログラムファイルをロードし、対話的なコマンドループ（s: 1ステップ実行, a: 全実行, q: 終了）
または --run による一括実行を提供します。
"""
import argparse
import sys
from typing import List, Optional, TextIO

from ali_interpreter.common.errors import AliError
from ali_interpreter.config.builder import InterpreterBuilder
from ali_interpreter.config.loader import ConfigLoader
from ali_interpreter.config.models import InterpreterConfig, NUMBER_FORMATS
from ali_interpreter.core.engine import ExecutionEngine, EngineStatus
from ali_interpreter.printer.dump import format_dump


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ali", description="Abstract Language Interpreter")
    parser.add_argument("program", nargs="?", default=None, help="ALI program file")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--run", action="store_true", help="run to completion without prompting")
    parser.add_argument("--format", dest="number_format", choices=NUMBER_FORMATS, default=None)
    parser.add_argument("--step-limit", type=int, default=None)
    return parser


# @intent:responsibility 設定ファイルとコマンドライン引数を統合します。引数が優先されます。
def _resolve_config(args: argparse.Namespace) -> InterpreterConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else InterpreterConfig()
    if args.program:
        config.program = args.program
    if args.number_format:
        config.number_format = args.number_format
    if args.step_limit is not None:
        if args.step_limit <= 0:
            raise ValueError(f"step limit must be positive: {args.step_limit}")
        config.step_limit = args.step_limit
    return config


def _report_stop(engine: ExecutionEngine, stdout: TextIO) -> None:
    if engine.diagnostic:
        print(engine.diagnostic, file=stdout)


# @intent:responsibility 対話的なコマンドループを実行します。
# @intent:post-condition エンジンがRUNNING以外の状態になった時点でループを終了します。
def command_loop(engine: ExecutionEngine, number_format: str, stdin: TextIO, stdout: TextIO) -> int:
    while True:
        print("Enter command (s, q, a): ", file=stdout)
        line = stdin.readline()
        if not line:
            break
        command = line.strip().lower()

        try:
            if command == "s":
                engine.single_step()
                print(format_dump(engine, number_format), file=stdout)
            elif command == "a":
                engine.run_to_completion()
                print(format_dump(engine, number_format), file=stdout)
            elif command == "q":
                print("Exiting Program.", file=stdout)
                break
            else:
                print("Invalid command.", file=stdout)
        except AliError as e:
            print(f"Error: {e}", file=stdout)
            return 1

        if engine.status is not EngineStatus.RUNNING:
            _report_stop(engine, stdout)
            break
    return 0


# @intent:responsibility CLIのメイン関数。終了コードを返します。
def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = _build_parser().parse_args(argv)

    try:
        config = _resolve_config(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=stdout)
        return 1

    if not config.program:
        print("Enter filename: ", file=stdout)
        config.program = stdin.readline().strip()
        if not config.program:
            print("Error: no program file given", file=stdout)
            return 1

    try:
        engine = InterpreterBuilder().build(config)
    except (AliError, OSError) as e:
        print(f"Error: {e}", file=stdout)
        return 1

    if args.run:
        try:
            engine.run_to_completion()
        except AliError as e:
            print(f"Error: {e}", file=stdout)
            return 1
        print(format_dump(engine, config.number_format), file=stdout)
        _report_stop(engine, stdout)
        return 0

    return command_loop(engine, config.number_format, stdin, stdout)


if __name__ == '__main__':
    sys.exit(main())
