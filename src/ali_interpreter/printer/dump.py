# ali_interpreter/printer/dump.py
"""
エンジン状態のテキストダンプ。

命令メモリ、レジスタ、データメモリを人間が読める形式に整形します。
出力（print）は呼び出し側の責務です。
"""
from typing import List

from ali_interpreter.core.engine import ExecutionEngine
from ali_interpreter.core.memory import DataCell

# @intent:map 数値表示形式ごとの変換関数。
_FORMATTERS = {
    "decimal": lambda value: str(value),
    "hexadecimal": lambda value: f"-0x{-value:x}" if value < 0 else f"0x{value:x}",
}


# @intent:utility_function 数値を指定された形式の文字列に変換します。
def format_value(value: int, number_format: str = "decimal") -> str:
    formatter = _FORMATTERS.get(number_format)
    if formatter is None:
        raise ValueError(f"Unknown number format: {number_format}")
    return formatter(value)


def _flag(value: bool) -> str:
    return "1" if value else "0"


# @intent:responsibility 命令セグメントの使用中スロットを一覧表示用に整形します。
def format_instruction_memory(engine: ExecutionEngine) -> str:
    lines: List[str] = ["", ">>>>> Instruction Memory (Source Code) <<<<<"]
    for address, cell in engine.memory.instruction_cells():
        lines.append(f"{address}- {cell}")
    return "\n".join(lines)


# @intent:responsibility レジスタとフラグを整形します。
def format_registers(engine: ExecutionEngine, number_format: str = "decimal") -> str:
    return "\n".join([
        "",
        ">>>>> REGISTERS <<<<<",
        f"Accumulator    : {format_value(engine.accumulator, number_format)}",
        f"Data register  : {format_value(engine.data_register, number_format)}",
        f"Program Counter: {format_value(engine.pc, number_format)}",
        f"Zero Flag      : {_flag(engine.zero_flag)}",
        f"Overflow Flag  : {_flag(engine.overflow_flag)}",
    ])


# @intent:responsibility データセグメントの使用中スロットを、シンボル名の逆引き付きで整形します。
def format_data_memory(engine: ExecutionEngine, number_format: str = "decimal") -> str:
    symbols = engine.symbol_table
    lines: List[str] = ["", ">>>>> Data Memory <<<<<"]
    for address, cell in engine.memory.data_cells():
        name = symbols.name_at(address) or ""
        shown = format_value(cell.value, number_format) if isinstance(cell, DataCell) else str(cell)
        lines.append(f"{address}- {name}: {shown}")
    return "\n".join(lines)


# @intent:responsibility 命令メモリ、レジスタ、データメモリの全てを整形します。
def format_dump(engine: ExecutionEngine, number_format: str = "decimal") -> str:
    return "\n".join([
        format_instruction_memory(engine),
        format_registers(engine, number_format),
        format_data_memory(engine, number_format),
    ])
