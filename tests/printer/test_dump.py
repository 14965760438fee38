"""
ali_interpreter.printer.dumpモジュールの単体テスト。
"""
import pytest

from ali_interpreter.core.engine import ExecutionEngine
from ali_interpreter.core.instruction import Instruction, Opcode
from ali_interpreter.printer.dump import (
    format_value, format_instruction_memory, format_registers, format_data_memory, format_dump,
)


@pytest.fixture
def engine():
    engine = ExecutionEngine()
    engine.load_program([
        Instruction(Opcode.DEC, "total"),
        Instruction(Opcode.LDI, -26),
        Instruction(Opcode.STR, "total"),
        Instruction(Opcode.HLT),
    ])
    engine.run_to_completion()
    return engine


@pytest.mark.parametrize("value, number_format, expected", [
    (30, "decimal", "30"),
    (-4, "decimal", "-4"),
    (255, "hexadecimal", "0xff"),
    (-26, "hexadecimal", "-0x1a"),
    (0, "hexadecimal", "0x0"),
])
def test_format_value(value, number_format, expected):
    assert format_value(value, number_format) == expected


def test_format_value_unknown_format():
    with pytest.raises(ValueError):
        format_value(1, "roman")


def test_instruction_memory(engine):
    text = format_instruction_memory(engine)
    lines = text.splitlines()
    assert ">>>>> Instruction Memory (Source Code) <<<<<" in lines
    assert "0- DEC total" in lines
    assert "1- LDI -26" in lines
    assert "3- HLT" in lines


def test_registers(engine):
    lines = format_registers(engine).splitlines()
    assert "Accumulator    : -26" in lines
    assert "Data register  : 0" in lines
    assert "Program Counter: 3" in lines
    assert "Zero Flag      : 0" in lines
    assert "Overflow Flag  : 0" in lines


def test_data_memory_uses_reverse_symbol_lookup(engine):
    assert "128- total: -26" in format_data_memory(engine).splitlines()
    assert "128- total: -0x1a" in format_data_memory(engine, "hexadecimal").splitlines()


def test_dump_contains_all_sections(engine):
    text = format_dump(engine)
    assert "REGISTERS" in text
    assert "Instruction Memory" in text
    assert "Data Memory" in text
    # セクションの順序: 命令メモリ -> レジスタ -> データメモリ
    assert text.index("Instruction Memory") < text.index("REGISTERS") < text.index("Data Memory")
