import pytest
from ali_interpreter.core.instruction import Instruction, Opcode, ADVANCE
from ali_interpreter.core.memory import MemoryBank
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable
from ali_interpreter.isa import execute_instruction

INT32_MAX = 2 ** 31 - 1
INT32_MIN = -(2 ** 31)


def _run(opcode, acc, dr):
    registers = RegisterFile(accumulator=acc, data_register=dr)
    flags = Flags()
    directive = execute_instruction(Instruction(opcode), registers, flags, MemoryBank(), SymbolTable())
    return registers, flags, directive


@pytest.mark.parametrize("a, b", [
    (10, 20), (5, -5), (0, 0), (INT32_MAX, 1), (INT32_MIN, -1), (INT32_MAX, 0), (-7, -9),
])
def test_add(a, b):
    registers, flags, directive = _run(Opcode.ADD, a, b)
    assert directive == ADVANCE
    assert registers.accumulator == a + b  # 値は切り詰めない
    assert registers.data_register == b
    assert flags.zero is (a + b == 0)
    assert flags.overflow is (a + b > INT32_MAX or a + b < INT32_MIN)


@pytest.mark.parametrize("a, b", [
    (20, 5), (5, 5), (INT32_MIN, 1), (INT32_MAX, -1), (0, INT32_MIN), (-3, 4),
])
def test_sub(a, b):
    registers, flags, directive = _run(Opcode.SUB, a, b)
    assert directive == ADVANCE
    assert registers.accumulator == a - b
    assert flags.zero is (a - b == 0)
    assert flags.overflow is (a - b > INT32_MAX or a - b < INT32_MIN)


def test_flags_are_cleared_by_next_result():
    registers = RegisterFile(accumulator=INT32_MAX, data_register=1)
    flags = Flags()
    execute_instruction(Instruction(Opcode.ADD), registers, flags, MemoryBank(), SymbolTable())
    assert flags.overflow is True
    execute_instruction(Instruction(Opcode.SUB), registers, flags, MemoryBank(), SymbolTable())
    assert registers.accumulator == INT32_MAX
    assert flags.overflow is False
