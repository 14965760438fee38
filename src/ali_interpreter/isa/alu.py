"""
算術演算命令（ADD, SUB）の実装。
"""
from ali_interpreter.core.instruction import Instruction, PcDirective, ADVANCE
from ali_interpreter.core.memory import MemoryBank
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable


# --- ADD ---
# @intent:responsibility ADD命令を実行し、データレジスタをアキュムレータに加算してフラグを更新します。
def execute_add(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    result = registers.read_accumulator() + registers.read_data_register()
    registers.write_accumulator(result)
    flags.update_from(result)
    return ADVANCE


# --- SUB ---
# @intent:responsibility SUB命令を実行し、アキュムレータからデータレジスタを減算してフラグを更新します。
def execute_sub(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    result = registers.read_accumulator() - registers.read_data_register()
    registers.write_accumulator(result)
    flags.update_from(result)
    return ADVANCE
