"""
制御命令（JMP, JZS, LVS, HLT）の実装。
"""
from ali_interpreter.core.instruction import Instruction, PcDirective, ADVANCE, HALT
from ali_interpreter.core.memory import MemoryBank
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable


# --- JMP ---
# @intent:responsibility JMP命令を実行し、無条件に指定アドレスへ分岐します。
def execute_jmp(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    return PcDirective.jump_to(op.operand)


# --- JZS ---
# @intent:responsibility JZS命令を実行し、ゼロフラグがセットされている場合に分岐します。
def execute_jzs(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    if flags.zero:
        return PcDirective.jump_to(op.operand)
    return ADVANCE


# --- LVS ---
# @intent:responsibility LVS命令を実行し、オーバーフローフラグがセットされている場合に分岐します。
def execute_lvs(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    if flags.overflow:
        return PcDirective.jump_to(op.operand)
    return ADVANCE


# --- HLT ---
# @intent:responsibility HLT命令を実行します。終了処理はエンジン側がHALT指示を受けて行います。
def execute_hlt(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    return HALT
