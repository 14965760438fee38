"""
転送命令（DEC, LDA, LDI, STR, XCH）の実装。
"""
from ali_interpreter.core.instruction import Instruction, PcDirective, ADVANCE
from ali_interpreter.core.memory import MemoryBank, DataCell, EMPTY
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable


# @intent:utility_function シンボルのデータセルの値を読み出します。空セルは0として扱います。
def read_symbol_value(memory: MemoryBank, address: int) -> int:
    cell = memory.get(address)
    if isinstance(cell, DataCell):
        return cell.value
    return 0


# --- DEC ---
# @intent:responsibility DEC命令を実行し、シンボルを宣言します。未初期化のセルのみ0で初期化します。
# @intent:rationale セルの初期化有無にかかわらず、PC更新指示は常にADVANCEです。
def execute_dec(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    address = symbols.resolve(op.operand)
    if memory.get(address) is EMPTY:
        memory.set(address, DataCell(0))
    return ADVANCE


# --- LDA ---
# @intent:responsibility LDA命令を実行し、シンボルの値をアキュムレータへロードします。
def execute_lda(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    address = symbols.resolve(op.operand)
    registers.write_accumulator(read_symbol_value(memory, address))
    return ADVANCE


# --- LDI ---
# @intent:responsibility LDI命令を実行し、即値（負数可）をアキュムレータへロードします。
def execute_ldi(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    registers.write_accumulator(op.operand)
    return ADVANCE


# --- STR ---
# @intent:responsibility STR命令を実行し、アキュムレータの内容をシンボルのアドレスへ格納します。
def execute_str(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    address = symbols.resolve(op.operand)
    memory.set(address, DataCell(registers.read_accumulator()))
    return ADVANCE


# --- XCH ---
# @intent:responsibility XCH命令を実行し、アキュムレータとデータレジスタを交換します。
def execute_xch(registers: RegisterFile, flags: Flags, memory: MemoryBank,
                symbols: SymbolTable, op: Instruction) -> PcDirective:
    registers.swap()
    return ADVANCE
