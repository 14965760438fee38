"""
オペコードと命令実装のマッピング定義。
"""
from ali_interpreter.core.instruction import Opcode
from . import load
from . import alu
from . import control

# @intent:map オペコードから実行関数へのマッピングテーブル。Opcodeの全メンバーを網羅します。
EXECUTE_MAP = {
    # Load/Store
    Opcode.DEC: load.execute_dec,
    Opcode.LDA: load.execute_lda,
    Opcode.LDI: load.execute_ldi,
    Opcode.STR: load.execute_str,
    Opcode.XCH: load.execute_xch,

    # ALU
    Opcode.ADD: alu.execute_add,
    Opcode.SUB: alu.execute_sub,

    # Control
    Opcode.JMP: control.execute_jmp,
    Opcode.JZS: control.execute_jzs,
    Opcode.LVS: control.execute_lvs,
    Opcode.HLT: control.execute_hlt,
}

_missing = set(Opcode) - set(EXECUTE_MAP)
if _missing:
    raise RuntimeError(f"Opcodes without an executor: {sorted(op.value for op in _missing)}")
