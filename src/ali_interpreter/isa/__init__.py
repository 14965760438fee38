"""
ALI命令セット実装パッケージ。
"""
from ali_interpreter.core.instruction import Instruction, PcDirective
from ali_interpreter.core.memory import MemoryBank
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable
from .maps import EXECUTE_MAP


# @intent:responsibility デコード済みのALI命令を実行し、PC更新指示を返します。
# @intent:pre-condition 全ての状態は引数で明示的に渡されます。エンジンへの逆参照は持ちません。
def execute_instruction(op: Instruction, registers: RegisterFile, flags: Flags,
                        memory: MemoryBank, symbols: SymbolTable) -> PcDirective:
    """
    命令を実行し、レジスタ・フラグ・メモリ・シンボルテーブルを更新します。
    """
    executor = EXECUTE_MAP[op.opcode]
    return executor(registers, flags, memory, symbols, op)
