# ali_interpreter/core/instruction.py
"""
命令セットの基本データ構造。

オペコードの列挙、デコード済み命令、および命令実行後のPC更新指示（PcDirective）を定義します。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ali_interpreter.common.types import Operand


# @intent:responsibility ALIが認識する全オペコードの閉じた列挙。
class Opcode(Enum):
    DEC = "DEC"
    LDA = "LDA"
    LDI = "LDI"
    STR = "STR"
    XCH = "XCH"
    JMP = "JMP"
    JZS = "JZS"
    LVS = "LVS"
    ADD = "ADD"
    SUB = "SUB"
    HLT = "HLT"


# @intent:constant オペランドの種類ごとのオペコード分類。ローダーの検証に使用します。
SYMBOL_OPCODES = frozenset({Opcode.DEC, Opcode.LDA, Opcode.STR})
ADDRESS_OPCODES = frozenset({Opcode.JMP, Opcode.JZS, Opcode.LVS})
INTEGER_OPCODES = frozenset({Opcode.LDI})
NO_OPERAND_OPCODES = frozenset({Opcode.XCH, Opcode.ADD, Opcode.SUB, Opcode.HLT})


# @intent:responsibility デコード済みの1命令（オペコードとオペランド）を保持します。
@dataclass(frozen=True)
class Instruction:
    """
    デコード済み命令。オペランドはシンボル名、整数リテラル、アドレスのいずれかです。
    """
    opcode: Opcode
    operand: Optional[Operand] = None

    @property
    def mnemonic(self) -> str:
        return self.opcode.value

    def __str__(self) -> str:
        if self.operand is None:
            return self.mnemonic
        return f"{self.mnemonic} {self.operand}"


# @intent:responsibility PC更新指示の種類を定義します。
class DirectiveKind(Enum):
    ADVANCE = "ADVANCE"
    JUMP = "JUMP"
    HALT = "HALT"


# @intent:responsibility 命令実行の結果としてエンジンに返されるPC更新指示。
# @intent:rationale 制御フローを副作用の戻り値から推測せず、全命令が明示的に返します。
@dataclass(frozen=True)
class PcDirective:
    kind: DirectiveKind
    target: Optional[int] = None

    @staticmethod
    def jump_to(address: int) -> "PcDirective":
        return PcDirective(DirectiveKind.JUMP, address)

    def __str__(self) -> str:
        if self.kind is DirectiveKind.JUMP:
            return f"JUMP {self.target}"
        return self.kind.value


ADVANCE = PcDirective(DirectiveKind.ADVANCE)
HALT = PcDirective(DirectiveKind.HALT)
