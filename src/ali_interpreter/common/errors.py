"""
インタプリタ全体で使用される例外クラス。
"""


class AliError(Exception):
    """ALIインタプリタが送出する全ての例外の基底クラス。"""


# @intent:responsibility プログラムソースに未知のオペコードが含まれていたことを通知します。
# @intent:rationale デコード時点で失敗させ、空セルとして黙ってロードされることを防ぎます。
class UnknownOpcodeError(AliError, ValueError):
    def __init__(self, opcode: str, line_num: int):
        self.opcode = opcode
        self.line_num = line_num
        super().__init__(f"Unknown opcode '{opcode}' on line {line_num}")


# @intent:responsibility オペランドの個数や形式、プログラム長の不正を通知します。
class ProgramFormatError(AliError, ValueError):
    pass


# @intent:responsibility データセグメントの割り当て可能なアドレスが尽きたことを通知します。
class AllocationExhaustedError(AliError):
    def __init__(self, symbol: str, capacity: int):
        self.symbol = symbol
        self.capacity = capacity
        super().__init__(
            f"Cannot allocate symbol '{symbol}': all {capacity} data addresses are in use."
        )
