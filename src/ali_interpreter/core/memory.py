# ali_interpreter/core/memory.py
"""
Core Layer (メモリバンク)

このモジュールは、256スロットの固定長メモリ空間を表現します。
0-127が命令セグメント、128-255がデータセグメントです。
各スロットは Empty / InstructionCell / DataCell のいずれかを保持します。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union

from ali_interpreter.common.types import MEMORY_SIZE, DATA_SEGMENT_START
from ali_interpreter.core.instruction import Instruction


# @intent:responsibility 「何も格納されていない」ことを表すセル。0とは区別されます。
class EmptyCell:
    """
    空のメモリスロットを表す番兵クラス。インスタンスは EMPTY のみを使用します。
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyCell()


# @intent:responsibility デコード済み命令を保持するセル。
@dataclass(frozen=True)
class InstructionCell:
    instruction: Instruction

    def __str__(self) -> str:
        return str(self.instruction)


# @intent:responsibility 符号付き整数値を保持するセル。
@dataclass(frozen=True)
class DataCell:
    value: int

    def __str__(self) -> str:
        return str(self.value)


Cell = Union[EmptyCell, InstructionCell, DataCell]


# @intent:responsibility メモリアクセスの種別を定義します。
class AccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"


# @intent:responsibility 個々のメモリアクセス操作を記録します。
@dataclass(frozen=True)
class MemoryAccess:
    """
    メモリ上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    address: int
    cell: Cell
    access_type: AccessType


# @intent:responsibility 256スロットのアドレス空間を管理し、全ての読み書きを記録します。
# @intent:rationale セグメントの型付けはストレージでは強制しません。
#                  データは128以上へ、命令フェッチは128未満から、という規約は命令側が守ります。
class MemoryBank:
    """
    固定長のメモリバンク。
    get/set によるアクセスはログに記録され、Snapshotに含められます。
    """
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._size = size
        self._cells: List[Cell] = [EMPTY] * size
        self._access_log: List[MemoryAccess] = []

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise IndexError(f"Address {address} out of bounds for memory of size {self._size}.")

    # @intent:responsibility 指定されたアドレスのセルを読み出し、アクセスを記録します。
    def get(self, address: int) -> Cell:
        self._check_address(address)
        cell = self._cells[address]
        self._access_log.append(MemoryAccess(address, cell, AccessType.READ))
        return cell

    # @intent:responsibility ログを記録せずにセルを読み出します。ダンプ表示などのインスペクタ用。
    def peek(self, address: int) -> Cell:
        self._check_address(address)
        return self._cells[address]

    # @intent:responsibility 指定されたアドレスにセルを書き込み、アクセスを記録します。
    def set(self, address: int, cell: Cell) -> None:
        self._check_address(address)
        if not isinstance(cell, (EmptyCell, InstructionCell, DataCell)):
            raise TypeError(f"Cannot store {type(cell).__name__} in memory; expected a memory cell.")
        self._cells[address] = cell
        self._access_log.append(MemoryAccess(address, cell, AccessType.WRITE))

    def clear(self, address: int) -> None:
        self.set(address, EMPTY)

    # @intent:responsibility 記録されたアクセスログを取得し、クリアします。
    def get_and_clear_access_log(self) -> List[MemoryAccess]:
        log = self._access_log
        self._access_log = []
        return log

    def get_size(self) -> int:
        return self._size

    def _occupied(self, start: int, end: int) -> Iterator[Tuple[int, Cell]]:
        for address in range(start, end):
            cell = self._cells[address]
            if cell is not EMPTY:
                yield address, cell

    # @intent:responsibility 命令セグメント内の使用中スロットを (address, cell) で列挙します。
    def instruction_cells(self) -> Iterator[Tuple[int, Cell]]:
        return self._occupied(0, min(DATA_SEGMENT_START, self._size))

    # @intent:responsibility データセグメント内の使用中スロットを (address, cell) で列挙します。
    def data_cells(self) -> Iterator[Tuple[int, Cell]]:
        return self._occupied(min(DATA_SEGMENT_START, self._size), self._size)
