# ali_interpreter/core/state.py
"""
Core Layer (レジスタ・フラグ状態)

このモジュールは、アキュムレータとデータレジスタ、条件フラグ、
およびSnapshotに記録するためのエンジン状態のデータ構造を定義します。
"""
from dataclasses import dataclass

from ali_interpreter.common.types import INT32_MIN, INT32_MAX


# @intent:responsibility アキュムレータとデータレジスタを保持します。
# @intent:rationale 値の幅は制限しません。オーバーフローはフラグで観測されるだけで、値は切り詰めません。
@dataclass
class RegisterFile:
    """
    ALIの2つの汎用レジスタ（アキュムレータ、データレジスタ）。
    """
    accumulator: int = 0
    data_register: int = 0

    def read_accumulator(self) -> int:
        return self.accumulator

    def write_accumulator(self, value: int) -> None:
        self.accumulator = value

    def read_data_register(self) -> int:
        return self.data_register

    def write_data_register(self, value: int) -> None:
        self.data_register = value

    # @intent:responsibility アキュムレータとデータレジスタの内容を交換します。
    def swap(self) -> None:
        self.accumulator, self.data_register = self.data_register, self.accumulator


# @intent:responsibility ゼロフラグとオーバーフローフラグを保持します。
@dataclass
class Flags:
    zero: bool = False
    overflow: bool = False

    # @intent:responsibility 演算後のアキュムレータ値から両フラグを再計算します。
    # @intent:pre-condition `value`は切り詰め前の演算結果である必要があります。
    def update_from(self, value: int) -> None:
        self.zero = value == 0
        self.overflow = value > INT32_MAX or value < INT32_MIN


# @intent:responsibility ある時点のエンジンのレジスタ・フラグ・PCを不変に記録します。
@dataclass(frozen=True)
class EngineState:
    """
    Snapshotに含めるためのエンジン状態のコピー。
    """
    pc: int = 0
    accumulator: int = 0
    data_register: int = 0
    zero_flag: bool = False
    overflow_flag: bool = False
    terminated: bool = False
