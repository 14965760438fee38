# ali_interpreter/core/symbols.py
"""
Core Layer (シンボルテーブル)

シンボル名をデータセグメントのアドレスに対応付けます。
アドレスは最初に参照された順に128から単調増加で割り当てられます。
"""
from typing import Dict, Iterator, Optional

from ali_interpreter.common.errors import AllocationExhaustedError
from ali_interpreter.common.types import SymbolMap, DATA_SEGMENT_START, DATA_SEGMENT_SIZE


# @intent:responsibility シンボル名とデータアドレスの対応を管理します。
# @intent:invariant 割り当てられるアドレスは128, 129, 130, ... の連番で、再利用も欠番もありません。
class SymbolTable:
    """
    シンボル名 -> データアドレスの順序付きマッピング。
    """
    def __init__(self, base_address: int = DATA_SEGMENT_START, capacity: int = DATA_SEGMENT_SIZE):
        self._base_address = base_address
        self._capacity = capacity
        self._symbols: Dict[str, int] = {}
        self._reverse: Dict[int, str] = {}

    # @intent:responsibility シンボルのアドレスを返します。初回参照時は次のアドレスを割り当てます。
    # @intent:post-condition 容量を超える場合はAllocationExhaustedErrorを送出し、テーブルは変更されません。
    def resolve(self, name: str) -> int:
        """
        シンボルを解決します。同じ名前に対しては常に同じアドレスを返します。
        """
        address = self._symbols.get(name)
        if address is not None:
            return address
        if len(self._symbols) >= self._capacity:
            raise AllocationExhaustedError(name, self._capacity)
        address = self._base_address + len(self._symbols)
        self._symbols[name] = address
        self._reverse[address] = name
        return address

    # @intent:responsibility 割り当てを行わずにシンボルのアドレスを検索します。
    def lookup(self, name: str) -> Optional[int]:
        return self._symbols.get(name)

    # @intent:responsibility アドレスからシンボル名を逆引きします。データメモリのダンプ表示用。
    def name_at(self, address: int) -> Optional[str]:
        return self._reverse.get(address)

    def as_dict(self) -> SymbolMap:
        return dict(self._symbols)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)
