"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスや定数を定義します。
"""
from typing import Dict, Union

# @intent:data_structure シンボル名とデータアドレスをマッピングする辞書の型エイリアス。
# SymbolTable, Engine, ダンプ出力など複数のレイヤーで共通して使用されます。
SymbolMap = Dict[str, int]

# @intent:data_structure 命令のオペランド。シンボル名（DEC/LDA/STR）か整数（LDI/JMP/JZS/LVS）。
Operand = Union[str, int]

# @intent:constant メモリ空間のレイアウト。0-127が命令セグメント、128-255がデータセグメント。
MEMORY_SIZE = 256
INSTRUCTION_SEGMENT_START = 0
DATA_SEGMENT_START = 128
DATA_SEGMENT_SIZE = MEMORY_SIZE - DATA_SEGMENT_START

# @intent:constant オーバーフロー判定に用いる32bit符号付き整数の範囲。
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# @intent:constant 暴走ループ防止のための既定の命令実行上限。
DEFAULT_STEP_LIMIT = 1000
