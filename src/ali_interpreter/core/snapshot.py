# ali_interpreter/core/snapshot.py
"""
実行状態の不変スナップショット

1ステップ実行後のエンジン状態、実行した命令、PC更新指示、およびメモリアクセスを記録します。
ダンプ表示やテストでの状態確認に用いる責務を負います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ali_interpreter.core.instruction import Instruction, PcDirective
from ali_interpreter.core.memory import MemoryAccess
from ali_interpreter.core.state import EngineState


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    step_count: int
    trace_info: str = ""  # 例: "4: ADD"


# @intent:responsibility ある一時点におけるエンジンの状態を不変に記録します。
# @intent:rationale 命令が実行されなかったステップ（空セル、終了後、上限超過）では
#                  operationとdirectiveはNoneになります。
@dataclass(frozen=True)
class Snapshot:
    """
    single_step() の結果を表すデータ構造。
    """
    state: EngineState
    operation: Optional[Instruction]
    directive: Optional[PcDirective]
    metadata: Metadata
    memory_activity: List[MemoryAccess] = field(default_factory=list)

    @property
    def executed(self) -> bool:
        return self.operation is not None
