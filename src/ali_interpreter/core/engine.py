# ali_interpreter/core/engine.py
"""
Core Layer (実行エンジン)

このモジュールは、ALIのフェッチ・実行サイクルを駆動します。
PC、フラグ、終了状態、ステップカウンタを所有し、
MemoryBank / RegisterFile / SymbolTable を命令実行に明示的に渡します。
具体的な命令の振る舞いは命令セット（isa）に委譲されます。
"""
from enum import Enum
from typing import Iterable, Optional

from ali_interpreter.common.types import MEMORY_SIZE, DATA_SEGMENT_START, DEFAULT_STEP_LIMIT
from ali_interpreter.core.instruction import Instruction, PcDirective, DirectiveKind
from ali_interpreter.core.memory import MemoryBank, InstructionCell
from ali_interpreter.core.snapshot import Snapshot, Metadata
from ali_interpreter.core.state import RegisterFile, Flags, EngineState
from ali_interpreter.core.symbols import SymbolTable
from ali_interpreter.isa import execute_instruction


# @intent:responsibility エンジンの状態遷移を定義します。RUNNING以外は終端状態です。
class EngineStatus(Enum):
    RUNNING = "RUNNING"
    HALTED = "HALTED"
    STEP_LIMIT_EXCEEDED = "STEP_LIMIT_EXCEEDED"
    OUT_OF_RANGE = "OUT_OF_RANGE"


# @intent:responsibility ALIのフェッチ・実行サイクルと実行状態を管理します。
class ExecutionEngine:
    """
    ALI仮想マシンの実行エンジン。
    single_step() で1命令ずつ、run_to_completion() で終了まで実行します。
    """
    # @intent:responsibility 全ての状態を初期値で生成します。
    # @intent:pre-condition `step_limit`は正の整数である必要があります。
    def __init__(self, step_limit: int = DEFAULT_STEP_LIMIT):
        if not isinstance(step_limit, int) or step_limit <= 0:
            raise ValueError("Step limit must be a positive integer.")
        self._step_limit = step_limit
        self._init_state()

    def _init_state(self) -> None:
        self._memory = MemoryBank()
        self._registers = RegisterFile()
        self._symbols = SymbolTable()
        self._flags = Flags()
        self._pc: int = 0
        self._terminated: bool = False
        self._stop_reason: Optional[EngineStatus] = None
        self._step_count: int = 0
        self._diagnostic: Optional[str] = None

    # @intent:responsibility エンジンを初期状態に戻します。ロード済みのプログラムも破棄されます。
    def reset(self) -> None:
        self._init_state()

    # --- プログラムのロード ---

    # @intent:responsibility デコード済み命令を命令セグメントの指定アドレスに配置します。
    # @intent:pre-condition アドレスは命令セグメント（0-127）内である必要があります。
    def load(self, address: int, instruction: Instruction) -> None:
        if not 0 <= address < DATA_SEGMENT_START:
            raise IndexError(f"Address {address} is outside the instruction segment (0-{DATA_SEGMENT_START - 1}).")
        self._memory.set(address, InstructionCell(instruction))
        self._memory.get_and_clear_access_log()

    # @intent:responsibility 命令列をアドレス0から順に配置します。Noneのアドレスは空セルになります。
    # @intent:post-condition 命令セグメントは事前に全て空セルに戻されるため、以前のプログラムは残りません。
    def load_program(self, instructions: Iterable[Optional[Instruction]]) -> None:
        program = list(instructions)
        if len(program) > DATA_SEGMENT_START:
            raise IndexError(f"Program of {len(program)} instructions does not fit the instruction segment (0-{DATA_SEGMENT_START - 1}).")
        for address in range(DATA_SEGMENT_START):
            self._memory.clear(address)
        for address, instruction in enumerate(program):
            if instruction is not None:
                self.load(address, instruction)
        self._memory.get_and_clear_access_log()

    # --- 実行 ---

    # @intent:responsibility 1命令サイクルを実行し、その結果のスナップショットを返します。
    # @intent:flow ステップカウンタ更新 -> 上限判定 -> 終了/範囲外判定 -> フェッチ -> 実行 -> PC更新 の順で処理します。
    def single_step(self) -> Snapshot:
        """
        1ステップ実行します。
        上限を超えた呼び出しでは、PC位置の命令は実行されずに終了状態へ移行します。
        命令が例外を送出した場合、その命令の効果は適用されず、PCも変化しません。
        """
        self._memory.get_and_clear_access_log()
        initial_pc = self._pc

        # 1. 暴走ループ検出
        self._step_count += 1
        if self._step_count > self._step_limit:
            # 終端状態（HALTED / OUT_OF_RANGE）は維持し、RUNNINGからのみ上限超過へ遷移する
            if self.status is EngineStatus.RUNNING:
                self._terminated = True
                self._stop_reason = EngineStatus.STEP_LIMIT_EXCEEDED
                self._diagnostic = f"Limit reached! Exceeded {self._step_limit} instructions."
            return self._create_snapshot(initial_pc, None, None)

        # 2. 終了済み、またはアドレス空間の終端
        if self._terminated or self._pc >= MEMORY_SIZE:
            return self._create_snapshot(initial_pc, None, None)

        # 3. フェッチ
        cell = self._memory.get(self._pc)
        if not isinstance(cell, InstructionCell):
            # 空セル（またはデータセル）は何も実行しない
            return self._create_snapshot(initial_pc, None, None)

        # 4. 実行とPC更新
        operation = cell.instruction
        directive = execute_instruction(operation, self._registers, self._flags, self._memory, self._symbols)
        self._apply_directive(directive)
        return self._create_snapshot(initial_pc, operation, directive)

    # @intent:responsibility 終了するか、PCがアドレス空間の終端に達するまで実行を続けます。
    def run_to_completion(self) -> Snapshot:
        snapshot = None
        while not self._terminated and self._pc < MEMORY_SIZE:
            snapshot = self.single_step()
        if snapshot is None:
            snapshot = self._create_snapshot(self._pc, None, None)
        return snapshot

    def _apply_directive(self, directive: PcDirective) -> None:
        if directive.kind is DirectiveKind.ADVANCE:
            self._pc += 1
        elif directive.kind is DirectiveKind.JUMP:
            self._pc = directive.target
        elif directive.kind is DirectiveKind.HALT:
            self._terminated = True
            self._stop_reason = EngineStatus.HALTED
        else:
            raise ValueError(f"Unknown PC directive: {directive}")

    def _create_snapshot(self, initial_pc: int, operation: Optional[Instruction],
                         directive: Optional[PcDirective]) -> Snapshot:
        trace_info = f"{initial_pc}: {operation}" if operation is not None else ""
        return Snapshot(
            state=self.get_state(),
            operation=operation,
            directive=directive,
            metadata=Metadata(step_count=self._step_count, trace_info=trace_info),
            memory_activity=self._memory.get_and_clear_access_log(),
        )

    # --- 読み取り専用アクセサ ---

    # @intent:responsibility 現在のレジスタ・フラグ・PCを不変オブジェクトとして返します。
    def get_state(self) -> EngineState:
        return EngineState(
            pc=self._pc,
            accumulator=self._registers.accumulator,
            data_register=self._registers.data_register,
            zero_flag=self._flags.zero,
            overflow_flag=self._flags.overflow,
            terminated=self._terminated,
        )

    @property
    def status(self) -> EngineStatus:
        if self._stop_reason is not None:
            return self._stop_reason
        if self._pc >= MEMORY_SIZE:
            return EngineStatus.OUT_OF_RANGE
        return EngineStatus.RUNNING

    @property
    def memory(self) -> MemoryBank:
        return self._memory

    @property
    def symbol_table(self) -> SymbolTable:
        return self._symbols

    @property
    def accumulator(self) -> int:
        return self._registers.accumulator

    @property
    def data_register(self) -> int:
        return self._registers.data_register

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def zero_flag(self) -> bool:
        return self._flags.zero

    @property
    def overflow_flag(self) -> bool:
        return self._flags.overflow

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def step_limit(self) -> int:
        return self._step_limit

    # @intent:responsibility 直近の診断メッセージ（暴走ループ検出など）を返します。
    @property
    def diagnostic(self) -> Optional[str]:
        return self._diagnostic
