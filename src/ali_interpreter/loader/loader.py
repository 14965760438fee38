# ali_interpreter/loader/loader.py
"""
プログラムローダーモジュール。

ALIのプログラムソース（1行1命令、アドレス＝0始まりの行番号）を解析し、
デコード済み命令として実行エンジンの命令セグメントへロードします。
"""
import re
from typing import List, Optional, Sequence, Tuple

from ali_interpreter.common.errors import UnknownOpcodeError, ProgramFormatError
from ali_interpreter.common.types import MEMORY_SIZE, DATA_SEGMENT_START
from ali_interpreter.core.engine import ExecutionEngine
from ali_interpreter.core.instruction import (
    Instruction, Opcode, SYMBOL_OPCODES, ADDRESS_OPCODES, INTEGER_OPCODES,
)

_SYMBOL_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
_INTEGER_PATTERN = re.compile(r'0[xX][0-9a-fA-F]+|[0-9]+')


class ProgramLoader:
    """
    ALIプログラムソースを解析し、命令をエンジンにロードするローダー。
    """
    # @intent:responsibility ファイルを読み込み、全行をデコードしてからエンジンにロードします。
    def load_file(self, file_path: str, engine: ExecutionEngine) -> List[Optional[Instruction]]:
        try:
            with open(file_path, 'r', encoding="utf-8") as f:
                lines = f.read().splitlines()
        except UnicodeDecodeError as e:
            raise ProgramFormatError(f"Program file {file_path} is not valid UTF-8: {e}") from e
        return self.load_lines(lines, engine)

    # @intent:responsibility 行リストをデコードし、エンジンにロードします。
    # @intent:rationale いずれかの行でデコードに失敗した場合、エンジンには何もロードしません。
    def load_lines(self, lines: Sequence[str], engine: ExecutionEngine) -> List[Optional[Instruction]]:
        program = self.parse_lines(lines)
        engine.load_program(program)
        return program

    # @intent:responsibility 全行をデコードし、アドレス順の命令リスト（空行はNone）を返します。
    def parse_lines(self, lines: Sequence[str]) -> List[Optional[Instruction]]:
        if len(lines) > DATA_SEGMENT_START:
            raise ProgramFormatError(
                f"Program has {len(lines)} lines; the instruction segment holds at most {DATA_SEGMENT_START}."
            )
        return [self.decode_line(line, line_num) for line_num, line in enumerate(lines, 1)]

    # @intent:responsibility 1行をデコードしてInstructionを返します。空行・コメント行はNoneです。
    # @intent:post-condition 未知のオペコードはUnknownOpcodeError、オペランド不正はProgramFormatErrorを送出します。
    def decode_line(self, line: str, line_num: int = 1) -> Optional[Instruction]:
        name, operands = self._parse_line(line)
        if name is None:
            return None

        try:
            opcode = Opcode(name)
        except ValueError:
            raise UnknownOpcodeError(name, line_num) from None

        if opcode in SYMBOL_OPCODES:
            symbol = self._single_operand(opcode, operands, line_num)
            if not _SYMBOL_PATTERN.fullmatch(symbol):
                raise ProgramFormatError(f"Invalid symbol name '{symbol}' on line {line_num}")
            return Instruction(opcode, symbol)

        if opcode in INTEGER_OPCODES:
            value = self._parse_int(self._single_operand(opcode, operands, line_num), line_num)
            return Instruction(opcode, value)

        if opcode in ADDRESS_OPCODES:
            address = self._parse_int(self._single_operand(opcode, operands, line_num), line_num)
            if not 0 <= address < MEMORY_SIZE:
                raise ProgramFormatError(
                    f"Jump target {address} out of range 0-{MEMORY_SIZE - 1} on line {line_num}"
                )
            return Instruction(opcode, address)

        if operands:
            raise ProgramFormatError(f"{opcode.value} takes no operands (line {line_num})")
        return Instruction(opcode)

    def _parse_line(self, line: str) -> Tuple[Optional[str], List[str]]:
        line = line.split(';')[0].strip()
        if not line:
            return None, []
        parts = line.split()
        return parts[0].upper(), parts[1:]

    def _single_operand(self, opcode: Opcode, operands: List[str], line_num: int) -> str:
        if len(operands) != 1:
            raise ProgramFormatError(
                f"{opcode.value} expects 1 operand, got {len(operands)} (line {line_num})"
            )
        return operands[0]

    def _parse_int(self, val_str: str, line_num: int) -> int:
        # @intent:utility_function 10進数と0x形式の16進数（符号付き）を数値に変換します。
        text = val_str.strip()
        sign = 1
        if text[:1] in ('-', '+'):
            sign = -1 if text[0] == '-' else 1
            text = text[1:]
        if not _INTEGER_PATTERN.fullmatch(text):
            raise ProgramFormatError(f"Invalid integer '{val_str}' on line {line_num}")
        try:
            if text.lower().startswith('0x'):
                return sign * int(text, 16)
            return sign * int(text, 10)
        except ValueError:
            raise ProgramFormatError(f"Invalid integer '{val_str}' on line {line_num}") from None
