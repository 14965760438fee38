from dataclasses import dataclass
from typing import Optional

from ali_interpreter.common.types import DEFAULT_STEP_LIMIT

NUMBER_FORMATS = ("decimal", "hexadecimal")

@dataclass
class InterpreterConfig:
    step_limit: int = DEFAULT_STEP_LIMIT
    number_format: str = "decimal"  # "decimal", "hexadecimal"
    program: Optional[str] = None   # 起動時にロードするプログラムファイル
