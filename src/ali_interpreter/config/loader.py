import yaml
from typing import Dict, Any
from .models import InterpreterConfig, NUMBER_FORMATS

# @intent:responsibility YAML形式の設定ファイルを読み込み、InterpreterConfigを生成します。
class ConfigLoader:
    def load_from_file(self, path: str) -> InterpreterConfig:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        return self.parse_config(data or {})

    def parse_config(self, data: Dict[str, Any]) -> InterpreterConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        step_limit = self._parse_int(data.get("step_limit", InterpreterConfig.step_limit))
        if step_limit <= 0:
            raise ValueError(f"step_limit must be positive: {step_limit}")

        number_format = str(data.get("number_format", InterpreterConfig.number_format)).lower()
        if number_format not in NUMBER_FORMATS:
            raise ValueError(f"Unknown number_format '{number_format}' (expected one of {', '.join(NUMBER_FORMATS)})")

        program = data.get("program")

        return InterpreterConfig(
            step_limit=step_limit,
            number_format=number_format,
            program=str(program) if program is not None else None
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
