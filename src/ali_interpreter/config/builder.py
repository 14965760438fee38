from ali_interpreter.core.engine import ExecutionEngine
from ali_interpreter.loader.loader import ProgramLoader
from .models import InterpreterConfig

# @intent:responsibility 設定（Config）に基づいて実行エンジンを生成し、プログラムをロードします。
class InterpreterBuilder:
    def __init__(self, loader: ProgramLoader = None):
        self._loader = loader or ProgramLoader()

    def build(self, config: InterpreterConfig) -> ExecutionEngine:
        engine = ExecutionEngine(step_limit=config.step_limit)
        if config.program:
            self._loader.load_file(config.program, engine)
        return engine
