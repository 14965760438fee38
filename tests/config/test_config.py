import pytest

from ali_interpreter.config.loader import ConfigLoader
from ali_interpreter.config.models import InterpreterConfig
from ali_interpreter.config.builder import InterpreterBuilder
from ali_interpreter.core.engine import EngineStatus


def test_defaults():
    config = ConfigLoader().parse_config({})
    assert config == InterpreterConfig(step_limit=1000, number_format="decimal", program=None)


def test_load_from_file(tmp_path):
    path = tmp_path / "ali.yaml"
    path.write_text("step_limit: 0x20\nnumber_format: Hexadecimal\nprogram: prog.txt\n")
    config = ConfigLoader().load_from_file(str(path))
    assert config.step_limit == 32
    assert config.number_format == "hexadecimal"
    assert config.program == "prog.txt"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert ConfigLoader().load_from_file(str(path)) == InterpreterConfig()


@pytest.mark.parametrize("data", [
    {"step_limit": 0},
    {"step_limit": "many"},
    {"step_limit": True},
    {"number_format": "octal"},
])
def test_invalid_values(data):
    with pytest.raises(ValueError):
        ConfigLoader().parse_config(data)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("step_limit: [1, 2\n")
    with pytest.raises(ValueError):
        ConfigLoader().load_from_file(str(path))


def test_builder_loads_program(tmp_path):
    program = tmp_path / "loop.txt"
    program.write_text("JMP 0\n")
    engine = InterpreterBuilder().build(InterpreterConfig(step_limit=5, program=str(program)))
    assert engine.step_limit == 5
    engine.run_to_completion()
    assert engine.status is EngineStatus.STEP_LIMIT_EXCEEDED
    assert engine.step_count == 6


def test_builder_without_program():
    engine = InterpreterBuilder().build(InterpreterConfig())
    assert list(engine.memory.instruction_cells()) == []
