import io

import pytest

from cti.commands.builtins import register_builtins
from cti.commands.registry import CommandRegistry
from cti.config import Settings
from cti.engine import Engine


def make_settings(tmp_path, **overrides) -> Settings:
    values = {"log_file": "test.log", "log_dir": str(tmp_path / "log")}
    values.update(overrides)
    return Settings(**values)


def run_session(engine: Engine, text: str) -> tuple[int, str]:
    out = io.StringIO()
    code = engine.main_loop(io.StringIO(text), out)
    return code, out.getvalue()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def engine(settings) -> Engine:
    return Engine(settings)


@pytest.fixture
def command_registry():
    registry = CommandRegistry()
    register_builtins(registry, on_quit=lambda: None)
    return registry
