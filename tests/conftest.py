import pytest

from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_str


@pytest.fixture
def interp():
    """Fresh interpreter with builtins loaded."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source in the shared interpreter and return the printed result."""
    def _run(source: str) -> str:
        return to_str(interp.eval_last(source))
    return _run
