import io

import pytest

from liswat.interpreter import Interpreter


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def interp(out):
    """Interpreter with the packaged prelude, writing display output to `out`."""
    return Interpreter(stdout=out)


@pytest.fixture
def bare():
    """Interpreter without a prelude."""
    return Interpreter(prelude=None)
