import pytest

from lispy.interpreter import make_root_environment, evaluate_program


@pytest.fixture
def env():
    """Fresh root environment with the standard bindings loaded."""
    return make_root_environment()


@pytest.fixture
def run(env):
    """Evaluate source text in the shared `env`, returning the last value."""
    def _run(source):
        return evaluate_program(source, env)
    return _run
