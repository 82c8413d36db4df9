import pytest
from fakes import Deferred, FakeEmitter


@pytest.fixture
def emitter() -> FakeEmitter:
    return FakeEmitter()


@pytest.fixture
def deferred() -> Deferred:
    return Deferred()
