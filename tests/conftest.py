import pytest

from builders import cycle, make


@pytest.fixture
def triangle():
    return make([1, 2, 3], [(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def square():
    return cycle(4)
