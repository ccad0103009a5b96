import pytest

from lifo.factory import STRATEGIES, create_stack


@pytest.fixture(params=STRATEGIES)
def stack(request):
    """An empty stack for each storage strategy."""
    return create_stack(request.param)
