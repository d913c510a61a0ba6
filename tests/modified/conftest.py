import pytest

from modified import logconfig


@pytest.fixture(
    params=[0, 15, -3.5, "a", "", None, True, (1, 2), [], [1, 2, 3], {"k": "v"}]
)
def initial(request):
    return request.param


@pytest.fixture
def restore_logger():
    try:
        yield
    finally:
        logconfig.configure_root_logger()
