import pytest

from fake_clock import store


@pytest.fixture(autouse=True)
def reset_fake_time():
    store.reset_time()
    yield
    store.reset_time()
