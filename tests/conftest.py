import pytest

from tests.fake_web3 import FakeWeb3, HttpProvider


@pytest.fixture()
def web3() -> FakeWeb3:
    """Host web3 instance."""
    return FakeWeb3(HttpProvider("http://localhost:8545"))
