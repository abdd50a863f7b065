"""web3.eth and web3.eth.net pass-throughs."""

import asyncio

import pytest

from eth_interop import async_eth, eth, net

from tests.fake_web3 import COINBASE


def test_accounts(web3):
    assert eth.get_accounts(web3) == [COINBASE]
    assert eth.get_coinbase(web3) == COINBASE


def test_balance_with_callback(web3):
    received = []
    eth.get_balance(web3, COINBASE, "latest", lambda err, res: received.append((err, res)))
    assert received == [(None, "1000000000000")]
    assert web3.eth.received["getBalance"][:2] == (COINBASE, "latest")


def test_block(web3):
    block = eth.get_block(web3, "latest")
    assert block["block-number"] == 5
    assert block["state-root"] == "0x00"


def test_default_account(web3):
    assert eth.default_account(web3) is None
    eth.set_default_account(web3, COINBASE)
    assert eth.default_account(web3) == COINBASE
    assert web3.eth.defaultAccount == COINBASE


def test_default_block(web3):
    assert eth.default_block(web3) == "latest"
    eth.set_default_block(web3, 100)
    assert eth.default_block(web3) == 100


def test_syncing(web3):
    status = eth.is_syncing(web3)
    assert status["highest-block"] == 512


def test_send_transaction(web3):
    eth.send_transaction(web3, {"from": COINBASE, "to": COINBASE, "value": "1", "gas-price": "1000"})
    assert web3.eth.received["sendTransaction"]["gasPrice"] == "1000"


def test_set_provider(web3):
    eth.set_provider(web3, "provider")
    assert eth.current_provider(web3) == "provider"


def test_missing_endpoint(web3):
    """Fake node does not implement getWork."""
    with pytest.raises(LookupError):
        eth.get_work(web3)


def test_net(web3):
    assert net.get_id(web3) == 1337
    assert net.is_listening(web3) is True
    assert net.get_peer_count(web3) == 3
    assert net.get_network_type(web3) == "private"


@pytest.mark.asyncio
async def test_async_accounts_and_balance(web3):
    err, accounts = await async_eth.get_accounts(web3).get()
    assert err is None

    err, balance = await async_eth.get_balance(web3, accounts[0]).get()
    assert err is None
    assert int(balance) > 0


@pytest.mark.asyncio
async def test_async_block(web3):
    err, block = await async_eth.get_block(web3, "latest").get()
    assert block["block-number"] == 5


@pytest.mark.asyncio
async def test_async_error(web3):
    err, receipt = await async_eth.get_transaction_receipt(web3, "0x1234").get()
    assert isinstance(err, ValueError)
    assert receipt is None


@pytest.mark.asyncio
async def test_async_shared_sink(web3):
    """Collect several results into one queue."""
    sink = asyncio.Queue()
    async_eth.get_gas_price(sink, web3)
    async_eth.get_id(sink, web3)
    assert await sink.get() == (None, "20000000000")
    assert await sink.get() == (None, 1337)


@pytest.mark.asyncio
async def test_async_empty_completion(web3):
    """Host calling back without arguments."""
    assert await async_eth.get_block_number(web3).get() == (None, None)


@pytest.mark.asyncio
async def test_async_net(web3):
    assert await async_eth.get_id(web3).get() == (None, 1337)
    assert await async_eth.is_listening(web3).get() == (None, True)
    assert await async_eth.get_peer_count(web3).get() == (None, 3)
    assert await async_eth.get_network_type(web3).get() == (None, "private")
