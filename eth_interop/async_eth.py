"""asyncio versions of the callback taking ``web3.eth`` methods.

Each function returns an :py:class:`asyncio.Queue` that receives exactly one
``(error, result)`` tuple. Pass your own queue as the first argument to
collect several results into one place.

.. code-block:: python

    from eth_interop import async_eth

    error, accounts = await async_eth.get_accounts(web3).get()
    error, balance = await async_eth.get_balance(web3, accounts[0]).get()

"""

from eth_interop import eth, net
from eth_interop.async_bridge import create_async_fn

get_protocol_version = create_async_fn(eth.get_protocol_version)
is_syncing = create_async_fn(eth.is_syncing)
get_coinbase = create_async_fn(eth.get_coinbase)
is_mining = create_async_fn(eth.is_mining)
get_hashrate = create_async_fn(eth.get_hashrate)
get_gas_price = create_async_fn(eth.get_gas_price)
get_accounts = create_async_fn(eth.get_accounts)
get_block_number = create_async_fn(eth.get_block_number)
get_balance = create_async_fn(eth.get_balance)
get_storage_at = create_async_fn(eth.get_storage_at)
get_code = create_async_fn(eth.get_code)
get_block = create_async_fn(eth.get_block)
get_block_transaction_count = create_async_fn(eth.get_block_transaction_count)
get_uncle = create_async_fn(eth.get_uncle)
get_transaction = create_async_fn(eth.get_transaction)
get_transaction_from_block = create_async_fn(eth.get_transaction_from_block)
get_transaction_receipt = create_async_fn(eth.get_transaction_receipt)
get_transaction_count = create_async_fn(eth.get_transaction_count)
send_transaction = create_async_fn(eth.send_transaction)
send_signed_transaction = create_async_fn(eth.send_signed_transaction)
sign = create_async_fn(eth.sign)
sign_transaction = create_async_fn(eth.sign_transaction)
call = create_async_fn(eth.call)
estimate_gas = create_async_fn(eth.estimate_gas)
get_past_logs = create_async_fn(eth.get_past_logs)
get_work = create_async_fn(eth.get_work)
submit_work = create_async_fn(eth.submit_work)

# web3.eth.net
get_id = create_async_fn(net.get_id)
is_listening = create_async_fn(net.is_listening)
get_peer_count = create_async_fn(net.get_peer_count)
get_network_type = create_async_fn(net.get_network_type)
