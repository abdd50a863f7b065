"""Ethereum blockchain related methods on ``web3.eth``.

Each function takes the host web3 instance and the same positional
arguments as the web3.js method. Asynchronous methods take an optional
trailing ``callback(error, result)``, which gets its result with
kebab-case keys.

Example:

.. code-block:: python

    from eth_interop import eth

    def on_block(err, block):
        if err is None:
            print(block["block-number"], block["state-root"])

    eth.get_block(web3, "latest", on_block)

For asyncio, see :py:mod:`eth_interop.async_eth`.
"""

from typing import Any

from eth_typing import HexAddress

from eth_interop.dispatch import call as _call, get_property, resolve_path, set_property


def eth(web3) -> Any:
    """Gets the eth module object from the web3 instance."""
    return resolve_path(web3, "eth")


def set_provider(web3, provider) -> Any:
    """Set the provider of the eth module only."""
    return _call(eth(web3), "set-provider", [provider])


def providers(web3) -> Any:
    """Returns the current available providers."""
    return resolve_path(eth(web3), "providers")


def given_provider(web3) -> Any:
    """Returns the given provider set or None"""
    return resolve_path(eth(web3), "givenProvider")


def current_provider(web3) -> Any:
    """Returns the provider set or None."""
    return resolve_path(eth(web3), "currentProvider")


def batch_request(web3_class) -> Any:
    """Create a batch request from the eth module constructor."""
    constructor = resolve_path(web3_class, "eth", "BatchRequest")
    assert constructor is not None, f"{web3_class} has no eth.BatchRequest"
    return constructor()


def default_account(web3) -> HexAddress | None:
    """Address used as `from` when a transaction does not give one.

    :return:
        Address or None if not set
    """
    return get_property(web3, "eth", "defaultAccount")


def set_default_account(web3, address: HexAddress):
    """Set the address used as the default `from`.

    :param address:
        Hex address string
    """
    set_property(eth(web3), "defaultAccount", address)


def default_block(web3) -> Any:
    """Default block used by calls that take a block parameter.

    One of block number, `"earliest"`, `"latest"` or `"pending"`.
    """
    return get_property(web3, "eth", "defaultBlock")


def set_default_block(web3, block: int | str):
    """Set the default block, see :py:func:`default_block`."""
    set_property(eth(web3), "defaultBlock", block)


def get_protocol_version(web3, *args):
    """Returns the Ethereum protocol version of the node."""
    return _call(eth(web3), "get-protocol-version", args)


def is_syncing(web3, *args):
    """Returns a sync status object when the node is syncing, False otherwise.

    Keys of the sync object: `starting-block`, `current-block`, `highest-block`,
    `known-states`, `pulled-states`.
    """
    return _call(eth(web3), "is-syncing", args)


def get_coinbase(web3, *args):
    """Returns the coinbase address mining rewards go to."""
    return _call(eth(web3), "get-coinbase", args)


def is_mining(web3, *args):
    """Returns True if the node is mining."""
    return _call(eth(web3), "is-mining", args)


def get_hashrate(web3, *args):
    """Returns the number of hashes per second the node is mining with."""
    return _call(eth(web3), "get-hashrate", args)


def get_gas_price(web3, *args):
    """Returns the current gas price oracle value in wei, as a number string."""
    return _call(eth(web3), "get-gas-price", args)


def get_accounts(web3, *args):
    """Returns a list of accounts the node controls."""
    return _call(eth(web3), "get-accounts", args)


def get_block_number(web3, *args):
    """Returns the current block number."""
    return _call(eth(web3), "get-block-number", args)


def get_balance(web3, *args):
    """Get the balance of an address at a given block.

    Parameters: address, optional default block, optional callback.

    :return:
        Balance in wei as a number string
    """
    return _call(eth(web3), "get-balance", args)


def get_storage_at(web3, *args):
    """Get the storage at a specific position of an address.

    Parameters: address, position, optional default block, optional callback.
    """
    return _call(eth(web3), "get-storage-at", args)


def get_code(web3, *args):
    """Get the code at a specific address."""
    return _call(eth(web3), "get-code", args)


def get_block(web3, *args):
    """Returns a block matching the block number or block hash.

    Parameters: block hash or number, optional boolean to return full
    transaction objects instead of hashes, optional callback.

    Block keys come back kebab-cased: `block-number`, `parent-hash`,
    `state-root`, `gas-used` and so on.
    """
    return _call(eth(web3), "get-block", args)


def get_block_transaction_count(web3, *args):
    """Returns the number of transactions in a given block."""
    return _call(eth(web3), "get-block-transaction-count", args)


def get_uncle(web3, *args):
    """Returns a block's uncle by a given uncle index position."""
    return _call(eth(web3), "get-uncle", args)


def get_transaction(web3, *args):
    """Returns a transaction matching the given transaction hash."""
    return _call(eth(web3), "get-transaction", args)


def get_transaction_from_block(web3, *args):
    """Returns a transaction based on a block hash or number and the transaction's index position."""
    return _call(eth(web3), "get-transaction-from-block", args)


def get_transaction_receipt(web3, *args):
    """Returns the receipt of a transaction by transaction hash.

    The receipt is not available for pending transactions and None is returned.
    """
    return _call(eth(web3), "get-transaction-receipt", args)


def get_transaction_count(web3, *args):
    """Get the numbers of transactions sent from this address."""
    return _call(eth(web3), "get-transaction-count", args)


def send_transaction(web3, *args):
    """Sends a transaction to the network.

    The transaction object uses kebab-case keys, e.g.

    .. code-block:: python

        eth.send_transaction(web3, {"from": sender, "to": receiver, "value": "1000", "gas-price": "20000000000"}, callback)

    """
    return _call(eth(web3), "send-transaction", args)


def send_signed_transaction(web3, *args):
    """Sends an already signed transaction."""
    return _call(eth(web3), "send-signed-transaction", args)


def sign(web3, *args):
    """Signs data using a specific account. The account needs to be unlocked."""
    return _call(eth(web3), "sign", args)


def sign_transaction(web3, *args):
    """Signs a transaction. The account needs to be unlocked."""
    return _call(eth(web3), "sign-transaction", args)


def call(web3, *args):
    """Executes a message call transaction without mining it."""
    return _call(eth(web3), "call", args)


def estimate_gas(web3, *args):
    """Estimate the gas a transaction or message call would use."""
    return _call(eth(web3), "estimate-gas", args)


def get_past_logs(web3, *args):
    """Gets past logs matching the given filter options."""
    return _call(eth(web3), "get-past-logs", args)


def get_work(web3, *args):
    """Gets work for miners to mine on."""
    return _call(eth(web3), "get-work", args)


def submit_work(web3, *args):
    """Used for submitting a proof-of-work solution."""
    return _call(eth(web3), "submit-work", args)
