"""Network properties on ``web3.eth.net``."""

from typing import Any

from eth_interop.dispatch import call, resolve_path


def net(web3) -> Any:
    """Gets the net module object from the web3 instance."""
    return resolve_path(web3, "eth", "net")


def get_id(web3, *args):
    """Returns the network id, e.g. 1 for mainnet."""
    return call(net(web3), "get-id", args)


def is_listening(web3, *args):
    """Returns True if the node is listening for peers."""
    return call(net(web3), "is-listening", args)


def get_peer_count(web3, *args):
    """Returns the number of connected peers."""
    return call(net(web3), "get-peer-count", args)


def get_network_type(web3, *args):
    """Guesses the chain by comparing the genesis hash, e.g. `"main"` or `"private"`."""
    return call(net(web3), "get-network-type", args)
