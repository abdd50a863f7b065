"""Web3 object level functions.

A host `web3` instance is a web3.js style client object.
It can come from a JavaScript bridge, or be created here with
:py:func:`create_web3` given the host Web3 constructor.

.. code-block:: python

    from eth_interop import core

    web3 = core.create_web3(Web3, "ws://localhost:8545/")
    core.set_provider(web3, core.http_provider(Web3, "http://localhost:8545/"))

The host object is always passed explicitly. There is no global default.
"""

import logging
from typing import Any

from eth_interop.dispatch import call, property_or_callback, resolve_path
from eth_interop.provider import (
    DEFAULT_JSON_RPC_ENV,
    get_provider_name,
    http_provider,
    ipc_provider,
    read_json_rpc_url,
    websocket_provider,
)

logger = logging.getLogger(__name__)

__all__ = [
    "version",
    "modules",
    "utils",
    "set_provider",
    "providers",
    "given_provider",
    "current_provider",
    "reset",
    "http_provider",
    "ipc_provider",
    "websocket_provider",
    "create_web3",
    "create_web3_from_env",
    "batch_request",
    "version_api",
    "version_node",
    "version_network",
    "version_ethereum",
    "version_whisper",
]


def version(web3) -> str:
    """Returns the current version of the host library."""
    return resolve_path(web3, "version")


def modules(web3) -> Any:
    """Return the classes of the sub modules: Eth, Net, Personal, Shh and Bzz.

    Returned as is, these are constructors.
    """
    return resolve_path(web3, "modules")


def utils(web3) -> Any:
    """Utility functions object of the host."""
    return resolve_path(web3, "utils")


def set_provider(web3, provider) -> Any:
    """Should be called to set provider.

    :param web3:
        Web3 instance

    :param provider:
        Provider from :py:func:`http_provider`, :py:func:`ipc_provider`
        or :py:func:`websocket_provider`
    """
    logger.info("Setting provider %s", get_provider_name(provider))
    return call(web3, "set-provider", [provider])


def providers(web3) -> Any:
    """Returns the current available provider classes."""
    return resolve_path(web3, "providers")


def given_provider(web3) -> Any:
    """Returns the provider the environment gave us, or None."""
    return resolve_path(web3, "givenProvider")


def current_provider(web3) -> Any:
    """Will contain the current provider, if one is set.

    Returns the provider set or None.
    """
    return resolve_path(web3, "currentProvider")


def reset(web3, keep_is_syncing: bool = False):
    """Reset the state of web3, everything except the provider manager.

    Uninstalls all filters and stops polling.

    :param keep_is_syncing:
        Uninstall filters but keep the ``web3.eth.isSyncing()`` polls
    """
    logger.info("Resetting web3, keep_is_syncing:%s", keep_is_syncing)
    call(web3, "reset", [keep_is_syncing])


def create_web3(web3_class, url: str) -> Any:
    """Creates a web3 instance using a WebSocket provider.

    :param web3_class:
        Host Web3 constructor

    :param url:
        WebSocket URL of the node, e.g. ``ws://localhost:8545/``
    """
    return web3_class(websocket_provider(web3_class, url))


def create_web3_from_env(web3_class, env_var: str = DEFAULT_JSON_RPC_ENV) -> Any:
    """Creates a web3 instance for the node configured in the environment.

    `http` and `https` URLs get an HTTP provider, `ws` and `wss` a WebSocket
    provider, anything else is treated as an IPC socket path.

    :raise ValueError:
        Environment variable not set
    """
    url = read_json_rpc_url(env_var)
    if url.startswith(("http://", "https://")):
        provider = http_provider(web3_class, url)
    elif url.startswith(("ws://", "wss://")):
        provider = websocket_provider(web3_class, url)
    else:
        provider = ipc_provider(web3_class, url)
    return web3_class(provider)


def batch_request(web3_class) -> Any:
    """Create a new batch request object."""
    constructor = resolve_path(web3_class, "BatchRequest")
    assert constructor is not None, f"{web3_class} has no BatchRequest"
    return constructor()


#: Returns the host library version, ``web3.version``.
#:
#: With a callback, asks the host through ``web3.getVersion(callback)``
version_api = property_or_callback("version")

#: Returns the client/node version
version_node = property_or_callback("version", "node")

#: Returns the network protocol version.
#:
#: "1" is Main Net or Local Net, "3" Ropsten, "4" Rinkeby, "42" Kovan
version_network = property_or_callback("version", "network")

#: Returns the hexadecimal Ethereum protocol version
version_ethereum = property_or_callback("version", "ethereum")

#: Returns the Whisper protocol version
version_whisper = property_or_callback("version", "whisper")
