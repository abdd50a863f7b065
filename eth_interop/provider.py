"""Create transport providers through the host library.

The host library owns the provider classes. We only find the right
constructor and call it with the endpoint. The created provider is handed
to :py:func:`eth_interop.core.set_provider` or to the Web3 constructor.

Both web3.js class names (``HttpProvider``) and web3.py class names
(``HTTPProvider``) are probed, so this works with web3.py too:

.. code-block:: python

    from web3 import Web3
    from eth_interop.provider import http_provider

    provider = http_provider(Web3, "http://localhost:8545")

"""

import enum
import logging
import os
from typing import Any

from eth_interop.dispatch import resolve
from eth_interop.utils import get_url_domain

logger = logging.getLogger(__name__)


#: Environment variable read by :py:func:`read_json_rpc_url`
DEFAULT_JSON_RPC_ENV = "JSON_RPC_URL"


class ProviderNotAvailable(LookupError):
    """The host library does not ship a provider class for this transport."""


class ProviderKind(enum.Enum):
    """Supported transports."""

    http = "http"
    ipc = "ipc"
    websocket = "websocket"

    @property
    def class_names(self) -> tuple[str, ...]:
        """Host class names to probe, web3.js names first."""
        return PROVIDER_CLASS_NAMES[self]


#: Provider constructor names per transport
PROVIDER_CLASS_NAMES = {
    ProviderKind.http: ("HttpProvider", "HTTPProvider"),
    ProviderKind.ipc: ("IpcProvider", "IPCProvider"),
    ProviderKind.websocket: ("WebsocketProvider", "WebSocketProvider", "LegacyWebSocketProvider"),
}


def get_provider_class(host_library: Any, kind: ProviderKind) -> type:
    """Find the provider constructor on the host library.

    The ``providers`` namespace is looked at first, then the library object itself.

    :raise ProviderNotAvailable:
        No candidate class found
    """
    assert isinstance(kind, ProviderKind), f"Got {kind}"

    namespaces = [resolve(host_library, "providers"), host_library]
    for namespace in namespaces:
        for class_name in kind.class_names:
            constructor = resolve(namespace, class_name)
            if constructor is not None and callable(constructor):
                return constructor

    raise ProviderNotAvailable(f"{host_library} does not have any of {kind.class_names}")


def create_provider(host_library: Any, kind: ProviderKind, endpoint: str) -> Any:
    """Create a provider for an endpoint.

    The endpoint is not validated, the host library does that.

    :param host_library:
        Web3 class or module carrying the provider classes

    :param kind:
        Transport

    :param endpoint:
        HTTP or WebSocket URL, or IPC socket path

    :return:
        Opaque provider object
    """
    constructor = get_provider_class(host_library, kind)
    provider = constructor(endpoint)
    logger.info("Created %s provider %s", kind.value, get_provider_name(provider))
    return provider


def http_provider(host_library: Any, uri: str) -> Any:
    """Create HTTP provider."""
    return create_provider(host_library, ProviderKind.http, uri)


def ipc_provider(host_library: Any, path: str) -> Any:
    """Create IPC socket provider."""
    return create_provider(host_library, ProviderKind.ipc, path)


def websocket_provider(host_library: Any, uri: str) -> Any:
    """Create WebSocket provider."""
    return create_provider(host_library, ProviderKind.websocket, uri)


def get_provider_name(provider: Any) -> str:
    """Get loggable name of a provider.

    Strips out API keys from the URL.

    :return:
        Provider URL's domain name if available, IPC path for IPC providers.
    """
    for attr in ("endpoint_uri", "host", "url"):
        uri = getattr(provider, attr, None)
        if isinstance(uri, str) and "://" in uri:
            return get_url_domain(uri)

    for attr in ("ipc_path", "path"):
        path = getattr(provider, attr, None)
        if path:
            return str(path)

    return str(provider)


def read_json_rpc_url(env_var: str = DEFAULT_JSON_RPC_ENV) -> str:
    """Read the node endpoint from an environment variable.

    :raises ValueError: If the environment variable is not set.
    """
    json_rpc_url = os.environ.get(env_var)
    if not json_rpc_url:
        raise ValueError(f"Environment variable {env_var} is not set")
    return json_rpc_url
