"""Provider construction through the host library."""

import pytest
import web3 as web3_module
from web3 import HTTPProvider, IPCProvider, Web3

from eth_interop.provider import (
    ProviderKind,
    ProviderNotAvailable,
    create_provider,
    get_provider_name,
    http_provider,
    ipc_provider,
    read_json_rpc_url,
    websocket_provider,
)

from tests.fake_web3 import FakeWeb3, HttpProvider, IpcProvider, WebsocketProvider


def test_web3js_style_providers():
    """Providers are looked up in the providers namespace."""
    assert isinstance(http_provider(FakeWeb3, "http://localhost:8545"), HttpProvider)
    assert isinstance(ipc_provider(FakeWeb3, "/tmp/geth.ipc"), IpcProvider)
    assert isinstance(websocket_provider(FakeWeb3, "ws://localhost:8546"), WebsocketProvider)


def test_web3py_providers():
    """web3.py class names work too, on the Web3 class or the module."""
    provider = http_provider(Web3, "http://localhost:8545")
    assert isinstance(provider, HTTPProvider)
    assert provider.endpoint_uri == "http://localhost:8545"

    provider = create_provider(web3_module, ProviderKind.http, "http://localhost:8545")
    assert isinstance(provider, HTTPProvider)

    provider = ipc_provider(Web3, "/tmp/geth.ipc")
    assert isinstance(provider, IPCProvider)
    assert get_provider_name(provider).endswith("geth.ipc")


def test_no_provider_class():
    with pytest.raises(ProviderNotAvailable):
        http_provider(object(), "http://localhost:8545")


def test_provider_name_hides_api_key():
    provider = HTTPProvider("https://mainnet.infura.io/v3/secret-api-key")
    assert get_provider_name(provider) == "mainnet.infura.io"

    provider = HttpProvider("http://localhost:8545/secret")
    assert get_provider_name(provider) == "localhost:8545"


def test_read_json_rpc_url(monkeypatch):
    monkeypatch.setenv("JSON_RPC_URL", "http://localhost:8545")
    assert read_json_rpc_url() == "http://localhost:8545"

    monkeypatch.delenv("JSON_RPC_URL")
    with pytest.raises(ValueError):
        read_json_rpc_url()
