import logging

from eth_interop.utils import get_url_domain, setup_console_logging


def test_get_url_domain():
    assert get_url_domain("https://polygon-rpc.com/api-key") == "polygon-rpc.com"
    assert get_url_domain("http://localhost:8545") == "localhost:8545"


def test_setup_console_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")
    logger = setup_console_logging()
    assert logger is logging.getLogger()
    assert logging.getLogger("urllib3.connectionpool").level == logging.WARNING
