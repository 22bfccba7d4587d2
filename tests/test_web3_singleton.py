from unittest.mock import patch

import pytest

import config
from utils.web3_singleton import Web3Singleton


@pytest.fixture(autouse=True)
def fresh_singleton():
    Web3Singleton.reset()
    yield
    Web3Singleton.reset()


def test_connects_once(monkeypatch):
    monkeypatch.setattr(config, "RPC_URL", "http://node:8545")
    with patch("utils.web3_singleton.Web3") as web3_cls:
        web3_cls.return_value.is_connected.return_value = True

        first = Web3Singleton.get_instance()
        second = Web3Singleton.get_instance()

    assert first is second
    web3_cls.HTTPProvider.assert_called_once()
    assert web3_cls.HTTPProvider.call_args.args[0] == "http://node:8545"


def test_unreachable_endpoint_raises():
    with patch("utils.web3_singleton.Web3") as web3_cls:
        web3_cls.return_value.is_connected.return_value = False

        with pytest.raises(ConnectionError):
            Web3Singleton.get_instance()

    assert Web3Singleton._instance is None
