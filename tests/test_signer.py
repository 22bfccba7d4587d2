from unittest.mock import MagicMock

import pytest

import config
from utils.signer import Signer, get_signer


def test_signer_from_private_key(w3, monkeypatch):
    monkeypatch.setattr(config, "PRIVATE_KEY", "0xkey")
    w3.eth.account.from_key.return_value = MagicMock(address="0xFromKey")

    signer = get_signer()

    w3.eth.account.from_key.assert_called_once_with("0xkey")
    assert signer.address == "0xFromKey"
    assert signer.is_local


def test_signer_falls_back_to_node_account(w3, monkeypatch):
    monkeypatch.setattr(config, "PRIVATE_KEY", None)
    w3.eth.accounts = ["0xnode0", "0xnode1"]

    signer = get_signer()

    assert signer.address == "0xnode0"
    assert not signer.is_local


def test_no_signer_available(w3, monkeypatch):
    monkeypatch.setattr(config, "PRIVATE_KEY", None)
    w3.eth.accounts = []

    with pytest.raises(ValueError):
        get_signer()


def test_repr_hides_key():
    assert "0xkey" not in repr(Signer("0xabc", "0xkey"))
