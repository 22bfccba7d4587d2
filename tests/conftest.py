import os

# Keep test runs from writing timestamped log files
os.environ.setdefault("LOG_TO_FILE", "false")

from unittest.mock import MagicMock, patch

import pytest

from utils.signer import Signer
from addresses import SIGNER_ADDRESS


@pytest.fixture
def signer():
    return Signer(SIGNER_ADDRESS)


@pytest.fixture
def w3():
    """A mocked Web3 connection returned by the singleton"""
    w3 = MagicMock()
    w3.eth.chain_id = 31337
    w3.to_checksum_address.side_effect = lambda address: address
    with patch("utils.web3_singleton.Web3Singleton.get_instance", return_value=w3):
        yield w3
