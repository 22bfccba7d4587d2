"""
Signing identity used for every state-changing call
"""
from utils.logging_setup import logger
from utils.web3_singleton import Web3Singleton
import config


class Signer:
    """An account address plus the key that signs for it.

    When ``private_key`` is None the node holds the key (an unlocked dev
    account) and transactions are sent with ``eth_sendTransaction``.
    """

    def __init__(self, address, private_key=None):
        self.address = address
        self.private_key = private_key

    @property
    def is_local(self):
        return self.private_key is not None

    def __repr__(self):
        kind = "local" if self.is_local else "node"
        return f"Signer({self.address}, {kind})"


def get_signer():
    """Get the signer from PRIVATE_KEY, falling back to the node's first account

    Returns:
        Signer: signing identity

    Raises:
        ValueError: if no key is configured and the node exposes no accounts
    """
    w3 = Web3Singleton.get_instance()

    if config.PRIVATE_KEY:
        account = w3.eth.account.from_key(config.PRIVATE_KEY)
        return Signer(account.address, config.PRIVATE_KEY)

    accounts = w3.eth.accounts
    if not accounts:
        raise ValueError("PRIVATE_KEY is not set and the node exposes no unlocked accounts")

    logger.info("PRIVATE_KEY not set, using the node's first account")
    return Signer(w3.to_checksum_address(accounts[0]))
