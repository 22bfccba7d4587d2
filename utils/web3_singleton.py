"""
Singleton Web3 instance to ensure consistent usage across modules
"""
from web3 import Web3

from utils.logging_setup import logger
import config

class Web3Singleton:
    _instance = None

    @classmethod
    def get_instance(cls, force_reconnect=False):
        """Get the singleton Web3 instance, connecting if needed"""
        if cls._instance is None or force_reconnect:
            cls._instance = cls._connect()
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the cached connection"""
        cls._instance = None

    @classmethod
    def _connect(cls):
        """Connect to the configured RPC endpoint"""
        rpc = config.RPC_URL
        logger.info(f"Connecting to {rpc}")

        w3 = Web3(Web3.HTTPProvider(rpc, request_kwargs={
            'timeout': config.CONNECTION_TIMEOUT
        }))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to RPC endpoint {rpc}")

        logger.info(f"Connected to {rpc} (chain id {w3.eth.chain_id})")
        return w3

    @classmethod
    def to_checksum_address(cls, address):
        """Convert address to checksum format"""
        return Web3.to_checksum_address(address)

# Initialize web3 addresses with checksum format
def initialize_web3_addresses():
    """Initialize configured contract addresses with checksum format"""
    w3 = Web3Singleton.get_instance()

    for name in config.ADDRESS_SETTINGS:
        value = getattr(config, name)
        if value:
            setattr(config, name, Web3Singleton.to_checksum_address(value))

    return w3
