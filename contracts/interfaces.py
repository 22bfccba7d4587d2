from utils.web3_singleton import Web3Singleton
from contracts.abis import TOKEN_ABI, POOL_ABI, FACTORY_ABI
import config

def get_token_contract(token_address):
    """Get token contract instance"""
    w3 = Web3Singleton.get_instance()
    return w3.eth.contract(address=w3.to_checksum_address(token_address), abi=TOKEN_ABI)

def get_pool_contract(pool_address):
    """Get pool contract instance"""
    w3 = Web3Singleton.get_instance()
    return w3.eth.contract(address=w3.to_checksum_address(pool_address), abi=POOL_ABI)

def get_factory_contract(factory_address=None):
    """Get factory contract instance, defaulting to FACTORY_ADDRESS"""
    if factory_address is None:
        factory_address = config.require_address('FACTORY_ADDRESS')

    w3 = Web3Singleton.get_instance()
    return w3.eth.contract(address=w3.to_checksum_address(factory_address), abi=FACTORY_ABI)
