from utils.logging_setup import logger
from utils.helpers import parse_ether
from utils.transactions import send_transaction
from utils.web3_singleton import Web3Singleton
from contracts.artifacts import get_contract_factory
from contracts.interfaces import get_factory_contract
import config

ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'

def deploy_contract(contract_name, signer, *constructor_args):
    """Deploy a compiled contract and return its address

    Args:
        contract_name: artifact name, e.g. TestERC20
        signer: Signer paying for the deployment
        *constructor_args: constructor arguments in ABI order

    Returns:
        str: checksum address of the new contract
    """
    contract_factory = get_contract_factory(contract_name)
    receipt = send_transaction(
        contract_factory.constructor(*constructor_args),
        signer,
        f"Deploy {contract_name}"
    )
    return Web3Singleton.to_checksum_address(receipt['contractAddress'])

def deploy_token(name, symbol, signer, decimals=None, initial_supply=None):
    """Deploy a test ERC20 token with a fixed supply minted to the deployer

    Args:
        name: Token name
        symbol: Token symbol
        signer: Deploying signer
        decimals: Token decimals (defaults to config value)
        initial_supply: Supply in whole tokens (defaults to config value)

    Returns:
        str: Token address
    """
    if decimals is None:
        decimals = config.TOKEN_DECIMALS
    if initial_supply is None:
        initial_supply = config.INITIAL_SUPPLY

    token_address = deploy_contract(
        config.TOKEN_CONTRACT_NAME,
        signer,
        name,
        symbol,
        decimals,
        parse_ether(initial_supply)
    )
    logger.info(f"{name} deployed at: {token_address}")
    return token_address

def deploy_factory(signer):
    """Deploy the pool factory and return its address"""
    factory_address = deploy_contract(config.FACTORY_CONTRACT_NAME, signer)
    logger.info(f"Factory deployed at: {factory_address}")
    return factory_address

def create_pool(factory_address, token_a_address, token_b_address, fee, signer):
    """Create a pool through the factory and read its address back

    Returns:
        str: Pool address
    """
    factory = get_factory_contract(factory_address)

    send_transaction(
        factory.functions.createPool(token_a_address, token_b_address, fee),
        signer,
        "Create pool"
    )

    pool_address = factory.functions.getPool(token_a_address, token_b_address, fee).call()
    logger.info(f"Pool created at: {pool_address}")
    return pool_address

def find_pool(token_a_address, token_b_address, fee=None, factory_address=None):
    """Look up an existing pool

    Returns:
        str: Pool address or None if the factory has no such pool
    """
    if fee is None:
        fee = config.FEE_TIER

    factory = get_factory_contract(factory_address)
    pool_address = factory.functions.getPool(
        Web3Singleton.to_checksum_address(token_a_address),
        Web3Singleton.to_checksum_address(token_b_address),
        fee
    ).call()

    if pool_address == ZERO_ADDRESS:
        return None

    return pool_address

def get_factory_info(factory_address=None, fee=None):
    """Read the factory owner and the tick spacing enabled for a fee tier"""
    if fee is None:
        fee = config.FEE_TIER

    factory = get_factory_contract(factory_address)
    return {
        "address": factory.address,
        "owner": factory.functions.owner().call(),
        "fee": fee,
        "tick_spacing": factory.functions.feeAmountTickSpacing(fee).call()
    }
