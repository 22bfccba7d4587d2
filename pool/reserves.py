from utils.helpers import print_reserves
from utils.signer import get_signer
from contracts.interfaces import get_pool_contract

def get_reserves(pool_address):
    """Read (reserve0, reserve1) from a pool"""
    pool = get_pool_contract(pool_address)
    reserve0, reserve1 = pool.functions.getReserves().call()
    return reserve0, reserve1

def check_pool_reserves(pool_address):
    """Print and return the reserves of a pool"""
    reserve0, reserve1 = get_reserves(pool_address)
    print_reserves("Pool Reserves", reserve0, reserve1)
    return {"reserve0": reserve0, "reserve1": reserve1}

def get_pool_info(pool_address, holder_address=None):
    """Read pool tokens, fee, reserves, LP supply and a holder's LP balance

    Args:
        pool_address: Pool address
        holder_address: LP holder (defaults to the signer)

    Returns:
        dict: Pool state snapshot
    """
    if holder_address is None:
        holder_address = get_signer().address

    pool = get_pool_contract(pool_address)
    reserve0, reserve1 = pool.functions.getReserves().call()

    return {
        "address": pool.address,
        "token0": pool.functions.token0().call(),
        "token1": pool.functions.token1().call(),
        "fee": pool.functions.fee().call(),
        "reserve0": reserve0,
        "reserve1": reserve1,
        "total_supply": pool.functions.totalSupply().call(),
        "liquidity_balance": pool.functions.balanceOf(holder_address).call()
    }
