from utils.logging_setup import logger
from utils.helpers import format_ether, parse_ether
from utils.signer import get_signer
from utils.transactions import send_transaction
from utils.web3_singleton import Web3Singleton
from contracts.interfaces import get_pool_contract
from pool.liquidity import approve_token
from pool.pricing import quote_swap

def execute_swap(pool_address, token_in_address, amount_in, reserve0, reserve1, signer, zero_for_one=True):
    """Swap one pool token for the other against known reserves

    The input token is approved to the pool, then ``swap`` is called with the
    fee-adjusted constant-product output on the opposite side:
    ``swap(0, amount1Out, signer)`` when token0 goes in, otherwise
    ``swap(amount0Out, 0, signer)``.

    Returns:
        int: output amount requested from the pool
    """
    approve_token(token_in_address, pool_address, amount_in, signer)

    if zero_for_one:
        reserve_in, reserve_out = reserve0, reserve1
    else:
        reserve_in, reserve_out = reserve1, reserve0

    expected_output, amount_out = quote_swap(reserve_in, reserve_out, amount_in)
    logger.info(f"Expected output: {format_ether(expected_output)}")

    if zero_for_one:
        amount0_out, amount1_out = 0, amount_out
    else:
        amount0_out, amount1_out = amount_out, 0

    pool = get_pool_contract(pool_address)
    send_transaction(
        pool.functions.swap(amount0_out, amount1_out, signer.address),
        signer,
        "Swap"
    )
    logger.info("Swap completed")
    return amount_out

def swap_manual(pool_address, token_in_address, amount_in):
    """Swap a whole-token amount of either pool token for the other at current reserves

    Raises:
        ValueError: if token_in_address is neither token0 nor token1 of the pool
    """
    signer = get_signer()
    pool = get_pool_contract(pool_address)

    token_in = Web3Singleton.to_checksum_address(token_in_address)
    token0 = Web3Singleton.to_checksum_address(pool.functions.token0().call())
    token1 = Web3Singleton.to_checksum_address(pool.functions.token1().call())

    if token_in == token0:
        zero_for_one = True
    elif token_in == token1:
        zero_for_one = False
    else:
        raise ValueError(f"Token {token_in} is not part of pool {pool.address}")

    reserve0, reserve1 = pool.functions.getReserves().call()

    return execute_swap(
        pool.address,
        token_in,
        parse_ether(amount_in),
        reserve0,
        reserve1,
        signer,
        zero_for_one=zero_for_one
    )
