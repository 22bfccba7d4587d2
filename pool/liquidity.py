from utils.logging_setup import logger
from utils.helpers import parse_ether
from utils.signer import get_signer
from utils.transactions import send_transaction
from contracts.interfaces import get_pool_contract, get_token_contract

def approve_token(token_address, spender_address, amount, signer):
    """Approve a spender for a raw token amount and wait for the receipt"""
    token = get_token_contract(token_address)
    return send_transaction(
        token.functions.approve(spender_address, amount),
        signer,
        f"Approve {token_address}"
    )

def add_liquidity(pool_address, token_a_address, token_b_address, amount0, amount1, signer):
    """Approve both sides and deposit raw token amounts into the pool

    Returns:
        The addLiquidity receipt
    """
    pool = get_pool_contract(pool_address)

    approve_token(token_a_address, pool.address, amount0, signer)
    approve_token(token_b_address, pool.address, amount1, signer)
    logger.info("Tokens approved")

    receipt = send_transaction(
        pool.functions.addLiquidity(amount0, amount1, signer.address),
        signer,
        "Add liquidity"
    )
    logger.info("Liquidity added")
    return receipt

def add_liquidity_manual(pool_address, token_a_address, token_b_address, amount0, amount1):
    """Add liquidity using whole-token amounts

    Args:
        pool_address: Pool address
        token_a_address: Token deposited as amount0
        token_b_address: Token deposited as amount1
        amount0: Whole tokens of token A
        amount1: Whole tokens of token B
    """
    signer = get_signer()
    receipt = add_liquidity(
        pool_address,
        token_a_address,
        token_b_address,
        parse_ether(amount0),
        parse_ether(amount1),
        signer
    )
    logger.info("Liquidity added successfully")
    return receipt

def remove_liquidity_manual(pool_address, liquidity):
    """Burn pool shares (whole units) and return the underlying tokens to the signer"""
    signer = get_signer()
    pool = get_pool_contract(pool_address)

    receipt = send_transaction(
        pool.functions.removeLiquidity(parse_ether(liquidity), signer.address),
        signer,
        "Remove liquidity"
    )
    logger.info("Liquidity removed successfully")
    return receipt
