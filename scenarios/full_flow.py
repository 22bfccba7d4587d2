from utils.logging_setup import logger
from utils.helpers import format_ether, parse_ether, print_reserves
from utils.signer import get_signer
from deployment.deploy import deploy_token, deploy_factory, create_pool
from contracts.interfaces import get_pool_contract, get_token_contract
from pool.liquidity import add_liquidity
from pool.swap import execute_swap
import config

def deploy_and_test():
    """Deploy two tokens, a factory and a pool, then add liquidity and swap

    Every step waits for the previous one to be mined. Reserves before and after
    the swap and the signer's final balances are printed.

    Returns:
        dict: factory, token_a, token_b and pool addresses
    """
    logger.info("Starting AMM deployment and testing...")

    signer = get_signer()
    logger.info(f"Using account: {signer.address}")

    try:
        # Step 1: test tokens
        logger.info("Step 1: Deploying test tokens...")
        token_a_address = deploy_token("Token A", "TKNA", signer)
        token_b_address = deploy_token("Token B", "TKNB", signer)

        # Step 2: factory
        logger.info("Step 2: Deploying AMM factory...")
        factory_address = deploy_factory(signer)

        # Step 3: pool
        logger.info("Step 3: Creating pool...")
        pool_address = create_pool(
            factory_address,
            token_a_address,
            token_b_address,
            config.FEE_TIER,
            signer
        )
        pool = get_pool_contract(pool_address)

        # Step 4: liquidity
        logger.info("Step 4: Adding liquidity...")
        liquidity_amount = parse_ether(config.LIQUIDITY_AMOUNT)
        add_liquidity(
            pool_address,
            token_a_address,
            token_b_address,
            liquidity_amount,
            liquidity_amount,
            signer
        )

        reserve0, reserve1 = pool.functions.getReserves().call()
        print_reserves("Pool Reserves", reserve0, reserve1)

        # Step 5: swap token A for token B
        logger.info("Step 5: Testing swap...")
        execute_swap(
            pool_address,
            token_a_address,
            parse_ether(config.SWAP_AMOUNT),
            reserve0,
            reserve1,
            signer
        )

        final_reserve0, final_reserve1 = pool.functions.getReserves().call()
        print_reserves("Final Pool Reserves", final_reserve0, final_reserve1)

        balance_a = get_token_contract(token_a_address).functions.balanceOf(signer.address).call()
        balance_b = get_token_contract(token_b_address).functions.balanceOf(signer.address).call()
        print("Your Token Balances:")
        print(f"   Token A: {format_ether(balance_a)}")
        print(f"   Token B: {format_ether(balance_b)}")

        logger.info("Deployment and testing completed successfully!")

        return {
            "factory": factory_address,
            "token_a": token_a_address,
            "token_b": token_b_address,
            "pool": pool_address
        }
    except Exception as e:
        logger.error(f"Error during deployment/testing: {e}")
        raise
