import argparse
import json
import sys

# Initialize logger first
from utils.logging_setup import logger

from utils.web3_singleton import initialize_web3_addresses
from utils.helpers import print_banner
import config

def initialize_system():
    """Connect to the chain and normalize configured addresses"""
    print_banner()

    try:
        initialize_web3_addresses()
    except Exception as e:
        logger.error(f"Failed to initialize Web3 connection: {e}")
        return False

    logger.info("System initialization complete")
    return True

def build_parser():
    parser = argparse.ArgumentParser(description='AMM interaction console')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('deploy-and-test', help='Deploy tokens, factory and pool, add liquidity and swap')

    reserves = subparsers.add_parser('reserves', help='Check pool reserves')
    reserves.add_argument('--pool', help='Pool address (defaults to POOL_ADDRESS)')

    balance = subparsers.add_parser('balance', help='Check a token balance')
    balance.add_argument('--token', help='Token address (defaults to TOKEN_A_ADDRESS)')
    balance.add_argument('--user', help='Holder address (defaults to the signer)')

    add = subparsers.add_parser('add-liquidity', help='Approve and deposit liquidity')
    add.add_argument('amount0', help='Whole tokens of token A')
    add.add_argument('amount1', help='Whole tokens of token B')
    add.add_argument('--pool', help='Pool address (defaults to POOL_ADDRESS)')
    add.add_argument('--token-a', help='Token A address (defaults to TOKEN_A_ADDRESS)')
    add.add_argument('--token-b', help='Token B address (defaults to TOKEN_B_ADDRESS)')

    remove = subparsers.add_parser('remove-liquidity', help='Burn pool shares')
    remove.add_argument('liquidity', help='Pool shares to burn (whole units)')
    remove.add_argument('--pool', help='Pool address (defaults to POOL_ADDRESS)')

    swap = subparsers.add_parser('swap', help='Swap either pool token for the other')
    swap.add_argument('amount', help='Whole tokens of the input token to swap')
    swap.add_argument('--pool', help='Pool address (defaults to POOL_ADDRESS)')
    swap.add_argument('--token-in', help='Input token address (defaults to TOKEN_A_ADDRESS)')

    info = subparsers.add_parser('pool-info', help='Show pool tokens, fee, reserves and LP balance')
    info.add_argument('--pool', help='Pool address (defaults to POOL_ADDRESS)')

    subparsers.add_parser('console', help='Start an interactive console with all helpers loaded')

    return parser

def run_command(args):
    """Dispatch a parsed command"""
    # Imported here so the parser works without pulling in every module
    from scenarios.full_flow import deploy_and_test
    from pool.reserves import check_pool_reserves, get_pool_info
    from pool.liquidity import add_liquidity_manual, remove_liquidity_manual
    from pool.swap import swap_manual
    from tokendata.balances import check_token_balance

    if args.command == 'deploy-and-test':
        addresses = deploy_and_test()
        print("\n=== DEPLOYED ADDRESSES ===")
        print(json.dumps(addresses, indent=2))
    elif args.command == 'reserves':
        check_pool_reserves(args.pool or config.require_address('POOL_ADDRESS'))
    elif args.command == 'balance':
        check_token_balance(args.token or config.require_address('TOKEN_A_ADDRESS'), args.user)
    elif args.command == 'add-liquidity':
        add_liquidity_manual(
            args.pool or config.require_address('POOL_ADDRESS'),
            args.token_a or config.require_address('TOKEN_A_ADDRESS'),
            args.token_b or config.require_address('TOKEN_B_ADDRESS'),
            args.amount0,
            args.amount1
        )
    elif args.command == 'remove-liquidity':
        remove_liquidity_manual(args.pool or config.require_address('POOL_ADDRESS'), args.liquidity)
    elif args.command == 'swap':
        amount_out = swap_manual(
            args.pool or config.require_address('POOL_ADDRESS'),
            args.token_in or config.require_address('TOKEN_A_ADDRESS'),
            args.amount
        )
        print(f"Requested output: {amount_out}")
    elif args.command == 'pool-info':
        info = get_pool_info(args.pool or config.require_address('POOL_ADDRESS'))
        print("\n=== POOL INFO ===")
        print(json.dumps(info, indent=2, default=str))
    elif args.command == 'console':
        from console import start_console
        start_console()

def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    # The console connects lazily on the first helper call
    if args.command != 'console' and not initialize_system():
        logger.error("System initialization failed")
        return 1

    try:
        run_command(args)
    except Exception as e:
        logger.error(f"Command {args.command} failed: {e}")
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
