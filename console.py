"""
Interactive console with the AMM helpers preloaded as plain functions
"""
import code

from scenarios.full_flow import deploy_and_test
from pool.reserves import check_pool_reserves, get_pool_info
from pool.liquidity import add_liquidity_manual, remove_liquidity_manual
from pool.swap import swap_manual
from tokendata.balances import check_token_balance, get_token_info
from deployment.deploy import find_pool, get_factory_info
from utils.helpers import format_ether, parse_ether
import config

CONSOLE_FUNCTIONS = {
    "deploy_and_test": (deploy_and_test, "deploy_and_test(): Complete deployment and testing"),
    "check_pool_reserves": (check_pool_reserves, "check_pool_reserves(pool_address): Check pool reserves"),
    "check_token_balance": (check_token_balance, "check_token_balance(token_address, user_address): Check token balance"),
    "add_liquidity_manual": (add_liquidity_manual, "add_liquidity_manual(pool_address, token_a_address, token_b_address, amount0, amount1): Add liquidity"),
    "remove_liquidity_manual": (remove_liquidity_manual, "remove_liquidity_manual(pool_address, liquidity): Remove liquidity"),
    "swap_manual": (swap_manual, "swap_manual(pool_address, token_in_address, amount_in): Swap either pool token for the other"),
    "get_pool_info": (get_pool_info, "get_pool_info(pool_address): Pool tokens, fee, reserves and LP balance"),
    "get_token_info": (get_token_info, "get_token_info(token_address): Token metadata"),
    "find_pool": (find_pool, "find_pool(token_a_address, token_b_address, fee): Factory pool lookup"),
    "get_factory_info": (get_factory_info, "get_factory_info(factory_address, fee): Factory owner and tick spacing"),
}

def build_namespace():
    """Names available at the console prompt"""
    namespace = {name: func for name, (func, _) in CONSOLE_FUNCTIONS.items()}
    namespace.update({
        "format_ether": format_ether,
        "parse_ether": parse_ether,
        "config": config,
    })
    return namespace

def build_banner():
    lines = ["AMM Interaction Console loaded!", "Available functions:"]
    lines.extend(f"   - {usage}" for _, usage in CONSOLE_FUNCTIONS.values())
    return "\n".join(lines)

def start_console():
    """Start an interactive session with the helpers in scope"""
    code.interact(banner=build_banner(), local=build_namespace(), exitmsg="")
