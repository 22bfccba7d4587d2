from utils.logging_setup import logger
from utils.helpers import format_ether
from utils.signer import get_signer
from contracts.interfaces import get_token_contract

def check_token_balance(token_address, user_address=None):
    """Print and return a holder's balance of a token

    Args:
        token_address: Token address
        user_address: Holder address (defaults to the signer)

    Returns:
        int: Raw balance in token units
    """
    if user_address is None:
        user_address = get_signer().address

    token = get_token_contract(token_address)
    balance = token.functions.balanceOf(user_address).call()
    name = token.functions.name().call()

    print(f"{name} balance for {user_address}: {format_ether(balance)}")
    return balance

def get_token_info(token_address):
    """Fetch token metadata

    Returns:
        dict: name, symbol, decimals, total supply and address
    """
    token = get_token_contract(token_address)

    name = token.functions.name().call()
    symbol = token.functions.symbol().call()
    decimals = token.functions.decimals().call()
    total_supply = token.functions.totalSupply().call()

    logger.info(f"Token: {symbol} ({name}), Decimals: {decimals}, Total Supply: {total_supply}")
    return {
        "name": name,
        "symbol": symbol,
        "decimals": decimals,
        "total_supply": total_supply,
        "address": token.address
    }
