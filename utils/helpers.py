from decimal import Decimal, localcontext

from web3 import Web3


def parse_ether(value):
    """Convert a whole-token amount (number or decimal string) to wei

    Raises:
        ValueError: if the amount has more precision than 1 wei
    """
    # str() keeps floats like 0.1 from dragging binary noise into the conversion
    amount = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = 999
        if (amount * 10**18) % 1 != 0:
            raise ValueError(f"Amount {value} has more than 18 decimal places")
    return Web3.to_wei(amount, 'ether')


def format_ether(wei):
    """Convert a wei amount to ether units"""
    return Web3.from_wei(wei, 'ether')


def print_banner():
    print("=" * 60)
    print(" AMM Interaction Console")
    print("=" * 60)


def print_reserves(title, reserve0, reserve1):
    print(f"{title}:")
    print(f"   Reserve 0: {format_ether(reserve0)}")
    print(f"   Reserve 1: {format_ether(reserve1)}")
