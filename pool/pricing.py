"""
Client-side quote for a constant-product swap.

The pool contract does its own accounting; this only sizes the ``amount1Out``
argument the console passes to ``swap``. All values are integer token units
(wei) and every division floors.
"""

# 0.3% fee tier: output keeps 997/1000
SWAP_FEE_NUMERATOR = 997
SWAP_FEE_DENOMINATOR = 1000


def get_expected_output(reserve_in, reserve_out, amount_in):
    """Output of the x*y=k curve before fees: reserve_out * amount_in / (reserve_in + amount_in)

    >>> get_expected_output(1000, 1000, 100)
    90
    """
    if reserve_in < 0 or reserve_out < 0 or amount_in < 0:
        raise ValueError("Reserves and input amount must be non-negative")
    if reserve_in + amount_in == 0:
        raise ValueError("Cannot quote a swap against an empty reserve with zero input")

    return reserve_out * amount_in // (reserve_in + amount_in)


def apply_swap_fee(amount, numerator=SWAP_FEE_NUMERATOR, denominator=SWAP_FEE_DENOMINATOR):
    """Deduct the swap fee from an output amount

    >>> apply_swap_fee(90)
    89
    """
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    return amount * numerator // denominator


def quote_swap(reserve_in, reserve_out, amount_in):
    """Return (expected_output, fee_adjusted_output) for a swap"""
    expected_output = get_expected_output(reserve_in, reserve_out, amount_in)
    return expected_output, apply_swap_fee(expected_output)
