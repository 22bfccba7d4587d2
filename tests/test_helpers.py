from decimal import Decimal

import pytest

from utils.helpers import format_ether, parse_ether, print_reserves


def test_parse_whole_tokens():
    assert parse_ether(1000) == 1000 * 10**18
    assert parse_ether("1000000") == 10**24


def test_parse_fractional_tokens():
    assert parse_ether("0.5") == 5 * 10**17
    assert parse_ether(0.1) == 10**17


def test_format_ether():
    assert format_ether(10**18) == Decimal(1)
    assert format_ether(1500000000000000000) == Decimal("1.5")


def test_print_reserves(capsys):
    print_reserves("Pool Reserves", 10**21, 2 * 10**21)
    out = capsys.readouterr().out
    assert "Pool Reserves:" in out
    assert "Reserve 0: 1000" in out
    assert "Reserve 1: 2000" in out


def test_parse_rejects_sub_wei_precision():
    with pytest.raises(ValueError):
        parse_ether("0.0000000000000000001")
    with pytest.raises(ValueError):
        parse_ether("1.0000000000000000005")


def test_parse_accepts_exact_wei_and_large_supply():
    assert parse_ether("0.000000000000000001") == 1
    assert parse_ether("1000000000000000") == 10**33
