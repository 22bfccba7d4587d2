from unittest.mock import patch

import pytest

import config
import main
from addresses import POOL, TOKEN_A


@pytest.fixture
def initialized():
    with patch("main.initialize_system", return_value=True):
        yield


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args([])


def test_parser_add_liquidity():
    args = main.build_parser().parse_args(["add-liquidity", "10", "20", "--pool", POOL])
    assert (args.command, args.amount0, args.amount1, args.pool) == ("add-liquidity", "10", "20", POOL)


def test_initialization_failure_exits_nonzero():
    with patch("main.initialize_system", return_value=False):
        assert main.main(["reserves", "--pool", POOL]) == 1


def test_reserves_command(initialized):
    with patch("pool.reserves.check_pool_reserves") as check:
        assert main.main(["reserves", "--pool", POOL]) == 0
    check.assert_called_once_with(POOL)


def test_balance_defaults_to_configured_token(initialized, monkeypatch):
    monkeypatch.setattr(config, "TOKEN_A_ADDRESS", TOKEN_A)
    with patch("tokendata.balances.check_token_balance") as check:
        assert main.main(["balance"]) == 0
    check.assert_called_once_with(TOKEN_A, None)


def test_missing_placeholder_fails(initialized, monkeypatch, caplog):
    monkeypatch.setattr(config, "POOL_ADDRESS", None)
    assert main.main(["reserves"]) == 1
    assert "POOL_ADDRESS" in caplog.text


def test_command_failure_exits_nonzero(initialized):
    with patch("scenarios.full_flow.deploy_and_test", side_effect=RuntimeError("boom")):
        assert main.main(["deploy-and-test"]) == 1


def test_console_skips_eager_connection():
    with patch("main.initialize_system") as init, \
            patch("console.start_console") as start:
        assert main.main(["console"]) == 0
    init.assert_not_called()
    start.assert_called_once_with()
