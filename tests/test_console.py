from unittest.mock import patch

import console


def test_namespace_exposes_helpers():
    namespace = console.build_namespace()
    for name in ("deploy_and_test", "check_pool_reserves", "check_token_balance", "add_liquidity_manual"):
        assert callable(namespace[name])
    assert namespace["parse_ether"]("1") == 10**18


def test_banner_lists_functions():
    banner = console.build_banner()
    for name in console.CONSOLE_FUNCTIONS:
        assert f"{name}(" in banner


def test_start_console_runs_interpreter():
    with patch("console.code.interact") as interact:
        console.start_console()
    kwargs = interact.call_args.kwargs
    assert "deploy_and_test" in kwargs["local"]
    assert kwargs["banner"].startswith("AMM Interaction Console loaded!")
