from __future__ import annotations

import pytest

from dex_sdk import (
    BUSD,
    ETHER,
    NATIVE,
    STABLECOINS,
    USDT,
    WETH,
    ChainId,
    IncompleteChainTable,
    Token,
    currency_equals,
    get_tokens_for_chain,
    native_currency,
    stablecoin,
    wrapped_native,
)
from dex_sdk.config.chains import chain_table


@pytest.mark.parametrize("table", [WETH, USDT, BUSD, NATIVE])
def test_tables_cover_every_chain(table) -> None:
    assert set(table) == set(ChainId)


def test_weth_entries_match_their_chain() -> None:
    for chain_id, token in WETH.items():
        assert isinstance(token, Token)
        assert token.chain_id is chain_id
        assert token.decimals == 18


def test_weth_mainnet() -> None:
    weth = WETH[ChainId.MAINNET]
    assert weth.address == "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
    assert weth.symbol == "WETH"
    assert WETH[ChainId.BSC_MAINNET].symbol == "WBNB"
    assert wrapped_native(1) is weth


def test_wrapped_native_is_not_native() -> None:
    assert not currency_equals(WETH[ChainId.MAINNET], NATIVE[ChainId.MAINNET])


def test_ropsten_and_rinkeby_weth_share_address_but_differ() -> None:
    ropsten = WETH[ChainId.ROPSTEN]
    rinkeby = WETH[ChainId.RINKEBY]

    assert ropsten.address == rinkeby.address
    assert not ropsten.equals(rinkeby)


def test_stablecoins_use_empty_string_when_not_deployed() -> None:
    assert USDT[ChainId.MAINNET] == ""
    assert BUSD[ChainId.HECO_TESTNET] == ""
    assert USDT[ChainId.BSC_MAINNET] == "0x55d398326f99059fF775485246999027B3197955"
    assert stablecoin(USDT, ChainId.MAINNET) is None
    assert stablecoin(BUSD, 56) == "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56"


def test_native_currencies_are_shared_singletons() -> None:
    assert NATIVE[ChainId.MAINNET] is ETHER
    assert NATIVE[ChainId.KOVAN] is ETHER
    assert NATIVE[ChainId.BSC_MAINNET] is NATIVE[ChainId.BSC_TESTNET]
    assert native_currency(256).symbol == "HT"
    assert currency_equals(native_currency(56), native_currency(97))
    assert not currency_equals(native_currency(1), native_currency(56))


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        WETH[ChainId.MAINNET] = WETH[ChainId.KOVAN]
    with pytest.raises(TypeError):
        USDT[ChainId.MAINNET] = "0x"


def test_get_tokens_for_chain() -> None:
    bsc = get_tokens_for_chain(ChainId.BSC_MAINNET)
    assert [token.symbol for token in bsc] == ["WBNB", "USDT", "BUSD"]
    assert all(token.chain_id is ChainId.BSC_MAINNET for token in bsc)

    assert get_tokens_for_chain(1) == [WETH[ChainId.MAINNET]]


def test_chain_table_rejects_missing_chain() -> None:
    entries = {chain_id: "" for chain_id in ChainId if chain_id is not ChainId.KOVAN}
    with pytest.raises(IncompleteChainTable, match="KOVAN"):
        chain_table("DAI", entries)


def test_chain_table_rejects_unknown_keys() -> None:
    entries = {chain_id: "" for chain_id in ChainId}
    entries[1] = ""
    with pytest.raises(IncompleteChainTable, match="unknown keys"):
        chain_table("DAI", entries)


def test_chain_table_copies_entries() -> None:
    entries = {chain_id: "" for chain_id in ChainId}
    table = chain_table("DAI", entries)
    entries[ChainId.MAINNET] = "changed"
    assert table[ChainId.MAINNET] == ""


def test_stablecoin_registry_is_immutable() -> None:
    assert isinstance(STABLECOINS, tuple)
    assert [coin.symbol for coin in STABLECOINS] == ["USDT", "BUSD"]
    with pytest.raises(AttributeError):
        STABLECOINS.append(STABLECOINS[0])
