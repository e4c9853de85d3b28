"""
Token entities and cross-chain constant tables
"""
from dex_sdk.config.chains import CHAINS, ChainConfig, ChainId, get_chain, to_chain_id
from dex_sdk.constants.tokens import (
    BUSD,
    NATIVE,
    STABLECOINS,
    USDT,
    WETH,
    get_tokens_for_chain,
    native_currency,
    stablecoin,
    wrapped_native,
)
from dex_sdk.entities.currency import ETHER, NativeCurrency
from dex_sdk.entities.token import Currency, Token, currency_equals, sort_tokens
from dex_sdk.exceptions import (
    ChainMismatch,
    IdenticalAddress,
    IncompleteChainTable,
    InvalidAddress,
    InvalidDecimals,
    SDKError,
    UnsupportedChain,
)
from dex_sdk.utils.address import validate_and_parse_address

__version__ = "0.1.0"

__all__ = [
    "BUSD",
    "CHAINS",
    "ChainConfig",
    "ChainId",
    "ChainMismatch",
    "Currency",
    "ETHER",
    "IdenticalAddress",
    "IncompleteChainTable",
    "InvalidAddress",
    "InvalidDecimals",
    "NATIVE",
    "NativeCurrency",
    "SDKError",
    "STABLECOINS",
    "Token",
    "USDT",
    "UnsupportedChain",
    "WETH",
    "currency_equals",
    "get_chain",
    "get_tokens_for_chain",
    "native_currency",
    "sort_tokens",
    "stablecoin",
    "to_chain_id",
    "validate_and_parse_address",
    "wrapped_native",
]
