"""
Well-known token tables per chain
Built once at import time; every table covers every ChainId
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from dex_sdk.config.chains import CHAINS, ChainId, chain_table, to_chain_id
from dex_sdk.entities.currency import ETHER, NativeCurrency
from dex_sdk.entities.token import Token


# ==================== WRAPPED NATIVE TOKENS ====================

WETH: Mapping[ChainId, Token] = chain_table("WETH", {
    ChainId.MAINNET: Token(
        ChainId.MAINNET,
        "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        18,
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.ROPSTEN: Token(
        ChainId.ROPSTEN,
        "0xc778417E063141139Fce010982780140Aa0cD5Ab",
        18,
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.RINKEBY: Token(
        ChainId.RINKEBY,
        "0xc778417E063141139Fce010982780140Aa0cD5Ab",
        18,
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.GORLI: Token(ChainId.GORLI, "0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6", 18, "WETH", "Wrapped Ether"),
    ChainId.KOVAN: Token(ChainId.KOVAN, "0xd0A1E359811322d97991E03f863a0C30C2cF029C", 18, "WETH", "Wrapped Ether"),
    ChainId.BSC_MAINNET: Token(
        ChainId.BSC_MAINNET,
        "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",
        18,
        "WBNB",
        "Wrapped BNB",
    ),
    ChainId.BSC_TESTNET: Token(
        ChainId.BSC_TESTNET,
        "0xae13d989daC2f0dEbFf460aC112a837C89BAa7cd",
        18,
        "WBNB",
        "Wrapped BNB",
    ),
    ChainId.HECO_TESTNET: Token(
        ChainId.HECO_TESTNET,
        "0xB49f19289857f4499781AaB9afd4A428C4BE9CA8",
        18,
        "WHT",
        "Wrapped HT",
    ),
    ChainId.MATIC_MUMBAI: Token(
        ChainId.MATIC_MUMBAI,
        "0xa1DCF14e05e43D62861cdc74641Fc800B2684f76",
        18,
        "WETH",
        "Wrapped Ether",
    ),
})

# ==================== STABLECOINS ====================
# "" marks a chain the stablecoin is not deployed on

USDT: Mapping[ChainId, str] = chain_table("USDT", {
    ChainId.MAINNET: "",
    ChainId.ROPSTEN: "",
    ChainId.RINKEBY: "",
    ChainId.GORLI: "",
    ChainId.KOVAN: "",
    ChainId.BSC_MAINNET: "0x55d398326f99059fF775485246999027B3197955",
    ChainId.BSC_TESTNET: "0x337610d27c682E347C9cD60BD4b3b107C9d34dDd",
    ChainId.HECO_TESTNET: "",
    ChainId.MATIC_MUMBAI: "",
})

BUSD: Mapping[ChainId, str] = chain_table("BUSD", {
    ChainId.MAINNET: "",
    ChainId.ROPSTEN: "",
    ChainId.RINKEBY: "",
    ChainId.GORLI: "",
    ChainId.KOVAN: "",
    ChainId.BSC_MAINNET: "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56",
    ChainId.BSC_TESTNET: "0xeD24FC36d5Ee211Ea25A80239Fb8C4Cfd80f12Ee",
    ChainId.HECO_TESTNET: "",
    ChainId.MATIC_MUMBAI: "",
})


@dataclass(frozen=True)
class Stablecoin:
    """Metadata shared by a stablecoin's deployments"""
    symbol: str
    name: str
    decimals: int
    addresses: Mapping[ChainId, str]


STABLECOINS: tuple[Stablecoin, ...] = (
    # Binance-Peg BSC-USD is 18 decimals
    Stablecoin(symbol="USDT", name="Tether USD", decimals=18, addresses=USDT),
    Stablecoin(symbol="BUSD", name="Binance USD", decimals=18, addresses=BUSD),
)

# ==================== NATIVE CURRENCIES ====================


def _build_native_currencies() -> dict[ChainId, NativeCurrency]:
    # One instance per native symbol so networks sharing an asset compare equal
    singletons: dict[str, NativeCurrency] = {ETHER.symbol: ETHER}
    natives = {}
    for chain_id, config in CHAINS.items():
        if config.native_symbol not in singletons:
            singletons[config.native_symbol] = NativeCurrency(
                decimals=config.native_decimals,
                symbol=config.native_symbol,
                name=config.native_name,
            )
        natives[chain_id] = singletons[config.native_symbol]
    return natives


NATIVE: Mapping[ChainId, NativeCurrency] = chain_table("NATIVE", _build_native_currencies())


def wrapped_native(chain_id: ChainId | int) -> Token:
    """Wrapped native currency token for a chain"""
    return WETH[to_chain_id(chain_id)]


def native_currency(chain_id: ChainId | int) -> NativeCurrency:
    """Native currency singleton for a chain"""
    return NATIVE[to_chain_id(chain_id)]


def stablecoin(table: Mapping[ChainId, str], chain_id: ChainId | int) -> Optional[str]:
    """Address from a stablecoin table, None where it is not deployed"""
    return table[to_chain_id(chain_id)] or None


def get_tokens_for_chain(chain_id: ChainId | int) -> list[Token]:
    """Wrapped native token plus every stablecoin deployed on the chain"""
    chain_id = to_chain_id(chain_id)
    tokens = [WETH[chain_id]]
    for coin in STABLECOINS:
        address = stablecoin(coin.addresses, chain_id)
        if address is not None:
            tokens.append(Token(chain_id, address, coin.decimals, coin.symbol, coin.name))
    return tokens
