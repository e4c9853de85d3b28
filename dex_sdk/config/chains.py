"""
Chain identifiers and per-chain metadata
Every constant table in the SDK is keyed by ChainId and must cover all members
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from dex_sdk.exceptions import IncompleteChainTable, UnsupportedChain
from dex_sdk.utils.logger import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class ChainId(Enum):
    """Supported chain IDs"""
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GORLI = 5
    KOVAN = 42
    BSC_MAINNET = 56
    BSC_TESTNET = 97
    HECO_TESTNET = 256
    MATIC_MUMBAI = 80001


def chain_table(name: str, entries: dict[ChainId, V]) -> Mapping[ChainId, V]:
    """
    Freeze a table that must have exactly one entry per ChainId

    Raises:
        IncompleteChainTable: if a chain is missing or a key is not a ChainId
    """
    missing = [chain.name for chain in ChainId if chain not in entries]
    unknown = [repr(key) for key in entries if not isinstance(key, ChainId)]
    if missing or unknown:
        problems = []
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if unknown:
            problems.append(f"unknown keys {', '.join(unknown)}")
        raise IncompleteChainTable(f"{name} table: {'; '.join(problems)}")

    logger.debug(f"Built {name} table for {len(entries)} chains")
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class ChainConfig:
    """Static description of a chain"""
    chain_id: ChainId
    name: str
    native_symbol: str
    native_name: str
    explorer_url: str
    native_decimals: int = 18
    testnet: bool = False

    def address_url(self, address: str) -> str:
        """Explorer link for a contract or account address"""
        return f"{self.explorer_url}/address/{address}"


CHAINS: Mapping[ChainId, ChainConfig] = chain_table("CHAINS", {
    ChainId.MAINNET: ChainConfig(
        chain_id=ChainId.MAINNET,
        name="Ethereum",
        native_symbol="ETH",
        native_name="Ether",
        explorer_url="https://etherscan.io",
    ),

    ChainId.ROPSTEN: ChainConfig(
        chain_id=ChainId.ROPSTEN,
        name="Ropsten",
        native_symbol="ETH",
        native_name="Ether",
        explorer_url="https://ropsten.etherscan.io",
        testnet=True,
    ),

    ChainId.RINKEBY: ChainConfig(
        chain_id=ChainId.RINKEBY,
        name="Rinkeby",
        native_symbol="ETH",
        native_name="Ether",
        explorer_url="https://rinkeby.etherscan.io",
        testnet=True,
    ),

    ChainId.GORLI: ChainConfig(
        chain_id=ChainId.GORLI,
        name="Görli",
        native_symbol="ETH",
        native_name="Ether",
        explorer_url="https://goerli.etherscan.io",
        testnet=True,
    ),

    ChainId.KOVAN: ChainConfig(
        chain_id=ChainId.KOVAN,
        name="Kovan",
        native_symbol="ETH",
        native_name="Ether",
        explorer_url="https://kovan.etherscan.io",
        testnet=True,
    ),

    ChainId.BSC_MAINNET: ChainConfig(
        chain_id=ChainId.BSC_MAINNET,
        name="BSC",
        native_symbol="BNB",
        native_name="BNB",
        explorer_url="https://bscscan.com",
    ),

    ChainId.BSC_TESTNET: ChainConfig(
        chain_id=ChainId.BSC_TESTNET,
        name="BSC Testnet",
        native_symbol="BNB",
        native_name="BNB",
        explorer_url="https://testnet.bscscan.com",
        testnet=True,
    ),

    ChainId.HECO_TESTNET: ChainConfig(
        chain_id=ChainId.HECO_TESTNET,
        name="HECO Testnet",
        native_symbol="HT",
        native_name="Huobi Token",
        explorer_url="https://testnet.hecoinfo.com",
        testnet=True,
    ),

    ChainId.MATIC_MUMBAI: ChainConfig(
        chain_id=ChainId.MATIC_MUMBAI,
        name="Mumbai",
        native_symbol="MATIC",
        native_name="Matic",
        explorer_url="https://mumbai.polygonscan.com",
        testnet=True,
    ),
})


def to_chain_id(value: ChainId | int) -> ChainId:
    """Coerce a raw chain id to a ChainId member"""
    if isinstance(value, ChainId):
        return value
    # bool is an int subclass; True would silently map to MAINNET
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnsupportedChain(f"{value!r} is not a chain id")
    try:
        return ChainId(value)
    except ValueError as e:
        raise UnsupportedChain(f"Chain {value} is not supported") from e


def get_chain(chain_id: ChainId | int) -> ChainConfig:
    """Get chain configuration by ID"""
    return CHAINS[to_chain_id(chain_id)]
