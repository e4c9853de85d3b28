"""
Native (non-contract) currencies
"""
from dataclasses import dataclass
from typing import Optional

from dex_sdk.config.settings import MAX_DECIMALS
from dex_sdk.exceptions import InvalidDecimals


def validate_decimals(decimals: int) -> int:
    """Decimals must be a uint8"""
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidDecimals(f"Decimals must be an integer, got {decimals!r}")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidDecimals(f"Decimals {decimals} outside [0, {MAX_DECIMALS}]")
    return decimals


# eq=False: native currencies are singletons compared by identity
@dataclass(frozen=True, eq=False)
class NativeCurrency:
    """A chain's base asset, e.g. ETH or BNB"""
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        validate_decimals(self.decimals)

    @property
    def is_native(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"NativeCurrency({self.symbol}, {self.decimals})"


ETHER = NativeCurrency(decimals=18, symbol="ETH", name="Ether")
