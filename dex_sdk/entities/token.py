"""
ERC20 token entity
"""
from dataclasses import dataclass
from typing import Optional, Union

from dex_sdk.config.chains import ChainId, to_chain_id
from dex_sdk.entities.currency import NativeCurrency, validate_decimals
from dex_sdk.exceptions import ChainMismatch, IdenticalAddress
from dex_sdk.utils.address import validate_and_parse_address


@dataclass(frozen=True, eq=False)
class Token:
    """
    An ERC20 token with a unique address and some metadata

    Identity is (chain_id, address); decimals, symbol and name do not take
    part in equality or hashing.
    """
    chain_id: ChainId
    address: str
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        # Frozen dataclass: normalised values go through object.__setattr__
        object.__setattr__(self, "chain_id", to_chain_id(self.chain_id))
        object.__setattr__(self, "address", validate_and_parse_address(self.address))
        validate_decimals(self.decimals)

    @property
    def is_native(self) -> bool:
        return False

    def equals(self, other: "Token") -> bool:
        """True if both tokens have the same chain_id and address"""
        # short circuit on identity
        if self is other:
            return True
        return self.chain_id == other.chain_id and self.address == other.address

    def sorts_before(self, other: "Token") -> bool:
        """
        True if this token's address sorts before the other token's address

        Raises:
            ChainMismatch: if the tokens are on different chains
            IdenticalAddress: if the tokens have the same address
        """
        if self.chain_id != other.chain_id:
            raise ChainMismatch(
                f"Cannot order {self.chain_id.name} token against {other.chain_id.name} token"
            )
        if self.address == other.address:
            raise IdenticalAddress(f"Cannot order {self.address} against itself")
        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __lt__(self, other: "Token") -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.sorts_before(other)

    def __repr__(self) -> str:
        return f"Token({self.chain_id.name}, {self.address}, {self.symbol})"


Currency = Union[NativeCurrency, Token]


def currency_equals(currency_a: Currency, currency_b: Currency) -> bool:
    """Compares two currencies for equality"""
    if isinstance(currency_a, Token) and isinstance(currency_b, Token):
        return currency_a.equals(currency_b)
    if isinstance(currency_a, Token) or isinstance(currency_b, Token):
        return False
    return currency_a is currency_b


def sort_tokens(token_a: Token, token_b: Token) -> tuple[Token, Token]:
    """Canonical (token0, token1) ordering of a pair"""
    if token_a.sorts_before(token_b):
        return token_a, token_b
    return token_b, token_a
