"""
Contract address validation
Addresses are normalised to their EIP-55 checksummed form
"""
from web3 import Web3

from dex_sdk.exceptions import InvalidAddress
from dex_sdk.utils.logger import get_logger

logger = get_logger(__name__)


def is_checksummed(address: str) -> bool:
    """True if the address is already in EIP-55 mixed-case form"""
    return isinstance(address, str) and Web3.is_checksum_address(address)


def validate_and_parse_address(address: str) -> str:
    """
    Validate an address and return its checksummed form

    Lower- or upper-case hex is accepted and checksummed. A mixed-case
    address must carry a correct checksum.

    Raises:
        InvalidAddress: if the value is not a 20-byte hex address, or is
            mixed-case with a wrong EIP-55 checksum
    """
    # is_address also accepts raw bytes; only hex strings are addresses here
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddress(f"{address} is not a valid address.")

    digits = address[2:] if address[:2].lower() == "0x" else address
    mixed_case = digits != digits.lower() and digits != digits.upper()
    if mixed_case and not Web3.is_checksum_address("0x" + digits):
        raise InvalidAddress(f"{address} has an invalid checksum.")

    checksummed = Web3.to_checksum_address(address)
    if checksummed != address:
        logger.warning(f"{address} is not checksummed.")
    return checksummed
