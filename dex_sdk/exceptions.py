"""
Error kinds raised by the SDK
"""


class SDKError(Exception):
    """Base class for every SDK error"""


class InvalidAddress(SDKError, ValueError):
    """Address is not a well-formed (or correctly checksummed) contract address"""


class ChainMismatch(SDKError, ValueError):
    """Two tokens from different chains were compared"""


class IdenticalAddress(SDKError, ValueError):
    """Two tokens with the same address were ordered against each other"""


class InvalidDecimals(SDKError, ValueError):
    pass


class UnsupportedChain(SDKError, ValueError):
    pass


class IncompleteChainTable(SDKError):
    """A chain-keyed constant table does not cover exactly the supported chains"""
