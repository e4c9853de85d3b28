"""
Global settings for the SDK
Values can be overridden through the environment or a .env file
"""
import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()

# Logging level
LOG_LEVEL: Final[str] = os.getenv("DEX_SDK_LOG_LEVEL", "INFO").upper()

# Largest decimals value an ERC20 token can report (uint8)
MAX_DECIMALS: Final[int] = 255
