"""
Logging utilities
"""
import logging
from rich.logging import RichHandler
from rich.console import Console

from dex_sdk.config.settings import LOG_LEVEL

# Global console for rich output
console = Console()


def resolve_level(level: str) -> int:
    """Numeric level for a level name, INFO for anything unknown"""
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = LOG_LEVEL):
    """Configure logging with rich handler"""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
                markup=True
            )
        ]
    )

    # Reduce noise from external libraries
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)
