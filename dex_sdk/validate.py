"""
Validation command to check integrity of the constant tables
"""
import sys
from typing import Mapping

from rich.console import Console
from rich.table import Table

from dex_sdk.config.chains import CHAINS, ChainId
from dex_sdk.constants.tokens import NATIVE, STABLECOINS, WETH
from dex_sdk.utils.address import is_checksummed
from dex_sdk.utils.logger import console as default_console
from dex_sdk.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _missing_chains(table: Mapping) -> list[str]:
    return [chain.name for chain in ChainId if chain not in table]


def validate_chains() -> list[str]:
    problems = []
    missing = _missing_chains(CHAINS)
    if missing:
        problems.append(f"CHAINS missing {', '.join(missing)}")
    for chain_id, config in CHAINS.items():
        if chain_id != config.chain_id:
            problems.append(f"Mismatch ChainId for {config.name}")
    return problems


def validate_tokens() -> list[str]:
    problems = []
    for name, table in (("WETH", WETH), ("NATIVE", NATIVE)):
        missing = _missing_chains(table)
        if missing:
            problems.append(f"{name} missing {', '.join(missing)}")

    for chain_id, token in WETH.items():
        if token.chain_id != chain_id:
            problems.append(f"WETH[{chain_id.name}] is a {token.chain_id.name} token")

    for coin in STABLECOINS:
        missing = _missing_chains(coin.addresses)
        if missing:
            problems.append(f"{coin.symbol} missing {', '.join(missing)}")
        for chain_id, address in coin.addresses.items():
            if address and not is_checksummed(address):
                problems.append(f"Invalid address for {coin.symbol} on {chain_id.name}: {address}")
    return problems


def validate_tables(console: Console | None = None) -> list[str]:
    """Run every check, print a report and return the problems found"""
    console = console or default_console
    problems = validate_chains() + validate_tokens()

    report = Table(title="Chain tables")
    report.add_column("Chain")
    report.add_column("ID", justify="right")
    report.add_column("Native")
    report.add_column("Wrapped")
    for coin in STABLECOINS:
        report.add_column(coin.symbol)
    for chain_id in ChainId:
        row = [
            CHAINS[chain_id].name if chain_id in CHAINS else "?",
            str(chain_id.value),
            NATIVE[chain_id].symbol if chain_id in NATIVE else "?",
            WETH[chain_id].symbol if chain_id in WETH else "?",
        ]
        row += ["✓" if coin.addresses.get(chain_id) else "-" for coin in STABLECOINS]
        report.add_row(*row)
    console.print(report)

    for problem in problems:
        console.print(f"[red]❌ {problem}[/red]")
    if not problems:
        console.print("[green]✨ Tables Validated Successfully[/green]")
    return problems


def main() -> int:
    setup_logging()
    problems = validate_tables()
    if problems:
        logger.error(f"{len(problems)} problem(s) found")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
