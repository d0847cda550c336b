"""Command line interface for ord.

Provides:
- Global options for the index and the Bitcoin Core connection
- settings: show every resolved setting
- info: query the connected Bitcoin Core node
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ord.bitcoin.client import BitcoinCoreClient
from ord.bitcoin.networks import Chain
from ord.bytes import format_bytes, parse_bytes
from ord.errors import OrdError
from ord.observability.logging import get_logger
from ord.options import Options

logger = get_logger(__name__)


def _byte_size(value: str) -> int:
    try:
        return parse_bytes(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ord",
        description="Bitcoin satoshi ordinal number utility",
    )

    parser.add_argument(
        "--max-index-size",
        type=_byte_size,
        metavar="MAX_INDEX_SIZE",
        help="Limit the ordinal index to MAX_INDEX_SIZE bytes. This cannot be changed later. "
        "[mainnet, testnet, and signet default: 1 TiB, regtest default: 10 MiB]",
    )
    parser.add_argument(
        "--cookie-file",
        type=Path,
        help="Load Bitcoin Core RPC cookie file from COOKIE_FILE.",
    )
    parser.add_argument(
        "--rpc-url",
        help="Connect to Bitcoin Core RPC at RPC_URL.",
    )
    parser.add_argument(
        "--chain",
        type=str.lower,
        choices=[chain.value for chain in Chain],
        default=Chain.MAINNET.value,
        help="Index CHAIN. (default: %(default)s)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Store index in DATA_DIR.",
    )
    parser.add_argument(
        "--bitcoin-data-dir",
        type=Path,
        help="Load Bitcoin Core data dir from BITCOIN_DATA_DIR.",
    )
    parser.add_argument(
        "--height-limit",
        type=int,
        help="Limit index to HEIGHT_LIMIT blocks.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("settings", help="Show resolved settings")
    subparsers.add_parser("info", help="Show Bitcoin Core chain state")

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(self, options: Options, json_output: bool = False):
        self.options = options
        self.json_output = json_output
        self._client: BitcoinCoreClient | None = None

    @property
    def client(self) -> BitcoinCoreClient:
        """Get Bitcoin Core client (lazy loaded)."""
        if self._client is None:
            self._client = self.options.bitcoin_rpc_client()
        return self._client

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:
            print(json.dumps(data, default=str, indent=2))
        else:
            for key, value in data.items():
                print(f"{key}: {value}")

    def error(self, message: str) -> None:
        """Report an error in the appropriate format."""
        report_error(message, self.json_output)


def report_error(message: str, json_output: bool = False) -> None:
    """Print an error as JSON on stdout or as text on stderr."""
    if json_output:
        print(json.dumps({"error": message}))
    else:
        print(f"error: {message}", file=sys.stderr)


def cmd_settings(ctx: CLIContext) -> int:
    """Show resolved settings."""
    options = ctx.options
    max_index_size = options.get_max_index_size()
    ctx.output(
        {
            "chain": options.chain.value,
            "network": options.network.value,
            "rpc_url": options.get_rpc_url(),
            "cookie_file": str(options.get_cookie_file()),
            "data_dir": str(options.get_data_dir()),
            "max_index_size": max_index_size if ctx.json_output else format_bytes(max_index_size),
            "height_limit": options.height_limit,
        }
    )
    return 0


def cmd_info(ctx: CLIContext) -> int:
    """Show Bitcoin Core chain state."""
    client = ctx.client
    if not client.connected:
        ctx.error(f"Not connected to Bitcoin Core RPC at {client.rpc_url}")
        return 1

    info = client.get_blockchain_info()
    logger.info("chain info received", chain=info.get("chain"), rpc_url=client.rpc_url)
    ctx.output(
        {
            "chain": info.get("chain"),
            "blocks": client.get_block_count(),
            "best_block_hash": client.get_best_block_hash(),
            "rpc_url": client.rpc_url,
        }
    )
    return 0


def run_cli(args: argparse.Namespace) -> int:
    """Execute CLI command based on parsed arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no CLI command specified).
    """
    try:
        options = Options.from_args(args)
    except ValidationError as e:
        report_error(f"Invalid options: {e}", args.json)
        return 2

    ctx = CLIContext(options, json_output=args.json)

    commands = {
        "settings": cmd_settings,
        "info": cmd_info,
    }
    command = commands.get(args.command)
    if command is None:
        return -1

    try:
        return command(ctx)
    except (OrdError, OSError) as e:
        ctx.error(_describe(e))
        return 1


def _describe(error: BaseException) -> str:
    """Render an error and its cause chain on one line."""
    message = str(error)
    cause = error.__cause__
    while cause is not None:
        text = str(cause)
        if text and text not in message:
            message = f"{message}: {text}" if message else text
        cause = cause.__cause__
    return message
