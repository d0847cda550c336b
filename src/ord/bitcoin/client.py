"""Bitcoin Core JSON-RPC client authenticated with a cookie file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests
from web3 import HTTPProvider

from ord.errors import BitcoinRPCError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CookieAuth:
    """Credentials read from Bitcoin Core's ``.cookie`` file.

    Parameters
    ----------
    path : Path
        Path to the cookie file.
    """

    path: Path

    def credentials(self) -> tuple[str, str]:
        """Read the user and password from the cookie file.

        Returns
        -------
        tuple[str, str]
            The ``(user, password)`` pair.

        Raises
        ------
        OSError
            If the file cannot be read.
        ValueError
            If the file does not contain ``user:password``.
        """
        content = Path(self.path).read_text().strip()
        user, sep, password = content.partition(":")
        if not sep:
            raise ValueError(f"Invalid cookie file: {self.path}")
        return user, password


def _error_member(response: requests.Response | None) -> Any:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("error") or None


def _rpc_error(error: Any) -> BitcoinRPCError:
    if isinstance(error, dict):
        return BitcoinRPCError(error.get("code"), error.get("message", ""))
    return BitcoinRPCError(None, str(error))


def _with_scheme(rpc_url: str) -> str:
    if "://" in rpc_url:
        return rpc_url
    return f"http://{rpc_url}"


class BitcoinCoreClient:
    """Thin JSON-RPC client for Bitcoin Core.

    The cookie is read once, at construction.

    Parameters
    ----------
    rpc_url : str
        ``host:port`` or a full URL of the RPC server.
    auth : CookieAuth
        The cookie file to authenticate with.
    timeout : int, optional
        Request timeout in seconds. Default is 30.
    """

    def __init__(self, rpc_url: str, auth: CookieAuth, timeout: int = 30):
        user, password = auth.credentials()
        self.rpc_url = rpc_url
        self._provider = HTTPProvider(
            _with_scheme(rpc_url),
            request_kwargs={"auth": (user, password), "timeout": timeout},
        )

    def call(self, method: str, *params: Any) -> Any:
        """Call an RPC method.

        Parameters
        ----------
        method : str
            The RPC method name, e.g. ``getblockcount``.
        *params : Any
            Positional parameters for the method.

        Returns
        -------
        Any
            The ``result`` member of the response.

        Raises
        ------
        BitcoinRPCError
            If the server returned an error.
        """
        logger.debug("RPC call", extra={"method": method})
        try:
            response = self._provider.make_request(method, list(params))
        except requests.HTTPError as err:
            # Bitcoin Core before 28.0 sends RPC errors with HTTP 404 or 500
            error = _error_member(err.response)
            if error is None:
                raise
            raise _rpc_error(error) from err

        error = response.get("error")
        if error:
            raise _rpc_error(error)

        return response.get("result")

    @property
    def connected(self) -> bool:
        """Check if the RPC server is reachable.

        Returns
        -------
        bool
            True if a ``getblockcount`` call succeeds.
        """
        try:
            self.get_block_count()
        except (BitcoinRPCError, OSError, ValueError):
            return False
        return True

    def get_block_count(self) -> int:
        """Height of the most-work fully-validated chain."""
        return self.call("getblockcount")

    def get_best_block_hash(self) -> str:
        """Hash of the tip of the most-work chain."""
        return self.call("getbestblockhash")

    def get_blockchain_info(self) -> dict[str, Any]:
        """State of the node's active chain, including its ``chain`` name."""
        return self.call("getblockchaininfo")
