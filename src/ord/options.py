"""Global options and the settings derived from them.

Every derived value is recomputed on access from the frozen option fields.
"""

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ord.bitcoin.client import BitcoinCoreClient, CookieAuth
from ord.bitcoin.dirs import default_dirs
from ord.bitcoin.networks import Chain, Network, directory_suffix, port_of
from ord.bytes import MIB, TIB
from ord.errors import ConfigurationError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, CookieAuth], BitcoinCoreClient]


class Options(BaseModel):
    """User overrides for the index and the Bitcoin Core connection.

    Attributes
    ----------
    max_index_size : int | None
        Limit the index to this many bytes.
    cookie_file : Path | None
        Load Bitcoin Core's RPC cookie from this file.
    rpc_url : str | None
        Connect to Bitcoin Core RPC at this URL.
    chain : Chain
        The chain to index.
    data_dir : Path | None
        Store the index in this directory.
    bitcoin_data_dir : Path | None
        Bitcoin Core's data directory, used to locate the cookie file.
    height_limit : int | None
        Limit the index to this many blocks.
    """

    model_config = ConfigDict(frozen=True)

    max_index_size: int | None = Field(default=None, ge=0)
    cookie_file: Path | None = None
    rpc_url: str | None = None
    chain: Chain = Chain.MAINNET
    data_dir: Path | None = None
    bitcoin_data_dir: Path | None = None
    height_limit: int | None = Field(default=None, ge=0)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Options":
        """Build options from parsed command line arguments."""
        return cls(
            max_index_size=args.max_index_size,
            cookie_file=args.cookie_file,
            rpc_url=args.rpc_url,
            chain=args.chain,
            data_dir=args.data_dir,
            bitcoin_data_dir=args.bitcoin_data_dir,
            height_limit=args.height_limit,
        )

    @property
    def network(self) -> Network:
        return self.chain.network

    def get_max_index_size(self) -> int:
        """Get the index size limit in bytes.

        Defaults to 10 MiB on regtest and 1 TiB everywhere else.
        """
        if self.max_index_size is not None:
            return self.max_index_size
        if self.network is Network.REGTEST:
            return 10 * MIB
        return TIB

    def get_rpc_url(self) -> str:
        """Get the Bitcoin Core RPC URL.

        An explicit URL wins, even if it points at another network's port.
        """
        if self.rpc_url is not None:
            return self.rpc_url
        return f"127.0.0.1:{port_of(self.network)}"

    def get_cookie_file(self) -> Path:
        """Get the path of Bitcoin Core's RPC cookie file.

        Returns
        -------
        Path
            The explicit cookie file if given, otherwise ``.cookie`` inside
            the network directory of Bitcoin Core's data dir. The directory
            belongs to Bitcoin Core and is never created here.

        Raises
        ------
        ConfigurationError
            If the platform data directory cannot be determined.
        """
        if self.cookie_file is not None:
            return self.cookie_file

        if self.bitcoin_data_dir is not None:
            path = self.bitcoin_data_dir
        else:
            path = default_dirs().bitcoin_data_dir()

        return directory_suffix(self.network, path) / ".cookie"

    def get_data_dir(self) -> Path:
        """Get the directory the index is stored in.

        Returns
        -------
        Path
            The explicit data dir if given, otherwise ``ord`` (plus the
            network name off mainnet) under the user data directory. The
            default directory is created if missing.

        Raises
        ------
        ConfigurationError
            If the platform data directory cannot be determined or the
            directory cannot be created.
        """
        if self.data_dir is not None:
            return self.data_dir

        path = directory_suffix(self.network, default_dirs().data_dir() / "ord")

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise ConfigurationError(f"Failed to create data dir `{path}`: {err}") from err

        return path

    def bitcoin_rpc_client(self, factory: ClientFactory = BitcoinCoreClient) -> BitcoinCoreClient:
        """Construct a Bitcoin Core RPC client authenticated by cookie file.

        Parameters
        ----------
        factory : ClientFactory, optional
            Client constructor, called as ``factory(rpc_url, auth)``.
            Default is ``BitcoinCoreClient``.

        Returns
        -------
        BitcoinCoreClient
            The constructed client.

        Raises
        ------
        ConfigurationError
            If the cookie file location cannot be resolved or the client
            cannot be constructed.
        """
        cookie_file = self.get_cookie_file()
        rpc_url = self.get_rpc_url()

        logger.info(
            "Connecting to Bitcoin Core RPC server at %s using credentials from `%s`",
            rpc_url,
            cookie_file,
        )

        try:
            return factory(rpc_url, CookieAuth(cookie_file))
        except Exception as err:
            raise ConfigurationError(f"Failed to connect to Bitcoin Core RPC at {rpc_url}") from err
