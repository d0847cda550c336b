"""Bitcoin network selection.

Maps the user-facing chain selector onto a canonical network and holds the
per-network defaults: the Bitcoin Core RPC port and the directory suffix used
for data and cookie paths.
"""

from enum import Enum
from pathlib import Path


class Network(str, Enum):
    """Canonical Bitcoin networks."""

    BITCOIN = "bitcoin"
    REGTEST = "regtest"
    SIGNET = "signet"
    TESTNET = "testnet"


class Chain(str, Enum):
    """Chain selector accepted on the command line, aliases included."""

    MAIN = "main"
    MAINNET = "mainnet"
    REGTEST = "regtest"
    SIGNET = "signet"
    TEST = "test"
    TESTNET = "testnet"

    @property
    def network(self) -> Network:
        return network_of(self)


def network_of(chain: Chain) -> Network:
    """Fold a chain selector onto its network.

    Parameters
    ----------
    chain : Chain
        The selector, possibly an alias.

    Returns
    -------
    Network
        The canonical network.
    """
    match chain:
        case Chain.MAIN | Chain.MAINNET:
            return Network.BITCOIN
        case Chain.REGTEST:
            return Network.REGTEST
        case Chain.SIGNET:
            return Network.SIGNET
        case Chain.TEST | Chain.TESTNET:
            return Network.TESTNET
    raise ValueError(f"Unknown chain: {chain!r}")


def port_of(network: Network) -> str:
    """Default Bitcoin Core RPC port for a network."""
    match network:
        case Network.BITCOIN:
            return "8332"
        case Network.REGTEST:
            return "18443"
        case Network.SIGNET:
            return "38332"
        case Network.TESTNET:
            return "18332"
    raise ValueError(f"Unknown network: {network!r}")


def directory_suffix(network: Network, base: Path) -> Path:
    """Join a network's directory name onto ``base``.

    Mainnet lives directly in ``base``; every other network gets a
    subdirectory named after it, the way Bitcoin Core lays out its data dir.

    Parameters
    ----------
    network : Network
        The active network.
    base : Path
        The directory to suffix.

    Returns
    -------
    Path
        ``base`` for mainnet, ``base / <network>`` otherwise.
    """
    if network is Network.BITCOIN:
        return base
    return base / network.value
