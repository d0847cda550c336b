"""Bitcoin Core integration for ord."""

from .client import BitcoinCoreClient, CookieAuth
from .networks import Chain, Network, directory_suffix, network_of, port_of

__all__ = [
    "BitcoinCoreClient",
    "Chain",
    "CookieAuth",
    "Network",
    "directory_suffix",
    "network_of",
    "port_of",
]
