"""Platform default directories.

Bitcoin Core keeps its data in ``~/.bitcoin`` on Linux and in
``<user data dir>/Bitcoin`` everywhere else. ord always stores its index
under the platform user data directory.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path

import platformdirs

from ord.errors import ConfigurationError


class DefaultDirs(ABC):
    """Platform lookup for default base directories."""

    @abstractmethod
    def bitcoin_data_dir(self) -> Path:
        """Get Bitcoin Core's default data directory.

        Returns
        -------
        Path
            The directory holding Bitcoin Core's ``.cookie`` for mainnet.

        Raises
        ------
        ConfigurationError
            If the platform directory cannot be determined.
        """
        ...

    def data_dir(self) -> Path:
        """Get the user's application data directory.

        Returns
        -------
        Path
            ``~/.local/share`` (or ``$XDG_DATA_HOME``) on Linux,
            ``~/Library/Application Support`` on macOS, the roaming
            ``AppData`` folder on Windows.

        Raises
        ------
        ConfigurationError
            If the directory cannot be determined.
        """
        try:
            path = platformdirs.user_data_dir(roaming=True)
        except (KeyError, OSError, RuntimeError) as err:
            raise ConfigurationError("Failed to retrieve data dir") from err

        if not path or path.startswith("~"):
            raise ConfigurationError("Failed to retrieve data dir")
        return Path(path)


class LinuxDirs(DefaultDirs):
    """Directory layout on Linux."""

    def bitcoin_data_dir(self) -> Path:
        try:
            return Path.home() / ".bitcoin"
        except (KeyError, RuntimeError) as err:
            raise ConfigurationError("Failed to retrieve home dir") from err


class GenericDirs(DefaultDirs):
    """Directory layout on macOS, Windows and other platforms."""

    def bitcoin_data_dir(self) -> Path:
        return self.data_dir() / "Bitcoin"


def default_dirs() -> DefaultDirs:
    """Select the directory layout for the running platform."""
    if sys.platform.startswith("linux"):
        return LinuxDirs()
    return GenericDirs()
