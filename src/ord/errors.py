"""Error types raised by ord."""


class OrdError(Exception):
    """Base class for ord errors."""


class ConfigurationError(OrdError):
    """Runtime configuration could not be resolved.

    Raised when a platform directory lookup fails, when the data directory
    cannot be created, or when the Bitcoin Core RPC client cannot be built.
    The underlying exception is always chained as ``__cause__``.
    """


class BitcoinRPCError(OrdError):
    """Bitcoin Core answered a JSON-RPC call with an error.

    Parameters
    ----------
    code : int | None
        The JSON-RPC error code, if the server sent one.
    message : str
        The error message.
    """

    def __init__(self, code: int | None, message: str):
        super().__init__(f"RPC error {code}: {message}" if code is not None else message)
        self.code = code
        self.message = message
