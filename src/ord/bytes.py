"""Binary byte-size units and parsing."""

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation

KIB = 1 << 10
MIB = 1 << 20
GIB = 1 << 30
TIB = 1 << 40

UNITS = {
    "b": 1,
    "kib": KIB,
    "mib": MIB,
    "gib": GIB,
    "tib": TIB,
}

_SIZE_RE = re.compile(r"^\s*(?P<number>[0-9]+(?:\.[0-9]+)?)\s*(?P<unit>[a-zA-Z]*)\s*$")


def parse_bytes(text: str) -> int:
    """Parse a byte count such as ``"1"``, ``"10 MiB"`` or ``"1.5GiB"``.

    Parameters
    ----------
    text : str
        A non-negative number with an optional binary unit suffix.

    Returns
    -------
    int
        The size in bytes, rounded down to a whole byte.

    Raises
    ------
    ValueError
        If the number is malformed or negative, or the unit is unknown.
    """
    match = _SIZE_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid byte size: {text!r}")

    unit = match.group("unit").lower() or "b"
    if unit not in UNITS:
        raise ValueError(f"Invalid byte size unit: {match.group('unit')!r}")

    try:
        number = Decimal(match.group("number"))
    except InvalidOperation:
        raise ValueError(f"Invalid byte size: {text!r}") from None

    return int(number * UNITS[unit])


def format_bytes(size: int) -> str:
    """Render a byte count using the largest unit it reaches.

    Exact multiples print as whole units. Other sizes print truncated to two
    decimals, falling back to a smaller unit when that would look whole.

    >>> format_bytes(10 * MIB)
    '10 MiB'
    """
    for name, factor in (("TiB", TIB), ("GiB", GIB), ("MiB", MIB), ("KiB", KIB)):
        if size >= factor:
            if size % factor == 0:
                return f"{size // factor} {name}"
            # Truncate so an inexact size never prints as a whole unit
            value = (Decimal(size) / Decimal(factor)).quantize(Decimal("0.01"), rounding=ROUND_DOWN)
            if value != value.to_integral_value():
                return f"{value:f}".rstrip("0") + f" {name}"
    return f"{size} B"
