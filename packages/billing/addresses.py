"""Identity helpers for the billing package."""

from typing import Optional

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def is_null_address(address: Optional[str]) -> bool:
    """Check whether an identity is missing, blank or the zero address."""
    if address is None or not isinstance(address, str):
        return True
    stripped = address.strip()
    return not stripped or stripped.lower() == ZERO_ADDRESS
