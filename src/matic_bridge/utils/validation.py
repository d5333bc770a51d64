"""
Validation utilities for the matic_bridge SDK.

All validation functions raise ValidationError (or subclasses) on failure,
before any network call is made.
"""

from __future__ import annotations

import re
from typing import Optional

from matic_bridge.errors import InvalidAddressError, MissingArgumentError

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_valid_address(address: Optional[str]) -> bool:
    return isinstance(address, str) and bool(_ADDRESS_PATTERN.match(address))


def validate_address(address: Optional[str], field_name: str = "address") -> str:
    """
    Validate Ethereum address format.

    Args:
        address: Address to validate
        field_name: Field name for error messages

    Returns:
        The address unchanged

    Raises:
        MissingArgumentError: If address is empty
        InvalidAddressError: If address is malformed
    """
    if not address:
        raise MissingArgumentError(field_name)

    if not isinstance(address, str):
        raise InvalidAddressError(str(address), field=field_name, reason="must be a string")

    if not _ADDRESS_PATTERN.match(address):
        raise InvalidAddressError(
            address,
            field=field_name,
            reason="must be 0x followed by 40 hex characters",
        )

    return address


def require_tx_hash(tx_hash: Optional[str], field_name: str = "tx_hash") -> str:
    """
    Require a non-empty transaction hash.

    Only emptiness is enforced; the format is left to the exit-proof
    builder, which knows what it accepts.
    """
    if not tx_hash:
        raise MissingArgumentError(field_name)
    return tx_hash

