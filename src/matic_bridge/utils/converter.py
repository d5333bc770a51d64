"""
Token id and amount conversion.

Bridge callers hand ids and amounts around as ints, decimal strings or
``0x`` hex strings. web3.py encodes ``uint256`` from Python ints, so
everything is normalized to ``int`` here.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from eth_abi import encode

from matic_bridge.constants import MAX_BATCH_SIZE, MAX_UINT256
from matic_bridge.errors import BatchSizeExceededError, InvalidTokenIdError

TokenAmount = Union[int, str]


def to_uint256(value: TokenAmount, field: str = "token_id") -> int:
    """
    Normalize a token id or amount to an int in uint256 range.

    Args:
        value: int, decimal string, or 0x-prefixed hex string
        field: Field name for error messages

    Returns:
        Value as int

    Raises:
        InvalidTokenIdError: If the value is not a valid uint256
    """
    if isinstance(value, bool):
        raise InvalidTokenIdError(value, field=field, reason="must be an integer")

    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            result = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError:
            raise InvalidTokenIdError(value, field=field, reason="not a number") from None
    else:
        raise InvalidTokenIdError(value, field=field, reason="must be int or str")

    if result < 0 or result > MAX_UINT256:
        raise InvalidTokenIdError(value, field=field, reason="out of uint256 range")
    return result


def to_hex(value: TokenAmount) -> str:
    """Hex string of a uint256 (``7`` -> ``"0x7"``)."""
    return hex(to_uint256(value))


def validate_many(token_ids: Iterable[TokenAmount], limit: int = MAX_BATCH_SIZE) -> List[int]:
    """
    Check the batch cap and normalize every id.

    Raises:
        BatchSizeExceededError: If more than ``limit`` ids are given
    """
    ids = list(token_ids)
    if len(ids) > limit:
        raise BatchSizeExceededError(len(ids), limit)
    return [to_uint256(token_id) for token_id in ids]


def encode_uint256(value: TokenAmount) -> bytes:
    """ABI-encode a single uint256 (32 bytes, big-endian)."""
    return encode(["uint256"], [to_uint256(value)])


def encode_uint256_array(values: Iterable[TokenAmount]) -> bytes:
    """ABI-encode a dynamic ``uint256[]``."""
    return encode(["uint256[]"], [[to_uint256(value) for value in values]])
