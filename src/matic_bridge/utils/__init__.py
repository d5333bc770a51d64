"""
matic_bridge utilities.
"""

from matic_bridge.utils.concurrency import SingleFlight
from matic_bridge.utils.converter import (
    encode_uint256,
    encode_uint256_array,
    to_hex,
    to_uint256,
    validate_many,
)
from matic_bridge.utils.logger import ErrorHelper, Logger
from matic_bridge.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from matic_bridge.utils.validation import (
    is_valid_address,
    require_tx_hash,
    validate_address,
)

__all__ = [
    # Concurrency
    "SingleFlight",
    # Conversion
    "to_uint256",
    "to_hex",
    "validate_many",
    "encode_uint256",
    "encode_uint256_array",
    # Logger
    "Logger",
    "ErrorHelper",
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    # Validation
    "is_valid_address",
    "validate_address",
    "require_tx_hash",
]
