"""
matic_bridge exceptions.

Hierarchy:
    MaticBridgeError
    ├── ValidationError
    │   ├── BatchSizeExceededError
    │   ├── MissingArgumentError
    │   ├── InvalidAddressError
    │   └── InvalidTokenIdError
    ├── RoleMismatchError
    ├── MissingSenderError
    ├── AbiNotFoundError
    └── ExitProofError
"""

from matic_bridge.errors.base import MaticBridgeError
from matic_bridge.errors.bridge import (
    AbiNotFoundError,
    BatchSizeExceededError,
    ErrorType,
    ExitProofError,
    InvalidAddressError,
    InvalidTokenIdError,
    MissingArgumentError,
    MissingSenderError,
    RoleMismatchError,
    ValidationError,
)

__all__ = [
    "MaticBridgeError",
    "ErrorType",
    # Validation
    "ValidationError",
    "BatchSizeExceededError",
    "MissingArgumentError",
    "InvalidAddressError",
    "InvalidTokenIdError",
    # Orchestration
    "RoleMismatchError",
    "MissingSenderError",
    "AbiNotFoundError",
    "ExitProofError",
]
