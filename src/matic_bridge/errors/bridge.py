"""
Bridge orchestration exceptions.

Validation errors (batch size, missing arguments, malformed ids) are raised
synchronously before any network round trip and share the ValidationError
base. Role, sender and ABI errors are raised by the orchestration layer
itself. Errors coming from web3.py, httpx or an exit-proof builder are not
wrapped and propagate with their own types.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from matic_bridge.errors.base import MaticBridgeError


class ErrorType(str, Enum):
    """Type tags understood by ErrorHelper."""

    ALLOWED_ON_ROOT = "allowed_on_root"
    ALLOWED_ON_CHILD = "allowed_on_child"
    MISSING_SENDER = "missing_sender"
    MISSING_ARGUMENT = "missing_argument"
    BATCH_SIZE_EXCEEDED = "batch_size_exceeded"
    ABI_NOT_FOUND = "abi_not_found"


# =============================================================================
# Validation
# =============================================================================


class ValidationError(MaticBridgeError):
    """
    Base class for input validation failures.

    Always raised before any network call is made.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class BatchSizeExceededError(ValidationError):
    """
    Raised when a batch operation receives more ids than allowed.

    Example:
        >>> raise BatchSizeExceededError(21, 20)
    """

    def __init__(self, size: int, limit: int, *, method: Optional[str] = None) -> None:
        details: Dict[str, Any] = {"size": size, "limit": limit}
        if method:
            details["method"] = method
        super().__init__(
            f"can not process more than {limit} tokens, got {size}",
            field="token_ids",
            details=details,
        )
        self.code = "BATCH_SIZE_EXCEEDED"
        self.size = size
        self.limit = limit


class MissingArgumentError(ValidationError):
    """
    Raised when a required identifier is empty.

    Example:
        >>> raise MissingArgumentError("tx_hash")
    """

    def __init__(self, argument: str, *, method: Optional[str] = None) -> None:
        details: Dict[str, Any] = {}
        if method:
            details["method"] = method
        super().__init__(f"{argument} not provided", field=argument, details=details)
        self.code = "MISSING_ARGUMENT"
        self.argument = argument


class InvalidAddressError(ValidationError):
    """Raised when an Ethereum address is malformed."""

    def __init__(self, address: str, *, field: str = "address", reason: Optional[str] = None) -> None:
        message = f"Invalid {field}: {address!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, field=field, details={"address": address})
        self.code = "INVALID_ADDRESS"
        self.address = address


class InvalidTokenIdError(ValidationError):
    """Raised when a token id or amount cannot be read as a uint256."""

    def __init__(self, value: Any, *, field: str = "token_id", reason: Optional[str] = None) -> None:
        message = f"Invalid {field}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, field=field, details={"value": str(value)})
        self.code = "INVALID_TOKEN_ID"
        self.value = value


# =============================================================================
# Orchestration
# =============================================================================


class RoleMismatchError(MaticBridgeError):
    """
    Raised when an operation runs on a wrapper bound to the wrong chain role.

    Attributes:
        method: Name of the guarded operation.
        required_role: "parent" or "child".
    """

    def __init__(self, method: str, required_role: str) -> None:
        chain = "root" if required_role == "parent" else "child"
        super().__init__(
            f"The action {method} is allowed only on {chain} token.",
            code="ALLOWED_ON_ROOT" if required_role == "parent" else "ALLOWED_ON_CHILD",
            details={"method": method, "required_role": required_role},
        )
        self.method = method
        self.required_role = required_role


class MissingSenderError(MaticBridgeError):
    """Raised when a write has no resolvable ``from`` address."""

    def __init__(self, method: Optional[str] = None) -> None:
        details: Dict[str, Any] = {}
        if method:
            details["method"] = method
        super().__init__(
            "from is not specified",
            code="MISSING_SENDER",
            details=details,
        )
        self.method = method


class AbiNotFoundError(MaticBridgeError):
    """Raised when no ABI is registered for a contract name and bridge type."""

    def __init__(
        self,
        contract_name: str,
        bridge_type: Optional[str] = None,
        *,
        source: Optional[str] = None,
    ) -> None:
        details: Dict[str, Any] = {"contract_name": contract_name, "bridge_type": bridge_type}
        if source:
            details["source"] = source
        location = f"{bridge_type}/{contract_name}" if bridge_type else contract_name
        super().__init__(
            f"ABI not found for {location}",
            code="ABI_NOT_FOUND",
            details=details,
        )
        self.contract_name = contract_name
        self.bridge_type = bridge_type


class ExitProofError(MaticBridgeError):
    """
    Raised when the exit-proof builder returns an empty payload or exit
    hash for a burn. ``tx_hash`` is the burn transaction.
    """

    def __init__(self, burn_tx_hash: str, *, what: str = "exit payload") -> None:
        super().__init__(
            f"{what} is empty for burn transaction",
            code="EXIT_PROOF_EMPTY",
            tx_hash=burn_tx_hash,
            details={"what": what},
        )
