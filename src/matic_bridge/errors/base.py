"""
Base exception class for the matic_bridge SDK.

All bridge-specific exceptions inherit from MaticBridgeError, which provides
structured error information including error codes, transaction hashes,
and additional context details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class MaticBridgeError(Exception):
    """
    Base exception for all bridge client errors.

    Provides structured error information that can be serialized and logged.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g., "ABI_NOT_FOUND").
        tx_hash: Optional transaction hash related to the error.
        details: Optional dictionary with additional error context.

    Example:
        >>> raise MaticBridgeError(
        ...     "Exit failed",
        ...     code="EXIT_FAILED",
        ...     tx_hash="0x123...",
        ...     details={"token": "0xabc..."}
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "MATIC_BRIDGE_ERROR",
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.tx_hash = tx_hash
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        parts = [f"[{self.code}] {self.message}"]
        if self.tx_hash:
            parts.append(f"(tx: {self.tx_hash[:10]}...)")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"tx_hash={self.tx_hash!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "tx_hash": self.tx_hash,
            "details": self.details,
        }
