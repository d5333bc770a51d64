"""
Client logger and typed error factory.

``Logger`` is the per-client facade handed to every wrapper: ``log`` writes
orchestration traces when the client was created with ``log=True``, and
``error`` builds an ErrorHelper that either raises the typed exception or
returns it to the caller.
"""

from __future__ import annotations

from typing import Any, Optional

from matic_bridge.errors import (
    AbiNotFoundError,
    BatchSizeExceededError,
    ErrorType,
    MaticBridgeError,
    MissingArgumentError,
    MissingSenderError,
    RoleMismatchError,
)
from matic_bridge.utils.logging import get_logger

_logger = get_logger(__name__)


class ErrorHelper:
    """
    Typed error built from an ErrorType tag.

    Example:
        >>> ErrorHelper(ErrorType.ALLOWED_ON_ROOT, "deposit").throw()
        Traceback (most recent call last):
        ...
        matic_bridge.errors.bridge.RoleMismatchError: [ALLOWED_ON_ROOT] ...
    """

    def __init__(self, error_type: ErrorType, info: Any = None) -> None:
        self.type = error_type
        self.info = info

    def get(self) -> MaticBridgeError:
        """Construct and return the exception without raising it."""
        if self.type == ErrorType.ALLOWED_ON_ROOT:
            return RoleMismatchError(str(self.info), "parent")
        if self.type == ErrorType.ALLOWED_ON_CHILD:
            return RoleMismatchError(str(self.info), "child")
        if self.type == ErrorType.MISSING_SENDER:
            return MissingSenderError(self.info)
        if self.type == ErrorType.MISSING_ARGUMENT:
            return MissingArgumentError(str(self.info))
        if self.type == ErrorType.BATCH_SIZE_EXCEEDED:
            size, limit = self.info
            return BatchSizeExceededError(size, limit)
        if self.type == ErrorType.ABI_NOT_FOUND:
            contract_name, bridge_type = self.info
            return AbiNotFoundError(contract_name, bridge_type)
        return MaticBridgeError(str(self.info), code=self.type.value.upper())

    def throw(self) -> None:
        """Construct and raise the exception."""
        raise self.get()


class Logger:
    """Per-client logger facade."""

    def __init__(self, enabled: bool = False, name: Optional[str] = None) -> None:
        self.enabled = enabled
        self._logger = get_logger(name) if name else _logger

    def enable(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def log(self, message: str, **context: Any) -> None:
        if self.enabled:
            self._logger.debug(message, extra=context or None)

    def error(self, error_type: ErrorType, info: Any = None) -> ErrorHelper:
        return ErrorHelper(error_type, info)
