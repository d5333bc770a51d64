"""
Tests for the client Logger, ErrorHelper and SDK logging configuration.
"""

import logging

import pytest

from matic_bridge.errors import (
    AbiNotFoundError,
    BatchSizeExceededError,
    ErrorType,
    MissingArgumentError,
    MissingSenderError,
    RoleMismatchError,
)
from matic_bridge.utils import ErrorHelper, Logger
from matic_bridge.utils.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    disable_logging,
    get_logger,
    set_level,
)


@pytest.fixture(autouse=True)
def restore_sdk_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)


class TestErrorHelper:
    """Tests for typed error construction."""

    @pytest.mark.parametrize(
        "error_type, info, expected",
        [
            (ErrorType.ALLOWED_ON_ROOT, "deposit", RoleMismatchError),
            (ErrorType.ALLOWED_ON_CHILD, "withdraw_start", RoleMismatchError),
            (ErrorType.MISSING_SENDER, "approve", MissingSenderError),
            (ErrorType.MISSING_ARGUMENT, "tx_hash", MissingArgumentError),
            (ErrorType.BATCH_SIZE_EXCEEDED, (21, 20), BatchSizeExceededError),
            (ErrorType.ABI_NOT_FOUND, ("ChildERC721", "pos"), AbiNotFoundError),
        ],
    )
    def test_get_returns_typed_error(self, error_type, info, expected) -> None:
        error = ErrorHelper(error_type, info).get()
        assert isinstance(error, expected)

    def test_throw_raises(self) -> None:
        with pytest.raises(RoleMismatchError) as exc_info:
            ErrorHelper(ErrorType.ALLOWED_ON_ROOT, "deposit").throw()
        assert exc_info.value.message == "The action deposit is allowed only on root token."

    def test_child_message(self) -> None:
        error = ErrorHelper(ErrorType.ALLOWED_ON_CHILD, "withdraw_start").get()
        assert error.message == "The action withdraw_start is allowed only on child token."
        assert error.to_dict()["details"] == {
            "method": "withdraw_start",
            "required_role": "child",
        }


class TestLogger:
    """Tests for the per-client Logger."""

    def test_disabled_by_default(self, caplog) -> None:
        logger = Logger(name="matic_bridge.test")
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            logger.log("process write", method="approve")
        assert caplog.records == []

    def test_enabled_logs_context(self, caplog) -> None:
        logger = Logger(name="matic_bridge.test")
        logger.enable()
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            logger.log("process write", method="approve")

        record, = caplog.records
        assert record.getMessage() == "process write"
        assert record.method == "approve"
        assert record.name == "matic_bridge.test"

    def test_error_returns_helper(self) -> None:
        helper = Logger().error(ErrorType.MISSING_SENDER)
        assert isinstance(helper, ErrorHelper)
        assert isinstance(helper.get(), MissingSenderError)


class TestLoggingConfiguration:
    """Tests for the SDK logger namespace."""

    def test_get_logger_nests_names(self) -> None:
        assert get_logger("matic_bridge.pos").name == "matic_bridge.pos"
        assert get_logger("app").name == "matic_bridge.app"

    def test_configure_replaces_handler(self) -> None:
        first = logging.NullHandler()
        second = logging.NullHandler()
        root = configure_logging("debug", handler=first)
        configure_logging(logging.INFO, handler=second)

        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.INFO

    def test_disable_silences_children(self) -> None:
        set_level(logging.DEBUG)
        disable_logging()
        assert not get_logger("matic_bridge.pos").isEnabledFor(logging.CRITICAL)
