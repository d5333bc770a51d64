"""
Tests for token id / amount conversion and address validation.
"""

import pytest
from eth_abi import encode

from matic_bridge.constants import MAX_BATCH_SIZE, MAX_UINT256
from matic_bridge.errors import (
    BatchSizeExceededError,
    InvalidAddressError,
    InvalidTokenIdError,
    MissingArgumentError,
    ValidationError,
)
from matic_bridge.utils import (
    encode_uint256,
    encode_uint256_array,
    is_valid_address,
    require_tx_hash,
    to_hex,
    to_uint256,
    validate_address,
    validate_many,
)


class TestToUint256:
    """Tests for to_uint256."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (7, 7),
            ("7", 7),
            ("0x07", 7),
            ("0X1f", 31),
            (" 12 ", 12),
            (0, 0),
            (MAX_UINT256, MAX_UINT256),
        ],
    )
    def test_accepted(self, value, expected) -> None:
        assert to_uint256(value) == expected

    @pytest.mark.parametrize("value", [-1, MAX_UINT256 + 1, "seven", "0xzz", True, 1.5, None])
    def test_rejected(self, value) -> None:
        with pytest.raises(InvalidTokenIdError):
            to_uint256(value)

    def test_field_name_in_error(self) -> None:
        with pytest.raises(InvalidTokenIdError) as exc_info:
            to_uint256("x", field="amount")
        assert exc_info.value.field == "amount"
        assert "amount" in exc_info.value.message

    def test_to_hex(self) -> None:
        assert to_hex("7") == "0x7"


class TestValidateMany:
    """Tests for the batch cap."""

    def test_at_cap(self) -> None:
        ids = validate_many([str(i) for i in range(MAX_BATCH_SIZE)])
        assert ids == list(range(MAX_BATCH_SIZE))

    def test_over_cap(self) -> None:
        with pytest.raises(BatchSizeExceededError) as exc_info:
            validate_many(range(MAX_BATCH_SIZE + 1))

        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert error.code == "BATCH_SIZE_EXCEEDED"
        assert error.details == {"size": 21, "limit": 20, "field": "token_ids"}

    def test_empty_batch(self) -> None:
        assert validate_many([]) == []


class TestEncoding:
    """Tests for uint256 ABI encoding helpers."""

    def test_single(self) -> None:
        assert encode_uint256("0x05") == encode(["uint256"], [5])
        assert len(encode_uint256(5)) == 32

    def test_array(self) -> None:
        assert encode_uint256_array([1, "2"]) == encode(["uint256[]"], [[1, 2]])


class TestAddressValidation:
    """Tests for address and tx hash checks."""

    def test_valid(self) -> None:
        address = "0x" + "aB" * 20
        assert is_valid_address(address)
        assert validate_address(address) == address

    def test_empty(self) -> None:
        with pytest.raises(MissingArgumentError):
            validate_address("", "user_address")

    @pytest.mark.parametrize("address", ["0xA", "1234", "0x" + "g" * 40])
    def test_malformed(self, address) -> None:
        assert not is_valid_address(address)
        with pytest.raises(InvalidAddressError):
            validate_address(address)

    def test_require_tx_hash(self) -> None:
        assert require_tx_hash("0xabc") == "0xabc"
        with pytest.raises(MissingArgumentError) as exc_info:
            require_tx_hash("")
        assert str(exc_info.value) == "[MISSING_ARGUMENT] tx_hash not provided"
