"""Tests for the duic error hierarchy."""

from __future__ import annotations

import pytest

from duic.errors import (
    ConfigNotFoundError,
    ConfigSourceNotSetError,
    DuicError,
    ErrorCodes,
    WrongConfigValueError,
)


class TestDuicError:
    """Tests for the base error."""

    def test_str_includes_code_and_message(self) -> None:
        """str() renders as '[CODE] message'."""
        err = DuicError(code="X", message="something broke")
        assert str(err) == "[X] something broke"

    def test_details_default_to_empty_dict(self) -> None:
        """details is an empty dict when omitted."""
        assert DuicError(code="X", message="m").details == {}

    def test_timestamp_is_set(self) -> None:
        """An ISO timestamp is recorded at construction."""
        assert "T" in DuicError(code="X", message="m").timestamp


class TestConfigNotFoundError:
    """Tests for ConfigNotFoundError."""

    def test_code_and_key(self) -> None:
        """Carries the CONFIG_NOT_FOUND code and the missing key."""
        err = ConfigNotFoundError("db.url")
        assert err.code == ErrorCodes.CONFIG_NOT_FOUND
        assert err.key == "db.url"
        assert "db.url" in err.message

    def test_is_duic_error(self) -> None:
        """Can be caught as DuicError."""
        with pytest.raises(DuicError):
            raise ConfigNotFoundError("k")

    def test_cause_is_kept(self) -> None:
        """An optional cause is stored."""
        cause = ConfigSourceNotSetError()
        assert ConfigNotFoundError("k", cause=cause).cause is cause


class TestWrongConfigValueError:
    """Tests for WrongConfigValueError."""

    def test_carries_key_value_target_and_cause(self) -> None:
        """Diagnostic fields are all available."""
        cause = ValueError("bad digits")
        err = WrongConfigValueError("app.port", "eighty", "int", cause=cause)
        assert err.code == ErrorCodes.CONFIG_WRONG_VALUE
        assert err.key == "app.port"
        assert err.value == "eighty"
        assert err.target == "int"
        assert err.cause is cause

    def test_message_mentions_value_and_cause(self) -> None:
        """The message shows the offending value and the underlying reason."""
        err = WrongConfigValueError("k", "eighty", "int", cause=ValueError("bad digits"))
        assert "'eighty'" in err.message
        assert "bad digits" in err.message


class TestErrorCodes:
    """Tests for ErrorCodes constants."""

    def test_codes_match_error_classes(self) -> None:
        """Each error class uses the matching constant."""
        assert ConfigSourceNotSetError().code == ErrorCodes.CONFIG_SOURCE_NOT_SET

    def test_is_immutable(self) -> None:
        """Instances reject attribute assignment."""
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_NOT_FOUND = "other"
