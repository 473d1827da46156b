"""Tests for ValueKind classification."""

from __future__ import annotations

import pytest

from duic.value import ValueKind, classify


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, ValueKind.ABSENT),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.INTEGER),
            (2**70, ValueKind.INTEGER),
            (1.5, ValueKind.FLOAT),
            ("", ValueKind.TEXT),
            ("42", ValueKind.TEXT),
            ({"a": 1}, ValueKind.OTHER),
            ([1, 2], ValueKind.OTHER),
        ],
    )
    def test_kinds(self, value: object, kind: ValueKind) -> None:
        assert classify(value) is kind

    def test_bool_is_not_integer(self) -> None:
        """bool subclasses int but classifies as BOOLEAN."""
        assert classify(True) is not ValueKind.INTEGER

    def test_kind_is_str_enum(self) -> None:
        assert ValueKind.TEXT == "text"
