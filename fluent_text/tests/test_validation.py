import pytest

from fluent_text.errors import NullInputError
from fluent_text.validation import is_empty, is_null_or_empty, is_null_or_whitespace, is_whitespace


class TestValidation:
    def test_is_empty(self):
        assert is_empty("")
        assert not is_empty("hello")
        assert not is_empty(" ")

    def test_is_empty_none_raises(self):
        with pytest.raises(NullInputError):
            is_empty(None)

    @pytest.mark.parametrize("value,expected", [(None, True), ("", True), (" ", False), ("hello", False)])
    def test_is_null_or_empty(self, value, expected):
        assert is_null_or_empty(value) is expected

    @pytest.mark.parametrize("value,expected", [(None, True), ("", True), ("   ", True), ("\t\n", True), ("hello", False)])
    def test_is_null_or_whitespace(self, value, expected):
        assert is_null_or_whitespace(value) is expected

    @pytest.mark.parametrize("value,expected", [("   ", True), ("\t", True), ("", False), ("hello", False), (" a ", False)])
    def test_is_whitespace(self, value, expected):
        assert is_whitespace(value) is expected

    def test_is_whitespace_none_raises(self):
        with pytest.raises(NullInputError):
            is_whitespace(None)
