"""
Unit Tests for Validated String Types

Tests construction rules, rendering, immutability and path joining of
ValidatedFileName and ValidatedPath.

Author: ipc-config Project
License: MIT
"""

import copy
import os
import pickle

import pytest

from ipc_config.config.semantic_string import (
    PATH_SEPARATOR,
    EmptyValueError,
    ExceedsMaximumLengthError,
    InvalidCharacterError,
    SemanticStringError,
    ValidatedFileName,
    ValidatedPath,
)


class TestValidatedFileName:
    """Test suite for ValidatedFileName."""

    def test_create_renders_input_exactly(self):
        """Test that the accepted value is kept byte-for-byte."""
        name = ValidatedFileName.create("oh_my_dot")

        assert str(name) == "oh_my_dot"
        assert name.as_string() == "oh_my_dot"
        assert len(name) == 9
        assert repr(name) == "ValidatedFileName('oh_my_dot')"

    def test_empty_value_raises_error(self):
        """Test that an empty name is rejected."""
        with pytest.raises(EmptyValueError):
            ValidatedFileName.create("")

    def test_separator_raises_error(self):
        """Test that a path separator is rejected in a single-segment name."""
        with pytest.raises(InvalidCharacterError):
            ValidatedFileName.create("a/b")

    @pytest.mark.parametrize("char", list('\\:<>"|?*') + ["\0", "\t", "\n", "\x7f", "é"])
    def test_reserved_characters_raise_error(self, char):
        """Test each character a file name may not contain."""
        with pytest.raises(InvalidCharacterError):
            ValidatedFileName.create(f"name{char}suffix")

    @pytest.mark.parametrize("value", [".", ".."])
    def test_reserved_names_raise_error(self, value):
        """Test that the directory self and parent names are rejected."""
        with pytest.raises(InvalidCharacterError):
            ValidatedFileName.create(value)

    @pytest.mark.parametrize("value", [".service", "iox2_", "with space", "a.b-c~d", "..hidden"])
    def test_accepted_names(self, value):
        """Test names that are valid."""
        assert str(ValidatedFileName.create(value)) == value

    def test_maximum_length(self):
        """Test the length boundary."""
        assert len(ValidatedFileName.create("a" * 255)) == 255

        with pytest.raises(ExceedsMaximumLengthError):
            ValidatedFileName.create("a" * 256)

    def test_errors_are_value_errors(self):
        """Test the error hierarchy."""
        for error in (EmptyValueError, InvalidCharacterError, ExceedsMaximumLengthError):
            assert issubclass(error, SemanticStringError)
            assert issubclass(error, ValueError)

    def test_non_string_raises_type_error(self):
        """Test that only str input is accepted."""
        with pytest.raises(TypeError):
            ValidatedFileName(42)

    def test_equality_and_hash(self):
        """Test value equality."""
        assert ValidatedFileName("abc") == ValidatedFileName("abc")
        assert ValidatedFileName("abc") != ValidatedFileName("abd")
        assert ValidatedFileName("abc") != "abc"
        assert ValidatedFileName("abc") != ValidatedPath("abc")
        assert len({ValidatedFileName("abc"), ValidatedFileName("abc")}) == 1

    def test_immutable(self):
        """Test that the value cannot be replaced."""
        name = ValidatedFileName("fixed")

        with pytest.raises(AttributeError):
            name._value = "other"
        with pytest.raises(AttributeError):
            name.extra = 1

        assert str(name) == "fixed"

    def test_copy_and_pickle(self):
        """Test that copies and pickles preserve the value."""
        name = ValidatedFileName("keep_me")

        assert copy.copy(name) is name
        assert copy.deepcopy(name) is name
        assert pickle.loads(pickle.dumps(name)) == name


class TestValidatedPath:
    """Test suite for ValidatedPath."""

    @pytest.mark.parametrize("value", [
        "some_path",
        "look/there/flies/a/dead/pidgin",
        "/tmp/iceoryx2/",
        "c:\\Temp\\iceoryx2\\",
        "relative/../up",
        ".",
    ])
    def test_accepted_paths(self, value):
        """Test paths that are valid."""
        assert ValidatedPath.create(value).as_string() == value

    def test_empty_value_raises_error(self):
        """Test that an empty path is rejected."""
        with pytest.raises(EmptyValueError):
            ValidatedPath.create("")

    @pytest.mark.parametrize("char", list('<>"|?*') + ["\0", "\r", "ß"])
    def test_invalid_characters_raise_error(self, char):
        """Test each character a path may not contain."""
        with pytest.raises(InvalidCharacterError):
            ValidatedPath.create(f"dir/{char}/file")

    @pytest.mark.parametrize("value", ["C:/Temp", "d:", "c:\\Temp", "Z:\\"])
    def test_drive_colon_is_accepted(self, value):
        """Test that a colon right after a leading drive letter is allowed."""
        assert ValidatedPath.create(value).as_string() == value

    @pytest.mark.parametrize("value", ["a:b", "c:relative", "x/y:z", "1:x", ":", "ab:c", "c:\\a:b", "/tmp/a:b"])
    def test_misplaced_colon_raises_error(self, value):
        """Test that a colon anywhere but the drive position is rejected."""
        with pytest.raises(InvalidCharacterError, match="':'"):
            ValidatedPath.create(value)

    def test_maximum_length(self):
        """Test the length boundary."""
        assert len(ValidatedPath.create("a/" * 2048)) == 4096

        with pytest.raises(ExceedsMaximumLengthError):
            ValidatedPath.create("a" * 4097)

    def test_fspath(self):
        """Test that a path can be handed to os functions."""
        path = ValidatedPath("/tmp/iceoryx2/")

        assert os.fspath(path) == "/tmp/iceoryx2/"

    @pytest.mark.parametrize("value,expected", [
        ("/tmp", True),
        ("\\\\server\\share", True),
        ("c:\\Temp", True),
        ("C:/Temp", True),
        ("relative", False),
        ("d:", False),
    ])
    def test_is_absolute(self, value, expected):
        """Test absolute path detection."""
        assert ValidatedPath(value).is_absolute() is expected

    def test_join_after_trailing_separator(self):
        """Test joining onto a path that already ends with a separator."""
        root = ValidatedPath("/tmp/iceoryx2/")

        assert str(root.join(ValidatedPath("services"))) == "/tmp/iceoryx2/services"
        assert str(root.join(ValidatedFileName("x.node"))) == "/tmp/iceoryx2/x.node"
        assert str(root) == "/tmp/iceoryx2/"

    def test_join_inserts_separator(self):
        """Test that a separator is inserted between the two parts."""
        root = ValidatedPath("base")

        assert str(root.join("a/b")) == f"base{PATH_SEPARATOR}a/b"

    def test_join_drops_leading_separator_of_entry(self):
        """Test that the entry is always treated as relative."""
        assert str(ValidatedPath("/").join("/nodes")) == "/nodes"

    def test_join_invalid_str_raises_error(self):
        """Test that a raw entry is validated."""
        with pytest.raises(InvalidCharacterError):
            ValidatedPath("base").join("bad|entry")

    def test_join_too_long_raises_error(self):
        """Test that the combined path is length checked."""
        with pytest.raises(ExceedsMaximumLengthError):
            ValidatedPath("a" * 4000).join("b" * 200)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
