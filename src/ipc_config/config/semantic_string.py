"""
Validated String Types

Immutable string wrappers that are validated once, at construction, and are
always valid afterwards. ValidatedFileName holds a single path segment (used
for prefixes and suffixes), ValidatedPath holds a possibly multi-segment
filesystem path (used for directories).

The character rules are the same on every platform so that a configuration
written on one system stays loadable on another.

Author: ipc-config Project
License: MIT
"""

import sys
from typing import Any, Union

from pydantic_core import core_schema

from ..utils.logger import get_logger


logger = get_logger("config.semantic_string")

PATH_SEPARATOR = "\\" if sys.platform == "win32" else "/"
_SEPARATORS = ("/", "\\")


class SemanticStringError(ValueError):
    """Base class for validated string construction failures."""


class EmptyValueError(SemanticStringError):
    """Raised when the raw value has zero length."""


class InvalidCharacterError(SemanticStringError):
    """Raised when the raw value contains a character the type does not allow."""


class ExceedsMaximumLengthError(SemanticStringError):
    """Raised when the raw value is longer than the type's capacity."""


class _SemanticString:
    """
    Common behaviour of the validated string types.

    Subclasses define MAX_LENGTH and FORBIDDEN_CHARACTERS and may override
    _check_content for whole-value rules.
    """

    MAX_LENGTH = 0
    FORBIDDEN_CHARACTERS = frozenset()

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(
                f"{type(self).__name__} requires a str, got {type(value).__name__}"
            )
        self._validate(value)
        object.__setattr__(self, "_value", value)

    @classmethod
    def create(cls, value: str):
        """
        Construct a validated instance from a raw string.

        Args:
            value: Raw string to validate

        Returns:
            Immutable validated instance

        Raises:
            EmptyValueError: If value is empty
            InvalidCharacterError: If value contains a disallowed character
            ExceedsMaximumLengthError: If value is longer than MAX_LENGTH
        """
        return cls(value)

    @classmethod
    def _validate(cls, value: str) -> None:
        name = cls.__name__

        if not value:
            logger.debug(f"Rejected empty {name}")
            raise EmptyValueError(f"{name} must not be empty")

        if len(value) > cls.MAX_LENGTH:
            logger.debug(f"Rejected {name} of length {len(value)}")
            raise ExceedsMaximumLengthError(
                f"{name} exceeds the maximum length of {cls.MAX_LENGTH}: {len(value)}"
            )

        for position, char in enumerate(value):
            # Printable ASCII only
            if not " " <= char <= "~" or char in cls.FORBIDDEN_CHARACTERS:
                logger.debug(f"Rejected {name} {value!r}: invalid character at {position}")
                raise InvalidCharacterError(
                    f"{name} {value!r} contains invalid character {char!r} at position {position}"
                )

        cls._check_content(value)

    @classmethod
    def _check_content(cls, value: str) -> None:
        pass

    def as_string(self) -> str:
        """Return the validated value exactly as it was given."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @classmethod
    def _coerce(cls, value: Any):
        """Pydantic entry point: keep existing instances, construct from str."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise ValueError(
            f"{cls.__name__} expects a str or {cls.__name__}, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class ValidatedFileName(_SemanticString):
    """
    A single filesystem path segment.

    Rejects path separators and the characters reserved by common
    filesystems, as well as the names "." and "..".
    """

    MAX_LENGTH = 255
    FORBIDDEN_CHARACTERS = frozenset('/\\:<>"|?*')

    __slots__ = ()

    @classmethod
    def _check_content(cls, value: str) -> None:
        if value in (".", ".."):
            logger.debug(f"Rejected reserved file name {value!r}")
            raise InvalidCharacterError(f"{value!r} is a reserved file name")


class ValidatedPath(_SemanticString):
    """
    A syntactically valid filesystem path, relative or absolute.

    Both "/" and "\\" are accepted as separators. ":" is only allowed as a
    drive colon: directly after a leading letter and followed by a separator or
    nothing.
    """

    MAX_LENGTH = 4096
    FORBIDDEN_CHARACTERS = frozenset('<>"|?*')

    __slots__ = ()

    @classmethod
    def _check_content(cls, value: str) -> None:
        position = value.find(":")
        if position == 1 and value[0].isalpha() and value[2:3] in ("", "/", "\\"):
            position = value.find(":", 2)
        if position != -1:
            logger.debug(f"Rejected ValidatedPath {value!r}: colon at {position}")
            raise InvalidCharacterError(
                f"ValidatedPath {value!r} contains invalid character ':' at position {position}"
            )

    def __fspath__(self) -> str:
        return self._value

    def is_absolute(self) -> bool:
        """Check whether the path is rooted (POSIX root or Windows drive)."""
        value = self._value
        if value.startswith(_SEPARATORS):
            return True
        return len(value) >= 3 and value[0].isalpha() and value[1] == ":" and value[2] in _SEPARATORS

    def join(self, entry: Union["ValidatedPath", ValidatedFileName, str]) -> "ValidatedPath":
        """
        Append a path entry, returning a new path.

        Leading separators of entry are dropped and a separator is inserted
        only when the path does not already end with one. The receiver is not
        modified.

        Args:
            entry: File name or path to append

        Returns:
            The combined path

        Raises:
            SemanticStringError: If entry is a str that is not a valid path, or
                the combined path is too long
        """
        if isinstance(entry, str):
            entry = ValidatedPath(entry)

        head = self._value
        tail = str(entry).lstrip("/\\")

        if not tail:
            return self
        if head.endswith(_SEPARATORS):
            return ValidatedPath(head + tail)
        return ValidatedPath(head + PATH_SEPARATOR + tail)
