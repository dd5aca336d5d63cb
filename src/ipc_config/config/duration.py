"""
Duration

Unsigned time span with nanosecond resolution, stored as whole seconds plus a
sub-second nanosecond part. This is also its persisted shape:
``{"secs": 0, "nanos": 500000000}``.

Author: ipc-config Project
License: MIT
"""

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


NANOS_PER_SECOND = 1_000_000_000
MAX_SECONDS = 2**64 - 1


def _require_non_negative(value, unit: str) -> None:
    if value < 0:
        raise ValueError(f"Duration cannot be negative: {value} {unit}")


def _split_timedelta(value: timedelta) -> dict:
    _require_non_negative(value.total_seconds(), "seconds")
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    secs, rest = divmod(micros, 1_000_000)
    return {"secs": secs, "nanos": rest * 1_000}


class Duration(BaseModel):
    """Immutable, non-negative time span."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    secs: int = Field(
        default=0,
        strict=True,
        ge=0,
        le=MAX_SECONDS,
        description="Whole seconds"
    )
    nanos: int = Field(
        default=0,
        strict=True,
        ge=0,
        lt=NANOS_PER_SECOND,
        description="Sub-second part in nanoseconds"
    )

    @model_validator(mode="before")
    @classmethod
    def accept_timedelta(cls, data: Any) -> Any:
        """Allow a datetime.timedelta wherever a Duration is expected."""
        if isinstance(data, timedelta):
            return _split_timedelta(data)
        return data

    @classmethod
    def from_seconds(cls, seconds: int) -> "Duration":
        _require_non_negative(seconds, "s")
        return cls(secs=seconds)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        return cls.from_nanos(millis * 1_000_000)

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        return cls.from_nanos(micros * 1_000)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        _require_non_negative(nanos, "ns")
        secs, rest = divmod(nanos, NANOS_PER_SECOND)
        return cls(secs=secs, nanos=rest)

    @classmethod
    def from_seconds_float(cls, seconds: float) -> "Duration":
        """Build a Duration from fractional seconds, rounded to the nearest nanosecond."""
        _require_non_negative(seconds, "s")
        return cls.from_nanos(round(seconds * NANOS_PER_SECOND))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        return cls(**_split_timedelta(value))

    def as_secs(self) -> int:
        return self.secs

    def subsec_nanos(self) -> int:
        return self.nanos

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SECOND + self.nanos

    def as_seconds_float(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microsecond resolution."""
        return timedelta(seconds=self.secs, microseconds=self.nanos // 1_000)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.as_nanos() < other.as_nanos()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.as_nanos() <= other.as_nanos()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.as_nanos() > other.as_nanos()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.as_nanos() >= other.as_nanos()

    def __str__(self) -> str:
        if not self.nanos:
            return f"{self.secs}s"
        fraction = f"{self.nanos:09d}".rstrip("0")
        return f"{self.secs}.{fraction}s"
