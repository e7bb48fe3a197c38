"""Runtime values and the variable environment."""

from __future__ import annotations

import enum
import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union


def _wrap_int(i: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    i = int(i) & 0xFFFFFFFF
    return i - (1 << 32) if i & 0x80000000 else i


def _to_float32(f: float) -> float:
    """Round a number to single precision."""
    f = float(f)
    try:
        return struct.unpack("f", struct.pack("f", f))[0]
    except OverflowError:
        return math.copysign(math.inf, f)


class ValueType(enum.Enum):
    """Kinds of runtime value."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"


@dataclass(frozen=True)
class Value:
    """A typed runtime value."""

    type: ValueType
    data: Union[int, float, str, bool]

    @classmethod
    def int_(cls, i: int) -> "Value":
        """A 32-bit signed integer value; wider input wraps around."""
        return cls(ValueType.INT, _wrap_int(i))

    @classmethod
    def float_(cls, f: float) -> "Value":
        """A single-precision floating-point value."""
        return cls(ValueType.FLOAT, _to_float32(f))

    @classmethod
    def string(cls, s: str) -> "Value":
        """A string value."""
        return cls(ValueType.STRING, str(s))

    @classmethod
    def bool_(cls, b: object) -> "Value":
        """A boolean value; any truthy input becomes True."""
        return cls(ValueType.BOOL, bool(b))

    def truthy(self) -> bool:
        """Whether the value counts as true."""
        return bool(self.data)


class Environment:
    """A mapping of variable names to values."""

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def insert(self, key: str, value: Value) -> None:
        """Bind ``key`` to ``value``, replacing any earlier binding."""
        self._values[key] = value

    def insert_int(self, key: str, i: int) -> None:
        self.insert(key, Value.int_(i))

    def insert_float(self, key: str, f: float) -> None:
        self.insert(key, Value.float_(f))

    def insert_string(self, key: str, s: str) -> None:
        self.insert(key, Value.string(s))

    def insert_bool(self, key: str, b: object) -> None:
        self.insert(key, Value.bool_(b))

    def get(self, key: str) -> Optional[Value]:
        """The value bound to ``key``, or None if it is unbound."""
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)