"""Typed configuration values."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigType(enum.Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass
class Config:
    """A configuration value tagged with its type."""

    type: ConfigType
    value: bool | int | float | str

    def __post_init__(self) -> None:
        value = self.value
        if self.type is ConfigType.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"expected bool, got {type(value).__name__}")
        elif self.type is ConfigType.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"expected int, got {type(value).__name__}")
            if not _INT_MIN <= value <= _INT_MAX:
                raise ValueError(f"int value out of range: {value}")
        elif self.type is ConfigType.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"expected float, got {type(value).__name__}")
            # Stored with single precision.
            self.value = struct.unpack("f", struct.pack("f", float(value)))[0]
        elif self.type is ConfigType.STRING:
            if not isinstance(value, str):
                raise TypeError(f"expected str, got {type(value).__name__}")
        else:
            raise TypeError(f"unknown config type: {self.type!r}")


@dataclass
class ConfigEntry:
    """A named configuration value."""

    key: str
    config: Config