"""Fixed-layout records sent to serial simulator devices."""

from __future__ import annotations

import dataclasses
import struct
from typing import Any


def _validate(record: Any) -> None:
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"{field.name} must be an integer in 0..255, got {value!r}")


def _unpack(name: str, layout: struct.Struct, data: bytes) -> tuple[int, ...]:
    if len(data) != layout.size:
        raise ValueError(f"{name} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack(bytes(data))


_SHIFT_LIGHTS = struct.Struct("<B")
_SIM_HAPTIC = struct.Struct("<8B")
_SIM_WIND = struct.Struct("<2B")


@dataclasses.dataclass(frozen=True)
class ShiftLightsData:
    """Number of lit LEDs on a shift-light strip."""

    litleds: int = 0

    def __post_init__(self) -> None:
        _validate(self)

    def to_bytes(self) -> bytes:
        """Pack the record into its wire layout."""
        return _SHIFT_LIGHTS.pack(*dataclasses.astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> ShiftLightsData:
        """Unpack a record from exactly its wire size of bytes."""
        return cls(*_unpack(cls.__name__, _SHIFT_LIGHTS, data))


@dataclasses.dataclass(frozen=True)
class SimHapticData:
    """Power and effect for each of four haptic motors."""

    motor1: int = 0
    effect1: int = 0
    motor2: int = 0
    effect2: int = 0
    motor3: int = 0
    effect3: int = 0
    motor4: int = 0
    effect4: int = 0

    def __post_init__(self) -> None:
        _validate(self)

    def to_bytes(self) -> bytes:
        """Pack the record into its wire layout."""
        return _SIM_HAPTIC.pack(*dataclasses.astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> SimHapticData:
        """Unpack a record from exactly its wire size of bytes."""
        return cls(*_unpack(cls.__name__, _SIM_HAPTIC, data))


@dataclasses.dataclass(frozen=True)
class SimWindData:
    """Vehicle velocity and fan power for a wind simulator."""

    velocity: int = 0
    fanpower: int = 0

    def __post_init__(self) -> None:
        _validate(self)

    def to_bytes(self) -> bytes:
        """Pack the record into its wire layout."""
        return _SIM_WIND.pack(*dataclasses.astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> SimWindData:
        """Unpack a record from exactly its wire size of bytes."""
        return cls(*_unpack(cls.__name__, _SIM_WIND, data))