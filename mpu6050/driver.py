"""MPU6050 polling driver producing IMU messages."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .i2c import I2CError, I2CInterface, LinuxI2C

logger = logging.getLogger(__name__)

ACCEL_X_OUT = 0x3B
ACCEL_Y_OUT = 0x3D
ACCEL_Z_OUT = 0x3F
TEMP_OUT = 0x41
GYRO_X_OUT = 0x43
GYRO_Y_OUT = 0x45
GYRO_Z_OUT = 0x47

PWR_MGMT_1 = 0x6B
PWR_MGMT_2 = 0x6C
DEV_ADDR = 0x68

GYRO_SCALE = 131.0  # LSB per deg/s at +-250 deg/s
ACCEL_SCALE = 16384.0  # LSB per g at +-2 g
RAD_TO_DEG = 57.324
FRAME_ID = "imu"
DEFAULT_PERIOD = 0.1
_WARN_INTERVAL = 5.0


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Header:
    stamp: float = 0.0
    frame_id: str = ""


@dataclass
class ImuMessage:
    header: Header = field(default_factory=Header)
    angular_velocity: Vector3 = field(default_factory=Vector3)
    linear_acceleration: Vector3 = field(default_factory=Vector3)


def to_signed16(high: int, low: int) -> int:
    """Combine two register bytes into a signed 16-bit value."""
    value = (high << 8) + low
    if value >= 0x8000:
        return value - 0x10000
    return value


def _atan_ratio(num: float, den: float) -> float:
    if den == 0:
        if num == 0:
            return math.nan
        return math.copysign(math.pi / 2, num) * math.copysign(1.0, den)
    return math.atan(num / den)


def roll_pitch(accel: Sequence[float]) -> tuple[float, float]:
    """Return (roll, pitch) in degrees estimated from an acceleration vector."""
    x, y, z = accel
    roll = _atan_ratio(y, z) * RAD_TO_DEG
    pitch = _atan_ratio(-x, math.sqrt(y * y + z * z)) * RAD_TO_DEG
    return roll, pitch


class Mpu6050Driver:
    """Polls an MPU6050 over I2C and hands each reading to ``publish``."""

    def __init__(
        self,
        i2c: Optional[I2CInterface] = None,
        publish: Optional[Callable[[ImuMessage], object]] = None,
        period: float = DEFAULT_PERIOD,
    ) -> None:
        if period < 0:
            raise ValueError(f"period must not be negative, got {period}")
        self.i2c = i2c if i2c is not None else LinuxI2C()
        self.publish = publish
        self.period = period
        self.fd: Optional[int] = None
        self.attitude: Optional[tuple[float, float]] = None
        self._last_warning: Optional[float] = None
        self._initialize()

    def _initialize(self) -> None:
        try:
            self.fd = self.i2c.setup(DEV_ADDR)
        except I2CError as exc:
            logger.error("I2C setup failed: no device found at address 0x%02X (%s)", DEV_ADDR, exc)
            return
        # The SLEEP bit in PWR_MGMT_1 is set on power-on; clear it to wake the device.
        self.i2c.write_reg8(self.fd, PWR_MGMT_1, 0x00)

    def read_word(self, reg: int) -> int:
        """Read the signed 16-bit value whose high byte is at ``reg``."""
        if self.fd is None:
            raise I2CError("I2C not initialized")
        high = self.i2c.read_reg8(self.fd, reg)
        low = self.i2c.read_reg8(self.fd, reg + 1)
        return to_signed16(high, low)

    def on_timer(self) -> Optional[ImuMessage]:
        """Take one reading and publish it; return the message, or None if no device."""
        if self.fd is None:
            now = time.monotonic()
            if self._last_warning is None or now - self._last_warning >= _WARN_INTERVAL:
                self._last_warning = now
                logger.warning("I2C not initialized, skipping update")
            return None
        gyro = Vector3(*(self.read_word(reg) / GYRO_SCALE for reg in (GYRO_X_OUT, GYRO_Y_OUT, GYRO_Z_OUT)))
        accel = Vector3(
            *(self.read_word(reg) / ACCEL_SCALE for reg in (ACCEL_X_OUT, ACCEL_Y_OUT, ACCEL_Z_OUT))
        )
        self.attitude = roll_pitch((accel.x, accel.y, accel.z))
        message = ImuMessage(
            header=Header(stamp=time.time(), frame_id=FRAME_ID),
            angular_velocity=gyro,
            linear_acceleration=accel,
        )
        if self.publish is not None:
            self.publish(message)
        return message

    def run(self, iterations: Optional[int] = None) -> int:
        """Fire the timer every ``period`` seconds; forever if ``iterations`` is None."""
        count = 0
        next_tick = time.monotonic()
        while iterations is None or count < iterations:
            next_tick += self.period
            delay = next_tick - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            self.on_timer()
            count += 1
        return count