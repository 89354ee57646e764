"""I2C register access: an abstract interface and a Linux i2c-dev backend."""

from __future__ import annotations

import abc
import errno
import os
from pathlib import Path
from typing import Union

# ioctl request that binds an i2c-dev file descriptor to a slave address.
I2C_SLAVE = 0x0703

BusSpec = Union[int, str, "os.PathLike[str]"]


class I2CError(OSError):
    """Raised when an I2C device cannot be set up or a transfer fails."""


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..255, got {value}")


class I2CInterface(abc.ABC):
    """Register-level access to a device on an I2C bus."""

    @abc.abstractmethod
    def setup(self, dev_addr: int) -> int:
        """Open the device at ``dev_addr`` and return a handle for it.

        Raises I2CError when no device can be reached.
        """

    @abc.abstractmethod
    def read_reg8(self, fd: int, reg: int) -> int:
        """Read one byte from register ``reg``."""

    @abc.abstractmethod
    def write_reg8(self, fd: int, reg: int, data: int) -> None:
        """Write the byte ``data`` to register ``reg``."""


class LinuxI2C(I2CInterface):
    """I2C backend using the Linux i2c-dev character devices."""

    def __init__(self, bus: BusSpec = 1) -> None:
        if isinstance(bus, int):
            self.path = Path(f"/dev/i2c-{bus}")
        else:
            self.path = Path(bus)
        self._fds: set[int] = set()

    def setup(self, dev_addr: int) -> int:
        if not 0 <= dev_addr <= 0x7F:
            raise ValueError(f"I2C address must be in 0..0x7F, got {dev_addr:#x}")
        try:
            import fcntl
        except ImportError as exc:
            raise I2CError(errno.ENOSYS, "i2c-dev is not available on this platform") from exc
        try:
            fd = os.open(self.path, os.O_RDWR)
        except OSError as exc:
            raise I2CError(exc.errno, f"cannot open {self.path}: {exc.strerror}") from exc
        try:
            fcntl.ioctl(fd, I2C_SLAVE, dev_addr)
        except OSError as exc:
            os.close(fd)
            raise I2CError(
                exc.errno, f"cannot select address 0x{dev_addr:02X} on {self.path}: {exc.strerror}"
            ) from exc
        self._fds.add(fd)
        return fd

    def read_reg8(self, fd: int, reg: int) -> int:
        _check_byte("reg", reg)
        try:
            os.write(fd, bytes([reg]))
            data = os.read(fd, 1)
        except OSError as exc:
            raise I2CError(exc.errno, f"read of register 0x{reg:02X} failed: {exc.strerror}") from exc
        if len(data) != 1:
            raise I2CError(errno.EIO, f"short read from register 0x{reg:02X}")
        return data[0]

    def write_reg8(self, fd: int, reg: int, data: int) -> None:
        _check_byte("reg", reg)
        _check_byte("data", data)
        try:
            written = os.write(fd, bytes([reg, data]))
        except OSError as exc:
            raise I2CError(exc.errno, f"write of register 0x{reg:02X} failed: {exc.strerror}") from exc
        if written != 2:
            raise I2CError(errno.EIO, f"short write to register 0x{reg:02X}")

    def close(self) -> None:
        """Close every device handle opened by :meth:`setup`."""
        for fd in self._fds:
            try:
                os.close(fd)
            except OSError:
                pass
        self._fds.clear()

    def __enter__(self) -> LinuxI2C:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()