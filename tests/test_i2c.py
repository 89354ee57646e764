import os

import pytest

from mpu6050.i2c import I2CError, I2CInterface, LinuxI2C


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        I2CInterface()


def test_integer_bus_maps_to_dev_path():
    assert str(LinuxI2C(1).path) == "/dev/i2c-1"


def test_setup_missing_device_raises(tmp_path):
    i2c = LinuxI2C(tmp_path / "missing")
    with pytest.raises(I2CError):
        i2c.setup(0x68)


def test_setup_on_non_device_raises_and_leaks_nothing(tmp_path):
    plain = tmp_path / "plain"
    plain.write_bytes(b"")
    i2c = LinuxI2C(plain)
    with pytest.raises(I2CError):
        i2c.setup(0x68)
    assert i2c._fds == set()


def test_setup_rejects_out_of_range_address(tmp_path):
    with pytest.raises(ValueError):
        LinuxI2C(tmp_path / "missing").setup(0x80)


def test_write_reg8_sends_register_then_data(tmp_path):
    target = tmp_path / "wire"
    fd = os.open(target, os.O_RDWR | os.O_CREAT)
    try:
        LinuxI2C(target).write_reg8(fd, 0x6B, 0x00)
    finally:
        os.close(fd)
    assert target.read_bytes() == b"\x6b\x00"


def test_write_reg8_rejects_out_of_range_data(tmp_path):
    with pytest.raises(ValueError):
        LinuxI2C(tmp_path / "missing").write_reg8(0, 0x6B, 256)


def test_read_reg8_short_read_raises(tmp_path):
    target = tmp_path / "empty"
    fd = os.open(target, os.O_RDWR | os.O_CREAT)
    try:
        with pytest.raises(I2CError):
            LinuxI2C(target).read_reg8(fd, 0x3B)
    finally:
        os.close(fd)


def test_transfer_on_closed_handle_raises(tmp_path):
    target = tmp_path / "closed"
    fd = os.open(target, os.O_RDWR | os.O_CREAT)
    os.close(fd)
    i2c = LinuxI2C(target)
    with pytest.raises(I2CError):
        i2c.write_reg8(fd, 0x6B, 0x00)
    with pytest.raises(I2CError):
        i2c.read_reg8(fd, 0x3B)


def test_context_manager_closes_handles(tmp_path):
    target = tmp_path / "ctx"
    fd = os.open(target, os.O_RDWR | os.O_CREAT)
    with LinuxI2C(target) as i2c:
        i2c._fds.add(fd)
    assert i2c._fds == set()
    with pytest.raises(OSError):
        os.fstat(fd)