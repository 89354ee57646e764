"""Polling driver for the MPU6050 IMU over I2C, with a Linux i2c-dev backend and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "driver", "i2c"]