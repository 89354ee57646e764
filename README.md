# mpu6050

This is a small polling driver for the MPU6050 accelerometer and gyroscope.

## What it does

At start-up, `Mpu6050Driver` opens the sensor at I2C address `0x68`. It then wakes the sensor from sleep by writing `0x00` to the `PWR_MGMT_1` register (`0x6B`).

Each call to `on_timer()` does the following:

- It reads the three gyroscope words and the three accelerometer words.
- It turns each big-endian 16-bit two's-complement value into physical units:
  - gyroscope: counts / 131
  - accelerometer: counts / 16384
- It builds an `ImuMessage`. The message has a `Header` with a wall-clock `stamp` and frame id `imu`, plus two `Vector3` fields: `angular_velocity` and `linear_acceleration`.
- It passes the message to the `publish` callback, if one was given, and also returns it.
- It stores the roll and pitch estimate from the accelerometer reading, in degrees, in `driver.attitude`.

`run(iterations)` calls `on_timer()` once every `period` seconds. The default period is 0.1 s. With no iteration count, it runs forever.

## When the device cannot be opened

If `setup` raises `I2CError`, the driver does three things:

- It logs an error.
- It never writes to the sensor.
- Every tick returns `None` and logs a warning, at most once every five seconds.

Errors during a transfer, after setup has succeeded, are raised as `I2CError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
mpu6050 --help
```

The `mpu6050` command opens the sensor through `LinuxI2C`, using the Linux i2c-dev devices. It prints one line for every message it reads, for example:

```
1700000000.123 imu gyro=(1.0000, 0.0000, 0.0000) accel=(0.2500, 0.0000, 0.0000)
```

Options:

- `--bus` — the I2C bus number (`/dev/i2c-N`) or a device path. The default is `1`.
- `--period` — the number of seconds between readings. The default is `0.1`.
- `--count` — stop after this many readings. Without it, the command runs until interrupted.

## Library use

I2C access sits behind `mpu6050.i2c.I2CInterface`. The driver can therefore run against either of these:

- real hardware, through `LinuxI2C`, which can be used as a context manager and closes its handles on exit;
- any object that implements `setup`, `read_reg8` and `write_reg8`.

```python
from mpu6050.driver import Mpu6050Driver, to_signed16
from mpu6050.i2c import I2CInterface


class FakeBus(I2CInterface):
    def __init__(self, registers):
        self.registers = registers

    def setup(self, dev_addr):
        return 3  # any handle; raise I2CError to signal a missing device

    def read_reg8(self, fd, reg):
        return self.registers.get(reg, 0)

    def write_reg8(self, fd, reg, data):
        self.registers[reg] = data


bus = FakeBus({0x3B: 0x10, 0x3C: 0x00})  # accel X = 0x1000 -> 0.25 g
driver = Mpu6050Driver(i2c=bus, publish=print, period=0.1)
driver.run(1)

assert to_signed16(0x80, 0x00) == -32768
```

`roll_pitch(accel)` returns the roll and pitch angles, in degrees, implied by an accelerometer reading `(x, y, z)`.

## What it does not do

The package does not connect to any messaging system. Readings go only to the `publish` callback you supply, or to standard output from the command.

The package does not configure these sensor settings:

- measurement ranges (it assumes ±250 °/s and ±2 g);
- filters;
- the temperature sensor.