"""Command line entry point that polls an MPU6050 and prints its readings."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence, Union

from .driver import DEFAULT_PERIOD, ImuMessage, Mpu6050Driver
from .i2c import LinuxI2C


def _bus(value: str) -> Union[int, str]:
    return int(value) if value.isdigit() else value


def _period(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid period: {value!r}") from exc
    if seconds < 0:
        raise argparse.ArgumentTypeError("period must not be negative")
    return seconds


def _count(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("count must not be negative")
    return number


def _print_message(message: ImuMessage) -> None:
    g = message.angular_velocity
    a = message.linear_acceleration
    print(
        f"{message.header.stamp:.3f} {message.header.frame_id} "
        f"gyro=({g.x:.4f}, {g.y:.4f}, {g.z:.4f}) "
        f"accel=({a.x:.4f}, {a.y:.4f}, {a.z:.4f})",
        flush=True,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mpu6050", description="Poll an MPU6050 IMU over I2C.")
    parser.add_argument("--bus", type=_bus, default=1, help="I2C bus number or device path")
    parser.add_argument("--period", type=_period, default=DEFAULT_PERIOD, help="seconds between readings")
    parser.add_argument("--count", type=_count, default=None, help="stop after this many readings")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    with LinuxI2C(args.bus) as i2c:
        driver = Mpu6050Driver(i2c, _print_message, period=args.period)
        try:
            driver.run(args.count)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())