[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpu6050"
version = "0.1.0"
description = "Polling driver for the MPU6050 six-axis IMU over I2C, producing IMU messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["mpu6050", "imu", "i2c", "accelerometer", "gyroscope", "sensor", "raspberry-pi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mpu6050 = "mpu6050.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mpu6050"]

[tool.pytest.ini_options]
addopts = "-ra"
