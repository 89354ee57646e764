import logging

import pytest

from mpu6050.cli import main


def test_missing_device_runs_without_output(tmp_path, capsys, caplog):
    with caplog.at_level(logging.ERROR):
        code = main(["--bus", str(tmp_path / "missing"), "--count", "2", "--period", "0"])
    assert code == 0
    assert capsys.readouterr().out == ""
    assert "0x68" in caplog.text


def test_missing_device_warns_while_polling(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        main(["--bus", str(tmp_path / "missing"), "--count", "1", "--period", "0"])
    assert "I2C not initialized" in caplog.text


def test_zero_count_returns_immediately(tmp_path, capsys):
    assert main(["--bus", str(tmp_path / "missing"), "--count", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_negative_period_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--bus", str(tmp_path / "missing"), "--period", "-1"])
    assert info.value.code == 2


def test_invalid_count_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--bus", str(tmp_path / "missing"), "--count", "many"])
    assert info.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--period" in capsys.readouterr().out