import struct

import pytest

from babylon.config import Config, ConfigEntry, ConfigType


def test_bool_config():
    assert Config(ConfigType.BOOL, True).value is True


def test_int_config():
    assert Config(ConfigType.INT, 42).value == 42


def test_string_config():
    assert Config(ConfigType.STRING, "hello").value == "hello"


def test_float_from_int():
    cfg = Config(ConfigType.FLOAT, 2)
    assert cfg.value == 2.0
    assert isinstance(cfg.value, float)


def test_float_single_precision_roundtrip():
    cfg = Config(ConfigType.FLOAT, 0.1)
    assert struct.pack("f", cfg.value) == struct.pack("f", 0.1)
    assert Config(ConfigType.FLOAT, cfg.value).value == cfg.value


@pytest.mark.parametrize(
    "ctype,value",
    [
        (ConfigType.BOOL, 1),
        (ConfigType.INT, True),
        (ConfigType.INT, 1.5),
        (ConfigType.FLOAT, "1.0"),
        (ConfigType.FLOAT, False),
        (ConfigType.STRING, 3),
    ],
)
def test_type_mismatch(ctype, value):
    with pytest.raises(TypeError):
        Config(ctype, value)


def test_int_out_of_range():
    with pytest.raises(ValueError):
        Config(ConfigType.INT, 2**31)
    assert Config(ConfigType.INT, 2**31 - 1).value == 2**31 - 1


def test_entry_holds_config():
    cfg = Config(ConfigType.STRING, "fullscreen")
    entry = ConfigEntry("mode", cfg)
    assert entry.key == "mode"
    assert entry.config.value == "fullscreen"
    assert entry.config.type is ConfigType.STRING