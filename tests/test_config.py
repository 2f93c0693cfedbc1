"""Tests for environment-driven configuration."""
import pytest

from qrstamp.config import StampConfig


def test_defaults():
    config = StampConfig.from_env({})
    assert config == StampConfig()
    assert config.name_prefix == "qrcode"
    assert config.pages == 1


def test_env_overrides():
    config = StampConfig.from_env({
        "QRSTAMP_OUTPUT_DIR": "/tmp/codes",
        "QRSTAMP_PREFIX": "exam",
        "QRSTAMP_SET_ID": "7",
        "QRSTAMP_PAGES": "4",
        "QRSTAMP_LOG_LEVEL": "debug",
    })
    assert config.output_dir == "/tmp/codes"
    assert config.name_prefix == "exam"
    assert (config.set_id, config.pages) == (7, 4)
    assert config.log_level == "DEBUG"


def test_blank_integer_falls_back_to_default():
    assert StampConfig.from_env({"QRSTAMP_BOX_SIZE": " "}).box_size == 10


def test_invalid_integer_names_the_variable():
    with pytest.raises(ValueError, match="QRSTAMP_PAGES"):
        StampConfig.from_env({"QRSTAMP_PAGES": "three"})
