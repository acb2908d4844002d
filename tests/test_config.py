import pytest
from pydantic import ValidationError

from parking_lot.config import AppConfig, LoggingConfig, LotConfig, load_config


def test_defaults() -> None:
    config = AppConfig()
    assert config.lot.capacity == 10
    assert config.logging.level == "WARNING"


def test_load_config(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("lot:\n  capacity: 4\nlogging:\n  level: debug\n")

    config = load_config(path)

    assert config.lot.capacity == 4
    assert config.logging.level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == AppConfig()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_zero_capacity_is_allowed() -> None:
    assert LotConfig(capacity=0).capacity == 0


def test_negative_capacity_rejected(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("lot:\n  capacity: -2\n")
    with pytest.raises(ValidationError):
        load_config(path)


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


@pytest.mark.parametrize("text", ["lot: [unclosed\n", "lot: {capacity: 3\n", "name: \"unterminated\n"])
def test_malformed_yaml_rejected(tmp_path, text: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match="Invalid configuration file"):
        load_config(path)


@pytest.mark.parametrize("text", ["- 1\n- 2\n", "42\n", "just a string\n"])
def test_non_mapping_yaml_rejected(tmp_path, text: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config(path)


@pytest.mark.parametrize("value", ["true", "\"5\"", "2.0"])
def test_capacity_must_be_a_real_integer(tmp_path, value: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(f"lot:\n  capacity: {value}\n")
    with pytest.raises(ValidationError):
        load_config(path)
