import io

import pytest

from parking_lot import main as main_module
from parking_lot.main import build_parser, main, resolve_config


@pytest.fixture
def no_default_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_resolve_defaults(no_default_config) -> None:
    config = resolve_config(build_parser().parse_args([]))
    assert config.lot.capacity == 10
    assert config.logging.level == "WARNING"


def test_resolve_default_config_path(no_default_config) -> None:
    config_dir = no_default_config / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("lot:\n  capacity: 2\n")

    config = resolve_config(build_parser().parse_args([]))

    assert config.lot.capacity == 2


def test_overrides_win(no_default_config) -> None:
    path = no_default_config / "lot.yaml"
    path.write_text("lot:\n  capacity: 2\nlogging:\n  level: ERROR\n")

    args = build_parser().parse_args(["--config", str(path), "--capacity", "7", "--log-level", "info"])
    config = resolve_config(args)

    assert config.lot.capacity == 7
    assert config.logging.level == "INFO"


def test_main_runs_menu(no_default_config, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n8\n"))

    code = main(["--capacity", "2"])

    output = capsys.readouterr().out
    assert code == 0
    assert "Car parked in spot 0" in output
    assert "Spot 1: Available" in output


def test_main_passes_capacity_to_registry(no_default_config, monkeypatch) -> None:
    seen = {}

    class FakeSession:
        def __init__(self, registry):
            seen["capacity"] = registry.capacity

        def run(self) -> int:
            return 0

    monkeypatch.setattr(main_module, "MenuSession", FakeSession)

    assert main(["--capacity", "0"]) == 0
    assert seen["capacity"] == 0


@pytest.mark.parametrize(
    "argv",
    [["--config", "missing.yaml"], ["--capacity", "-1"], ["--log-level", "loud"]],
)
def test_main_reports_bad_config(no_default_config, capsys, argv) -> None:
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert "Parking Lot Menu:" not in captured.out


@pytest.mark.parametrize(
    "text",
    ["lot: [unclosed\n", "- 1\n- 2\n", "lot:\n  capacity: true\n"],
)
def test_main_reports_bad_config_file(no_default_config, capsys, text: str) -> None:
    path = no_default_config / "bad.yaml"
    path.write_text(text)

    assert main(["--config", str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert captured.out == ""
