import io
from pathlib import Path

import pytest

from capability.console import ConsoleUI
from capability.main import main, run

_CATALOG = "current: vCurrent\nsets:\n  None: []\n  v4.11: [baremetal, MachineAPI]\n  vCurrent: [baremetal, MachineAPI, Console]\n"


def _config_dir(tmp_path: Path) -> Path:
    (tmp_path / "capability_sets.yaml").write_text(_CATALOG, encoding="utf-8")
    return tmp_path


def _run(argv) -> tuple:
    stream = io.StringIO()
    code = run(argv, ui=ConsoleUI(stream=stream))
    return code, stream.getvalue()


def test_run_default_baseline_reports_state(tmp_path: Path) -> None:
    code, out = _run(["--config-dir", str(_config_dir(tmp_path))])
    assert code == 0
    assert "=== Cluster capabilities ===" in out
    assert "- enabled: Console, MachineAPI, baremetal" in out
    assert "- result: not checked" in out


def test_run_cluster_file_and_observed(tmp_path: Path) -> None:
    config_dir = _config_dir(tmp_path)
    cluster = tmp_path / "cluster.yaml"
    cluster.write_text(
        "spec:\n  capabilities:\n    baseline_capability_set: v4.11\n"
        "    additional_enabled_capabilities: [capX]\n",
        encoding="utf-8",
    )
    code, out = _run(
        [
            "--config-dir",
            str(config_dir),
            "--cluster",
            str(cluster),
            "--observed",
            "baremetal",
            "--observed",
            "Console",
        ]
    )
    assert code == 0
    assert "- implicitly enabled: Console" in out
    assert "- capX: enabled" in out
    assert "- Console: implicitly_enabled" in out


def test_run_baseline_flag_overrides_cluster_file(tmp_path: Path) -> None:
    config_dir = _config_dir(tmp_path)
    cluster = tmp_path / "cluster.yaml"
    cluster.write_text("capabilities:\n  baseline_capability_set: v4.11\n", encoding="utf-8")
    code, out = _run(["--config-dir", str(config_dir), "--cluster", str(cluster), "--baseline", "None"])
    assert code == 0
    assert "- enabled: (none)" in out
    assert "- Console: disabled" in out


def test_run_request_with_gaps_exits_one(tmp_path: Path) -> None:
    code, out = _run(["--config-dir", str(_config_dir(tmp_path)), "--baseline", "None", "--request", "Console"])
    assert code == 1
    assert "- missing: Console" in out


def test_run_request_covered_exits_zero(tmp_path: Path) -> None:
    code, out = _run(["--config-dir", str(_config_dir(tmp_path)), "--request", "Console"])
    assert code == 0
    assert "- result: all enabled" in out


def test_quiet_ui_writes_nothing(tmp_path: Path, capsys) -> None:
    code = run(["--config-dir", str(_config_dir(tmp_path)), "--ui", "quiet"])
    assert code == 0
    assert capsys.readouterr().out == ""


def test_main_reports_config_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("sys.argv", ["capability-resolve", "--config-dir", str(tmp_path)])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert "Configuration error" in str(excinfo.value.code)


def test_run_additional_and_observed_file(tmp_path: Path) -> None:
    config_dir = _config_dir(tmp_path)
    observed = tmp_path / "observed.yaml"
    observed.write_text("observed: [MachineAPI, cap-implicit]\n", encoding="utf-8")
    code, out = _run(
        [
            "--config-dir",
            str(config_dir),
            "--baseline",
            "None",
            "--additional",
            "capX",
            "--additional",
            "Console",
            "--observed-file",
            str(observed),
            "--request",
            "capX",
        ]
    )
    assert code == 0
    assert "- enabled: Console, capX" in out
    assert "- implicitly enabled: MachineAPI, cap-implicit" in out
    assert "- result: all enabled" in out
