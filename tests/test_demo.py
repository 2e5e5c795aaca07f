import io

import pytest

from metricskit.demo import main, run_demo
from metricskit.registry import create_registry


def test_run_demo_prints_shared_values(tmp_path):
    out = io.StringIO()
    run_demo(tmp_path / "example.txt", create_registry(), 0.1, 0.05, out)
    assert out.getvalue().splitlines() == ["36 36", "0 0", "62"]


def test_run_demo_dumps_registry(tmp_path):
    path = tmp_path / "example.txt"
    reg = create_registry()
    run_demo(path, reg, 0.1, 0.05, io.StringIO())
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines
    assert '"CPU" 0.97' in lines[0]
    assert '"HTTP RPS" 62' in lines[0]
    assert set(reg.metric_group()) == {"CPU", "HTTP RPS"}


def test_run_demo_resets_after_dump(tmp_path):
    reg = create_registry()
    run_demo(tmp_path / "example.txt", reg, 0.1, 0.05, io.StringIO())
    assert all(
        metric.value() == 0 for metric in reg.metric_group().values()
    )


def test_main_runs(tmp_path, capsys):
    path = tmp_path / "out.txt"
    code = main(["--output", str(path), "--duration", "0.1", "--interval", "0.05"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["36 36", "0 0", "62"]
    assert "HTTP RPS" in path.read_text(encoding="utf-8")


def test_main_rejects_bad_interval(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--output", str(tmp_path / "o.txt"), "--interval", "0"])
    assert info.value.code == 2