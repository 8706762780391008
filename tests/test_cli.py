import json
import textwrap
from pathlib import Path

import pytest

from dispatchkit.cli import run_inspect, run_validate

HOOKS = textwrap.dedent(
    """
    class Broken:
        pass

    def first(args):
        pass

    def second(args):
        pass

    def register(dispatcher):
        dispatcher.add_listener("preFoo", first, 10)
        dispatcher.add_listener("preFoo", second)


    def register_broken(dispatcher):
        dispatcher.add_listener("preFoo", Broken())
    """
)


@pytest.fixture()
def hooks(tmp_path: Path, monkeypatch):
    module_name = f"cli_hooks_{tmp_path.name.replace('-', '_')}"
    (tmp_path / f"{module_name}.py").write_text(HOOKS, encoding="utf-8")
    (tmp_path / f"{module_name}_broken.py").write_text(
        HOOKS + "\nregister = register_broken\n", encoding="utf-8"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    for name in ("THREAD_SAFE", "TRACE_DISPATCH", "STRICT_SUBSCRIBERS", "DEFAULT_PRIORITY", "LOG_LEVEL"):
        monkeypatch.delenv(f"DISPATCHKIT_{name}", raising=False)
    return module_name


def test_inspect_module_prints_table(hooks, capsys):
    run_inspect([hooks])
    out = capsys.readouterr().out
    assert "Registered listeners" in out
    assert "preFoo" in out
    assert out.index("first") < out.index("second")


def test_inspect_json_wiring(tmp_path: Path, hooks, capsys):
    path = tmp_path / "wiring.json"
    path.write_text(
        json.dumps({"listeners": [{"events": "postFoo", "target": f"{hooks}:second"}]}),
        encoding="utf-8",
    )
    run_inspect([str(path)])
    assert "postFoo" in capsys.readouterr().out


def test_inspect_exits_on_errors(hooks, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_inspect([f"{hooks}_broken"])
    assert excinfo.value.code == 1
    assert "ERROR" in capsys.readouterr().out


def test_validate_module(hooks, capsys):
    run_validate(["--module", hooks])
    assert "valid" in capsys.readouterr().out


def test_validate_broken_module(hooks):
    with pytest.raises(SystemExit):
        run_validate(["--module", f"{hooks}_broken"])


def test_validate_wiring_file(tmp_path: Path, hooks, capsys):
    path = tmp_path / "wiring.json"
    path.write_text(json.dumps({"listeners": [{"events": [], "target": "x"}]}), encoding="utf-8")
    with pytest.raises(SystemExit):
        run_validate(["--wiring", str(path)])
    assert "Wiring errors" in capsys.readouterr().out


def test_module_without_register(tmp_path: Path, monkeypatch):
    (tmp_path / "cli_no_register.py").write_text("x = 1\n", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    with pytest.raises(RuntimeError, match="register"):
        run_validate(["--module", "cli_no_register"])


def test_inspect_missing_wiring_file_exits(tmp_path: Path, hooks, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_inspect([str(tmp_path / "absent.json")])
    assert excinfo.value.code == 1
    assert "Cannot read wiring file" in capsys.readouterr().out
