"""Tests for the ``scaffold`` command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from conftest import snapshot, write_descriptor

from tree_scaffold.__main__ import main

DESCRIPTOR = '{"A": {"x.txt": "hi", "B": {}}}'


@pytest.fixture(autouse=True)
def _reset_logger_level():
    yield
    logging.getLogger("tree_scaffold").setLevel(logging.NOTSET)


@pytest.fixture
def descriptor(tmp_path: Path) -> Path:
    return write_descriptor(tmp_path / "layout.json", DESCRIPTOR)


def test_scaffolds_descriptor_into_base(descriptor: Path, base: Path, caplog) -> None:
    main([str(descriptor), "--base", str(base)])

    assert snapshot(base) == {"A", "A/x.txt", "A/B"}
    assert f"Created file: {base / 'A' / 'x.txt'}" in caplog.text


def test_no_arguments_builds_myos_in_cwd(base: Path, monkeypatch) -> None:
    monkeypatch.chdir(base)
    main([])
    assert (base / "MyOS" / "kernel" / "core" / "kernel.c").is_file()
    assert (base / "MyOS" / "userspace" / "gui" / "applications" / "calculator").is_dir()


def test_json_report(descriptor: Path, base: Path, capsys) -> None:
    main([str(descriptor), "--base", str(base), "--json", "-q"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["dry_run"] is False
    assert [e["kind"] for e in payload["created"]] == ["directory", "file", "directory"]
    assert payload["created"][1]["path"] == str(base / "A" / "x.txt")


def test_no_force_preserves_files(descriptor: Path, base: Path) -> None:
    (base / "A").mkdir()
    (base / "A" / "x.txt").write_text("local edit", encoding="utf-8")

    main([str(descriptor), "--base", str(base), "--no-force"])

    assert (base / "A" / "x.txt").read_text(encoding="utf-8") == "local edit"
    assert (base / "A" / "B").is_dir()


def test_dry_run_prints_plan(descriptor: Path, base: Path, capsys) -> None:
    main([str(descriptor), "--base", str(base), "--dry-run"])
    out = capsys.readouterr().out
    assert "Scaffold Plan" in out
    assert "2 folders | 1 file" in out
    assert snapshot(base) == set()


def test_failure_exits_nonzero_naming_path(descriptor: Path, base: Path, capsys) -> None:
    (base / "A").write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(descriptor), "--base", str(base)])

    assert excinfo.value.code == 1
    assert str(base / "A") in capsys.readouterr().err


def test_invalid_base_exits_nonzero(descriptor: Path, tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(descriptor), "--base", str(tmp_path / "missing")])
    assert excinfo.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_duplicate_names_exit_without_mutation(tmp_path: Path, base: Path, capsys) -> None:
    path = write_descriptor(tmp_path / "dup.yaml", "A: {}\nA: ''\n")
    with pytest.raises(SystemExit):
        main([str(path), "--base", str(base)])
    assert "Duplicate entry name in descriptor: A" in capsys.readouterr().err
    assert snapshot(base) == set()


def test_unencodable_content_exits_nonzero(tmp_path: Path, base: Path, capsys) -> None:
    path = write_descriptor(tmp_path / "bad.yaml", 'ok.txt: hi\nbad.txt: "\\ud800"\n')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--base", str(base)])
    assert excinfo.value.code == 1
    assert f"Cannot encode content for {base / 'bad.txt'}" in capsys.readouterr().err
    assert snapshot(base) == {"ok.txt"}


def test_unknown_descriptor(base: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-layout", "--base", str(base)])
    assert excinfo.value.code == 1
    assert "Unknown built-in descriptor" in capsys.readouterr().err


def test_list_builtins(capsys) -> None:
    main(["--list"])
    assert "myos" in capsys.readouterr().out.split()


def test_check_renders_tree(descriptor: Path, capsys) -> None:
    main([str(descriptor), "--check"])
    assert capsys.readouterr().out.splitlines() == [
        "layout/",
        "└── A/",
        "    ├── x.txt",
        "    └── B/",
    ]


def test_check_reports_lint_problems(tmp_path: Path, capsys) -> None:
    path = write_descriptor(tmp_path / "clash.yaml", "README.md: ''\nreadme.md: ''\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--check"])
    assert excinfo.value.code == 1
    assert "differs only by case" in capsys.readouterr().err


def test_quiet_suppresses_creation_log(descriptor: Path, base: Path, caplog) -> None:
    main([str(descriptor), "--base", str(base), "-q"])
    assert "Created" not in caplog.text


def test_summary_table_after_run(descriptor: Path, base: Path, capsys) -> None:
    main([str(descriptor), "--base", str(base), "--summary", "-q"])
    out = capsys.readouterr().out
    assert out.startswith("Scaffold Report")
    assert "2 folders | 1 file | 0 already present" in out
