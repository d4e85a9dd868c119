"""Tests for the amem command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from amem.cli import main


def _run(capsys, *args: str) -> str:
    main(list(args))
    return capsys.readouterr().out


def _run_json(capsys, *args: str):
    return json.loads(_run(capsys, "--json", *args))


@pytest.fixture
def notes(write_note) -> None:
    write_note("agent/activity/2026/02/2026-02-21.md", "東京で散歩した\n")
    write_note("agent/activity/2026/02/2026-02-20.md", "大阪で会議した\n")


def test_index_prints_database_path(capsys, memory_dir: Path, notes) -> None:
    out = _run(capsys, "--memory-dir", str(memory_dir), "index")

    assert out.strip() == str(memory_dir / ".index" / "index.db")
    assert (memory_dir / ".index" / "index.db").is_file()


def test_index_json_and_rebuild_flag(capsys, memory_dir: Path, notes) -> None:
    payload = _run_json(capsys, "--memory-dir", str(memory_dir), "index", "--rebuild")

    assert payload == {"index_db": str(memory_dir / ".index" / "index.db"), "status": "ok"}


def test_index_failure_exits_non_zero(capsys, memory_dir: Path, notes) -> None:
    (memory_dir / ".index").write_text("blocked", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--memory-dir", str(memory_dir), "index"])

    assert excinfo.value.code == 1


@pytest.mark.parametrize("command", ["search", "remember"])
def test_search_and_remember_alias(capsys, memory_dir: Path, notes, command: str) -> None:
    out = _run(capsys, "--memory-dir", str(memory_dir), command, "東京", "--top-k", "1")

    score, path, snippet = out.strip().split("\t")
    assert path == "agent/activity/2026/02/2026-02-21.md"
    assert snippet == "東京で散歩した"
    assert float(score) > 0


def test_search_json_uses_index_when_present(capsys, memory_dir: Path, notes) -> None:
    _run(capsys, "--memory-dir", str(memory_dir), "index")
    (memory_dir / "agent/activity/2026/02/2026-02-21.md").unlink()

    hits = _run_json(capsys, "--memory-dir", str(memory_dir), "search", "東京", "-k", "3")

    assert [set(hit) for hit in hits] == [{"path", "score", "snippet"}]
    assert hits[0]["path"] == "agent/activity/2026/02/2026-02-21.md"


def test_search_blank_query_prints_nothing(capsys, memory_dir: Path, notes) -> None:
    assert _run(capsys, "--memory-dir", str(memory_dir), "search", "  ") == ""
    assert _run_json(capsys, "--memory-dir", str(memory_dir), "search", "  ") == []


def test_context_lists_related_memory(capsys, memory_dir: Path, notes) -> None:
    out = _run(capsys, "--memory-dir", str(memory_dir), "context", "--task", "大阪の準備")

    assert out.startswith("Task Context: 大阪の準備\n")
    assert "== Related Memory ==" in out
    assert "2026-02-20.md" in out


def test_context_json_and_empty(capsys, memory_dir: Path) -> None:
    payload = _run_json(capsys, "--memory-dir", str(memory_dir), "context", "--task", "nothing")
    assert payload == {"task": "nothing", "related": []}

    out = _run(capsys, "--memory-dir", str(memory_dir), "context", "--task", "nothing")
    assert out.rstrip().endswith("(none)")


def test_info_before_and_after_index(capsys, memory_dir: Path, notes) -> None:
    before = _run_json(capsys, "--memory-dir", str(memory_dir), "info")
    assert before["exists"] is False

    _run(capsys, "--memory-dir", str(memory_dir), "index")
    after = _run_json(capsys, "--memory-dir", str(memory_dir), "info")

    assert after["exists"] is True
    assert after["documents"] == 2
    assert after["chunks"] == 2

    text = _run(capsys, "--memory-dir", str(memory_dir), "info")
    assert "Documents: 2" in text


def test_which_resolves_environment(capsys, monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AMEM_DIR", raising=False)
    monkeypatch.delenv("AMEM_ROOT", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    assert _run(capsys, "which").strip() == str(tmp_path / "home" / ".amem")

    monkeypatch.setenv("AMEM_DIR", "relative/mem")
    assert _run(capsys, "which").strip() == str(tmp_path / "relative" / "mem")

    assert _run(capsys, "--memory-dir", "other/../explicit", "which").strip() == str(tmp_path / "explicit")
