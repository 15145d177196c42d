"""CLI and entrypoint tests."""

from __future__ import annotations

import json
import runpy
from pathlib import Path

from typer.testing import CliRunner

from chatsearch.cli import app

runner = CliRunner()


def test_cli_search_prints_sections(sample_snapshot_path: Path) -> None:
    result = runner.invoke(app, ["search", "alpine", "--snapshot", str(sample_snapshot_path)])
    assert result.exit_code == 0, result.output
    assert "Chats and contacts" in result.output
    assert "Global search" in result.output
    assert "Messages" in result.output
    assert "Who brings the alpine map?" in result.output


def test_cli_search_json(sample_snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["search", "al", "--snapshot", str(sample_snapshot_path), "--json"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["local_results"]["items"] == ["me", "u1", "c1", "u3"]
    assert payload["global_results"]["items"] == []


def test_cli_search_default_view(sample_snapshot_path: Path) -> None:
    result = runner.invoke(app, ["search", "--snapshot", str(sample_snapshot_path)])
    assert result.exit_code == 0, result.output
    assert "No active search" in result.output


def test_cli_missing_snapshot(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", "al", "--snapshot", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_cli_paginate_throttles(sample_snapshot_path: Path) -> None:
    result = runner.invoke(
        app, ["paginate", "alpine", "--events", "10", "--snapshot", str(sample_snapshot_path)]
    )
    assert result.exit_code == 0, result.output
    assert "1 of 10 boundary events" in result.output
    assert "search_messages_global" in result.output


def test_python_module_entrypoint_invokes_cli_app(monkeypatch) -> None:
    called = {"count": 0}

    def fake_app() -> None:
        called["count"] += 1

    monkeypatch.setattr("chatsearch.cli.app", fake_app)
    runpy.run_module("chatsearch.__main__", run_name="__main__")
    assert called["count"] == 1
