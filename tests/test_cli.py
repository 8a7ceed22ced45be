from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from sales_advisor import cli
from sales_advisor.client import GenerationClient

from tests.helpers import FakeSdk

runner = CliRunner()


def _write_request(tmp_path: Path, rows: list[dict]) -> Path:
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"stats": {"sales": {"mean": 55.0}}, "sample": rows}), encoding="utf-8")
    return path


def _patch_sdk(monkeypatch, sdk: FakeSdk) -> None:
    monkeypatch.setattr(cli, "GenerationClient", lambda settings: GenerationClient(settings, sdk=sdk))


def test_suggest_prints_wire_json(tmp_path: Path, monkeypatch, sales_rows) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    sdk = FakeSdk('{"dependentVar":"sales","independentVars":["price"]}')
    _patch_sdk(monkeypatch, sdk)

    result = runner.invoke(cli.app, ["suggest", str(_write_request(tmp_path, sales_rows)), "--model", "m-1"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"dependentVar": "sales", "independentVars": ["price"]}
    assert sdk.calls[0]["model"] == "m-1"
    # headers derived from the first sample row
    assert "date, price, ad_spend, store, sales" in sdk.last_prompt


def test_suggest_without_key_fails(tmp_path: Path, monkeypatch, sales_rows) -> None:
    sdk = FakeSdk("{}")
    _patch_sdk(monkeypatch, sdk)
    result = runner.invoke(cli.app, ["suggest", str(_write_request(tmp_path, sales_rows))])
    assert result.exit_code == 1
    assert "clave API" in result.output
    assert sdk.calls == []


def test_insights_prints_text_and_slices_sample(tmp_path: Path, monkeypatch, sales_rows) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    sdk = FakeSdk("## Overview")
    _patch_sdk(monkeypatch, sdk)
    result = runner.invoke(
        cli.app, ["insights", str(_write_request(tmp_path, sales_rows)), "--language", "en", "--sample-rows", "3"]
    )
    assert result.exit_code == 0, result.output
    assert "## Overview" in result.output
    assert "2024-01-03" in sdk.last_prompt
    assert "2024-01-04" not in sdk.last_prompt
    assert "Dataset information" in sdk.last_prompt


def test_insights_failure_exits_nonzero(tmp_path: Path, monkeypatch, sales_rows) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    _patch_sdk(monkeypatch, FakeSdk(error=RuntimeError("503 unavailable")))
    result = runner.invoke(cli.app, ["insights", str(_write_request(tmp_path, sales_rows))])
    assert result.exit_code == 1
    assert "503 unavailable" in result.output


def test_invalid_request_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    result = runner.invoke(cli.app, ["suggest", str(bad)])
    assert result.exit_code == 2
