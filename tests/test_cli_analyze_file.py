import json
import os
from pathlib import Path
import subprocess
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]


def run_cli(*args, env=None):
    return subprocess.run(
        [sys.executable, "-m", "phishcheck.cli", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env={**os.environ, **(env or {})},
    )


def test_analyze_file_runs(tmp_path: Path):
    # create a temporary urls.txt
    urls_file = tmp_path / "urls.txt"
    urls_file.write_text(
        "# sample\nhttp://example.com\n\nhttp://192.168.0.1/login\n",
        encoding="utf-8",
    )

    result = run_cli("--seed", "1", "analyze-file", str(urls_file), "--output-format", "json")

    assert result.returncode == 0
    results = json.loads(result.stdout)
    assert [r["url"] for r in results] == ["http://example.com", "http://192.168.0.1/login"]
    assert results[1]["has_ip_address_in_url"] is True


def test_analyze_file_missing_path_fails(tmp_path: Path):
    result = run_cli("analyze-file", str(tmp_path / "nope.txt"))
    assert result.returncode != 0
    assert "not found" in result.stderr


def test_analyze_url_text_report():
    result = run_cli("--seed", "3", "analyze-url", "example.com")

    assert result.returncode == 0
    assert "Analysis Results for https://example.com" in result.stdout
    assert "Verdict:" in result.stdout


def test_analyze_urls_reports_failures_without_crashing():
    result = run_cli("analyze-urls", "https://", "https://example.com", "--format", "json")

    assert result.returncode == 0
    first, second = json.loads(result.stdout)
    assert first["verdict"] == "AnalysisFailed"
    assert second["verdict"] in {"Phishing", "NotPhishing"}


def test_bad_seed_in_environment_is_a_usage_error():
    result = run_cli("analyze-url", "example.com", env={"PHISHCHECK_SEED": "abc"})

    assert result.returncode == 2
    assert "PHISHCHECK_SEED must be an integer" in result.stderr
    assert "Traceback" not in result.stderr
