"""
Tests for the command-line entry point.
"""

import json

import pytest
from typer.testing import CliRunner

from ideaspark.main import app

runner = CliRunner()

PROFILE_ARGS = [
    "--interest", "Health & Wellness",
    "--skill", "Teaching",
    "--skill", "Marketing",
    "--budget", "Under $1,000",
    "--expertise", "Complete beginner - New to business",
    "--time-commitment", "Part-time (10-20 hours)",
    "--risk-tolerance", "Conservative - Lower risk, steady returns",
]


@pytest.fixture(autouse=True)
def offline(monkeypatch, tmp_path):
    """Run every command without a key so nothing leaves the machine."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.delenv("IDEASPARK_SETTINGS_FILE", raising=False)
    monkeypatch.chdir(tmp_path)


class TestCli:
    """Tests for the typer app."""

    def test_generate_prints_fallback_ideas(self):
        result = runner.invoke(app, ["generate", *PROFILE_ARGS])

        assert result.exit_code == 0
        ideas = json.loads(result.stdout[result.stdout.index("["):])
        assert len(ideas) == 4
        assert ideas[0]["title"] == "Health & Wellness Teaching Consultancy"
        assert ideas[0]["startupCost"] == "$200 - $800"

    def test_validate_prints_report(self):
        result = runner.invoke(app, ["validate", *PROFILE_ARGS, "--index", "2"])

        assert result.exit_code == 0
        report = json.loads(result.stdout[result.stdout.index("{"):])
        assert report["idea"]["category"] == "Education"
        assert report["validation"]["scalabilityScore"] == 8
        assert report["financials"]["initialInvestment"] == 500

    def test_validate_rejects_bad_index(self):
        result = runner.invoke(app, ["validate", *PROFILE_ARGS, "--index", "7"])
        assert result.exit_code == 1

    def test_check_connection_without_key(self):
        result = runner.invoke(app, ["check-connection"])
        assert result.exit_code == 1
