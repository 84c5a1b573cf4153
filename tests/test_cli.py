import json

from interfaces.analyzer_factory import build_analyzer
from interfaces.cli.main import main


def test_build_analyzer_explicit_arguments():
    analyzer = build_analyzer(credential="key", strategy="heuristic", vocabulary_policy="canonical")
    assert analyzer.strategy == "heuristic"
    assert analyzer.credential == "key"
    assert analyzer.vocabulary_policy.value == "canonical"


def test_cli_prints_record_json(capsys):
    code = main(["--strategy", "heuristic", "My", "phone", "was", "stolen", "at", "home."])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["tags"] == ["Theft"]
    assert payload["location"] == "home"
    assert payload["severity"] == "low"
    assert payload["structuredText"].startswith("The claimant has reported")


def test_cli_reports_configuration_error(capsys, monkeypatch):
    monkeypatch.setattr("interfaces.analyzer_factory.CLAIMS_API_KEY", "")
    code = main(["--strategy", "remote", "A crash on the road."])

    assert code == 1
    assert "error:" in capsys.readouterr().err
