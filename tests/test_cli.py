"""Tests for the command-line interface."""

import json

import pytest

from tea_lens import __version__
from tea_lens.cli import main
from tea_lens.exceptions import TeaInputError


@pytest.fixture
def tea_file(tmp_path):
    path = tmp_path / "assam.json"
    path.write_text(
        json.dumps(
            {
                "name": "Assam",
                "type": "Black",
                "subType": "Assam",
                "caffeineLevel": 8,
                "lTheanineLevel": 2,
                "flavorProfile": ["malty", "honey"],
                "processing": {"methods": ["withered", "ctc"], "oxidationLevel": 95},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_prints_summary(tea_file, capsys):
    assert main([str(tea_file)]) == 0

    out = capsys.readouterr().out
    assert "Name:" in out
    assert "Assam" in out
    assert "Intense & Sharp" in out


def test_cli_json_output(tea_file, capsys):
    assert main([str(tea_file), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Assam"
    assert data["compounds"]["compound_profile"] == "Intense & Sharp"
    assert data["time_of_day"]["recommended"]


def test_cli_reports_input_errors(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1

    assert capsys.readouterr().err.startswith("Error: File not found")


def test_cli_reports_errors_from_analysis(tea_file, mocker, capsys):
    mocker.patch("tea_lens.cli.load_tea", side_effect=TeaInputError("boom"))

    assert main([str(tea_file)]) == 1
    assert "Error: boom" in capsys.readouterr().err


def test_cli_reads_thresholds_from_env(tea_file, monkeypatch, capsys):
    monkeypatch.setenv("TEA_LENS_ACTIVITY_MAX_RECOMMENDATIONS", "1")
    monkeypatch.setenv("TEA_LENS_ACTIVITY_RELATIVE_THRESHOLD", "100")
    monkeypatch.setenv("TEA_LENS_ACTIVITY_ABSOLUTE_THRESHOLD", "0")

    assert main([str(tea_file), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert len(data["activity"]["recommended"]) == 1


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_prints_brewing(tea_file, capsys):
    assert main([str(tea_file)]) == 0

    out = capsys.readouterr().out
    assert "Gongfu:" in out
    assert "95-100°C" in out
