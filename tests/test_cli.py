import json

from typer.testing import CliRunner

from pedigree_builder import build_pedigree
from pedigree_builder.cli.app import app
from pedigree_builder.records import load_fact_records
from pedigree_builder.utils import pathing

runner = CliRunner()


def test_build_to_stdout():
    path = pathing.tests_data_path("facts_small.csv")
    expected, _ = build_pedigree(load_fact_records(path))

    result = runner.invoke(app, ["build", str(path)])

    assert result.exit_code == 0
    assert result.stdout == expected


def test_build_to_file(tmp_path):
    path = pathing.tests_data_path("facts_family.json")
    out = tmp_path / "pedigree.ped"

    result = runner.invoke(app, ["build", str(path), "--out", str(out)])

    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8").startswith("Ped\tID\tSex")


def test_build_json_view(tmp_path):
    out = tmp_path / "family.json"
    result = runner.invoke(
        app, ["build", str(pathing.tests_data_path("facts_family.json")), "--json", "-o", str(out)]
    )

    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["count"] == 14


def test_build_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["build", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_stats_table():
    result = runner.invoke(app, ["stats", str(pathing.tests_data_path("facts_family.json"))])

    assert result.exit_code == 0
    assert "Pedigree Members" in result.stdout
    assert "Skipped steps: 1" in result.stdout
    assert "Multiple cancers reported: yes" in result.stdout
