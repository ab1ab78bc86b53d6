# tests/test_cli.py

from __future__ import annotations

from typer.testing import CliRunner

from gedcom_chart.cli.app import app
from gedcom_chart.utils import tests_data_path

runner = CliRunner()


def test_chart_ancestors_to_stdout(family_path):
    result = runner.invoke(app, ["chart", str(family_path), "-x", "I1", "-a", "2"])

    assert result.exit_code == 0
    assert "parent[id=F1, family database={marriage = {1899-06-10}{Springfield}}]{" in result.output
    assert "\tp[id=I3]{" in result.output


def test_chart_to_file(family_path, tmp_path):
    out = tmp_path / "chart.tex"
    result = runner.invoke(
        app,
        ["chart", str(family_path), "-x", "@I1@", "-d", "2", "--marriage", "spouse", "-o", str(out)],
    )

    assert result.exit_code == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith("child[id=F2]{\n")
    assert "union[id=F3]" in text


def test_chart_ignore_and_floruit(family_path):
    result = runner.invoke(
        app,
        ["chart", str(family_path), "-x", "I1", "-d", "3", "--ignore", "F3", "--floruit"],
    )

    assert result.exit_code == 0
    assert "union" not in result.output
    assert "\tp[id=I5]{" in result.output
    assert "floruit- = {1900/1970}" in result.output


def test_chart_config_file(family_path, tmp_path):
    cfg = tmp_path / "chart.yml"
    cfg.write_text("chart:\n  marriage: proband\n  ignore: [I3]\n", encoding="utf-8")

    result = runner.invoke(
        app, ["chart", str(family_path), "-x", "I1", "-a", "2", "--config", str(cfg)]
    )

    assert result.exit_code == 0
    assert result.output.startswith("parent[id=F1]{")
    assert "I3" not in result.output


def test_chart_without_counts_is_a_usage_error(family_path):
    result = runner.invoke(app, ["chart", str(family_path), "-x", "I1"])

    assert result.exit_code == 2
    assert "parent[" not in result.output
    assert "child[" not in result.output


def test_chart_unknown_proband(family_path):
    result = runner.invoke(app, ["chart", str(family_path), "-x", "I404", "-a", "2"])
    assert result.exit_code == 2


def test_chart_bad_marriage_placement(family_path):
    result = runner.invoke(
        app, ["chart", str(family_path), "-x", "I1", "-a", "2", "--marriage", "husband"]
    )
    assert result.exit_code == 2


def test_chart_broken_file_exits_1():
    result = runner.invoke(app, ["chart", str(tests_data_path("level_jump.ged")), "-x", "I1", "-a", "2"])
    assert result.exit_code == 1


def test_people_lists_individuals(family_path):
    result = runner.invoke(app, ["people", str(family_path)])

    assert result.exit_code == 0
    assert "I8" in result.output
    assert "Mary" in result.output


def test_people_name_filter(family_path):
    result = runner.invoke(app, ["people", str(family_path), "--name", "jones"])

    assert result.exit_code == 0
    assert "Mary" in result.output
    assert "Anna" not in result.output
