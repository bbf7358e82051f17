# -*- coding: utf-8 -*-
"""
test_cli.py

@author: LKouadio <etanoyau@gmail.com>
"""
import os

import pytest
from click.testing import CliRunner

import statnotes
from statnotes.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"statnotes {statnotes.__version__}"
    result = runner.invoke(cli, ["version", "--show"])
    assert "numpy:" in result.output


def test_list(runner):
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("data_import")
    assert any(line.startswith("correspondence_analysis") for line in lines)


def test_list_by_tag(runner):
    result = runner.invoke(cli, ["list", "--tag", "clustering"])
    assert result.output.splitlines() == [
        "kmeans  k-means clustering  clustering, unsupervised"]
    result = runner.invoke(cli, ["list", "--tag", "nope"])
    assert "No tutorial tagged 'nope'." in result.output


def test_run_print(runner):
    result = runner.invoke(cli, ["run", "linear_regression", "--print"])
    assert result.exit_code == 0
    assert "# Linear regression" in result.output


def test_run_writes_files(runner, tmp_path):
    result = runner.invoke(cli, ["run", "pca", "-o", str(tmp_path), "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert os.path.isfile(tmp_path / "pca.md")
    assert f"Saved pca to {tmp_path}" in result.output


def test_run_unknown_tutorial(runner):
    result = runner.invoke(cli, ["run", "linear_regresion"])
    assert result.exit_code == 2
    assert "Did you mean" in result.output


def test_run_rejects_negative_seed(runner):
    result = runner.invoke(cli, ["run", "pca", "--seed", "-1"])
    assert result.exit_code == 2


def test_run_all_by_tag(runner, tmp_path):
    result = runner.invoke(cli, ["run-all", "-o", str(tmp_path), "--tag", "clustering"])
    assert result.exit_code == 0, result.output
    assert f"kmeans: {os.path.join(str(tmp_path), 'kmeans.md')}" in result.output


if __name__ == '__main__':
    pytest.main([__file__])
