import pytest
from typer.testing import CliRunner
from yaml import dump

from gitdaily import configuration
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.service.branch import ensure_main_branch
from gitdaily.template.id_map import get_id_map_template
from gitdaily.terminal.app import app

runner = CliRunner()


@pytest.fixture
def cli(data_dir):
    configuration.APP_CONFIG_PATH.write_text(dump(configuration.get_default_configuration()))
    configuration.DATA_ID_MAP_PATH.write_text(dump(get_id_map_template()))
    ensure_main_branch()
    return data_dir


def test_branch_task_and_graph_flow(cli):
    result = runner.invoke(app, ["branch", "add", "Learn Rust", "--start", "2024-01-10"])
    assert result.exit_code == 0, result.output
    assert "Learn Rust" in result.output

    result = runner.invoke(app, ["t", "a", "Chapter 1", "-b", "1", "--date", "2024-01-12"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["task", "complete", "1", "-m", "read it"])
    assert result.exit_code == 0, result.output
    assert TASK_REPO.get_all_tasks()[0]["status"] == "COMPLETED"

    svg_path = cli / "graph.svg"
    result = runner.invoke(app, ["graph", "--today", "2024-03-10", "--svg", str(svg_path)])
    assert result.exit_code == 0, result.output
    assert "<svg" in svg_path.read_text()

    result = runner.invoke(app, ["graph", "-g", "week", "--today", "2024-03-10"])
    assert result.exit_code == 0, result.output
    assert "Chapter 1" in result.output


def test_merge_requires_message(cli):
    runner.invoke(app, ["branch", "add", "Side project"])

    result = runner.invoke(app, ["branch", "merge", "1"])
    assert result.exit_code != 0

    result = runner.invoke(app, ["branch", "merge", "1", "-m", "shipped"])
    assert result.exit_code == 0, result.output
    branch = [b for b in BRANCH_REPO.get_all_branches() if b["name"] == "Side project"][0]
    assert branch["status"] == "merged"


def test_unknown_branch_id_is_rejected(cli):
    result = runner.invoke(app, ["branch", "show", "42"])

    assert result.exit_code == 2
    assert "Unknown branch id" in result.output


def test_archiving_twice_exits_with_error(cli):
    runner.invoke(app, ["branch", "add", "Guitar"])
    assert runner.invoke(app, ["branch", "archive", "1"]).exit_code == 0

    result = runner.invoke(app, ["branch", "archive", "1"])

    assert result.exit_code == 1
