# -*- coding: utf-8 -*-
from loxtestgen.cli import cli


def test_history_is_empty_at_first(runner):
    result = runner.invoke(cli, ['history'], catch_exceptions=False)

    assert result.exit_code == 0
    assert "No runs recorded yet." in result.output


def test_history_shows_generate_runs(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)
    runner.invoke(cli, ['generate'], catch_exceptions=False)
    (fixture_tree / "test" / "print" / "junk.txt").write_text("?", encoding="utf-8")
    runner.invoke(cli, ['generate'])

    result = runner.invoke(cli, ['history', '--command', 'generate'], catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "[COMPLETED]" in result.output
    assert "[FAILED]" in result.output
    assert "3 tests generated." in result.output
    assert "CRITICAL" in result.output
    # Oldest first.
    assert result.output.index("[COMPLETED]") < result.output.index("[FAILED]")


def test_history_limit_and_no_findings(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)
    for _ in range(3):
        runner.invoke(cli, ['scan'], catch_exceptions=False)

    result = runner.invoke(cli, ['history', '-n', '2', '--no-findings'], catch_exceptions=False)

    assert "--- Last 2 run(s) ---" in result.output
    assert result.output.count("scan") == 2


def test_history_shows_run_arguments(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)
    runner.invoke(cli, ['generate', '--check'])

    result = runner.invoke(cli, ['history'], catch_exceptions=False)

    assert "args: check=True fixture_root=None output_file=None" in result.output
