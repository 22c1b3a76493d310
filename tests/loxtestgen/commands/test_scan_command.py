# -*- coding: utf-8 -*-
from loxtestgen.cli import cli


def test_scan_lists_modules_and_modes(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)

    result = runner.invoke(cli, ['scan'], catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "--- mod tests (1) ---" in result.output
    assert "--- mod tests::print (2) ---" in result.output
    assert "a_values (2 value(s))" in result.output
    assert "b_error ('Expect expression.')" in result.output
    assert "empty_file (construction only)" in result.output
    assert "Excluded directories: benchmark" in result.output
    assert "Total: 3 fixtures in 1 module(s), 0 ambiguous." in result.output
    assert not (fixture_tree / "tests.rs").exists()


def test_scan_warns_about_ambiguous_fixtures(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)
    (fixture_tree / "test" / "print" / "c_both.lox").write_text(
        "print 1; // expect: 1\n// Error: Never checked.\n", encoding="utf-8"
    )

    result = runner.invoke(cli, ['scan'], catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "[WARNING]" in result.output
    assert "1 ambiguous" in result.output


def test_scan_fails_on_invalid_fixture(runner, fixture_tree, monkeypatch):
    monkeypatch.chdir(fixture_tree)
    (fixture_tree / "test" / "README.md").write_text("# fixtures", encoding="utf-8")

    result = runner.invoke(cli, ['scan'])

    assert result.exit_code == 1
    assert "README.md" in result.output
