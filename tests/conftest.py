# tests/conftest.py
import pytest
from click.testing import CliRunner


@pytest.fixture(scope='module')
def runner():
    """CliRunner shared by the command tests."""
    yield CliRunner()


@pytest.fixture(autouse=True)
def isolated_history(tmp_path_factory, monkeypatch):
    """Keeps every test run out of the real ~/.loxtestgen/history.db."""
    db_path = tmp_path_factory.mktemp("history") / "history.db"
    monkeypatch.setenv('LOXTESTGEN_DB', str(db_path))
    yield db_path


@pytest.fixture
def fixture_tree(tmp_path):
    """
    Builds a small fixture root:

        project/test/empty_file.lox
        project/test/print/{a_values.lox, b_error.lox}
        project/test/benchmark/fib.lox      (not in the default table)
    """
    project = tmp_path / "project"
    root = project / "test"
    (root / "print").mkdir(parents=True)
    (root / "benchmark").mkdir()

    (root / "empty_file.lox").write_text("", encoding="utf-8")
    (root / "print" / "a_values.lox").write_text(
        'print 1; // expect: 1\nprint "two"; // expect: two\n', encoding="utf-8"
    )
    (root / "print" / "b_error.lox").write_text(
        "print; // Error at ';': Expect expression.\n", encoding="utf-8"
    )
    (root / "benchmark" / "fib.lox").write_text("print 55; // expect: 55\n", encoding="utf-8")
    (project / "pyproject.toml").write_text("[tool.loxtestgen]\n", encoding="utf-8")
    return project
