# -*- coding: utf-8 -*-
import os
import pytest
from loxtestgen.tools.filesystem import (
    ConfigError,
    DirectoryFilter,
    _get_project_config,
    build_directory_filter
)


def test_defaults_when_table_is_empty(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.loxtestgen]\n", encoding="utf-8")

    config = _get_project_config(str(tmp_path))

    assert config['extension'] == '.lox'
    assert config['fixture_root'] == os.path.join(str(tmp_path.resolve()), 'test')
    assert config['output_file'] == os.path.join(str(tmp_path.resolve()), 'tests.rs')
    directory_filter = build_directory_filter(config)
    for name in ["assignment", "block", "bool", "comments", "print", "string"]:
        assert directory_filter.is_included(name)
    assert not directory_filter.is_included("benchmark")
    assert not directory_filter.is_included("regression")


def test_user_table_replaces_directories(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.loxtestgen]\n'
        'fixture_root = "fixtures"\n'
        'default_policy = "include"\n'
        '[tool.loxtestgen.directories]\n'
        'benchmark = "exclude"\n',
        encoding="utf-8"
    )

    config = _get_project_config(str(tmp_path))
    directory_filter = build_directory_filter(config)

    assert config['fixture_root'] == os.path.join(str(tmp_path.resolve()), 'fixtures')
    assert directory_filter.is_included("closure")
    assert not directory_filter.is_included("benchmark")


def test_config_found_from_subdirectory(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.loxtestgen]\noutput_file = "src/tests.rs"\n', encoding="utf-8")
    sub = tmp_path / "src"
    sub.mkdir()

    config = _get_project_config(str(sub))

    assert config['output_file'] == os.path.join(str(tmp_path.resolve()), 'src', 'tests.rs')


def test_invalid_policy_is_rejected():
    with pytest.raises(ConfigError):
        DirectoryFilter({"print": "maybe"})
    with pytest.raises(ConfigError):
        DirectoryFilter({}, default_policy="sometimes")


def test_corrupted_pyproject_is_a_config_error(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.loxtestgen\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        _get_project_config(str(tmp_path))


def test_extension_must_start_with_a_dot(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.loxtestgen]\nextension = "lox"\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        _get_project_config(str(tmp_path))
