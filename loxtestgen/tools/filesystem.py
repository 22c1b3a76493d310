# loxtestgen/tools/filesystem.py
import os
import copy
import toml
from pathlib import Path

INCLUDE = 'include'
EXCLUDE = 'exclude'
POLICIES = (INCLUDE, EXCLUDE)

DEFAULT_CONFIG = {
    'fixture_root': './test/',
    'output_file': './tests.rs',
    'extension': '.lox',
    'default_policy': EXCLUDE,
    'uses': ['super::*', 'crate::value::Value'],
    'directories': {
        'assignment': INCLUDE,
        'block': INCLUDE,
        'bool': INCLUDE,
        'comments': INCLUDE,
        'print': INCLUDE,
        'string': INCLUDE,
    },
}


class ConfigError(Exception):
    """Configuration that cannot be used to drive a generation run."""


class DirectoryFilter:
    """Include/exclude table for the fixture subdirectories."""

    def __init__(self, table=None, default_policy=EXCLUDE):
        table = dict(table or {})
        for name, policy in table.items():
            if policy not in POLICIES:
                raise ConfigError(f"Directory '{name}' has invalid policy '{policy}' (use include/exclude).")
        if default_policy not in POLICIES:
            raise ConfigError(f"Invalid default_policy '{default_policy}' (use include/exclude).")
        self.table = table
        self.default_policy = default_policy

    def is_included(self, name):
        return self.table.get(name, self.default_policy) == INCLUDE

    def __repr__(self):
        return f"DirectoryFilter({self.table!r}, default_policy={self.default_policy!r})"


def _find_project_root(start_path='.'):
    """Finds the project root (pyproject.toml or .git)."""
    current_path = Path(start_path).resolve()
    search_path = current_path
    while True:
        if (search_path / 'pyproject.toml').is_file() or (search_path / '.git').is_dir():
            return str(search_path)
        if search_path == search_path.parent:
            return str(current_path)
        search_path = search_path.parent


def _get_project_config(start_path='.'):
    """Reads [tool.loxtestgen] from pyproject.toml and merges it over the defaults."""
    root_path = _find_project_root(start_path)
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = os.path.join(root_path, 'pyproject.toml')

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                toml_data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"pyproject.toml is corrupted: {e}") from e
        user_config = toml_data.get('tool', {}).get('loxtestgen', {})
        # The directory table replaces the default one instead of merging with it.
        config.update(user_config)

    if not isinstance(config.get('directories'), dict):
        raise ConfigError("'directories' must be a table of name = \"include\" | \"exclude\".")
    if not str(config.get('extension', '')).startswith('.'):
        raise ConfigError(f"Invalid extension '{config.get('extension')}' (expected something like '.lox').")

    config['root_path'] = root_path
    config['config_path'] = config_path if os.path.exists(config_path) else None
    config['fixture_root'] = _resolve(root_path, config['fixture_root'])
    config['output_file'] = _resolve(root_path, config['output_file'])
    return config


def _resolve(root_path, path):
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(root_path, path))


def build_directory_filter(config):
    return DirectoryFilter(config.get('directories'), config.get('default_policy', EXCLUDE))
