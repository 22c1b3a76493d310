# loxtestgen/tools/scanner.py
"""
Directory scanner for the fixture tree.

Loose files in the root belong to the top-level test module. Each
subdirectory accepted by the DirectoryFilter becomes a nested module.
Entries are always sorted by name so repeated runs emit the same file.
"""
import os
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class ScanResult:
    root: str
    loose_files: List[str] = field(default_factory=list)
    modules: List[Tuple[str, List[str]]] = field(default_factory=list)
    skipped_dirs: List[str] = field(default_factory=list)

    @property
    def fixture_count(self):
        return len(self.loose_files) + sum(len(files) for _, files in self.modules)


def scan_root(root):
    """Immediate entries of the fixture root, sorted by name."""
    with os.scandir(root) as it:
        return sorted(it, key=lambda entry: entry.name)


def list_fixture_files(directory):
    """Immediate file entries of a module directory, as sorted paths."""
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    return [entry.path for entry in entries if not entry.is_dir()]


def scan(root, directory_filter):
    result = ScanResult(root=root)
    for entry in scan_root(root):
        if not entry.is_dir():
            result.loose_files.append(entry.path)
            continue

        if not directory_filter.is_included(entry.name):
            result.skipped_dirs.append(entry.name)
            continue
        result.modules.append((entry.name, list_fixture_files(entry.path)))
    return result
