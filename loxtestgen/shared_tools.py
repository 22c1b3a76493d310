# loxtestgen/shared_tools.py
# (FACADE: single import point for the commands; the logic lives in loxtestgen.tools)

# 1. CONFIG
from .tools.filesystem import (
    ConfigError,
    DirectoryFilter,
    _find_project_root,
    _get_project_config,
    build_directory_filter
)

# 2. PIPELINE
from .tools.scanner import ScanResult, scan
from .tools.fixtures import Fixture, InvalidFixtureError, parse_fixture
from .tools.emitter import RustTestWriter, render_suite, write_suite

# 3. HISTORY
from .tools.db_utils import _log_execution, _recent_events

# 4. LOGGER (Core)
from .tools.logger import ExecutionLogger
