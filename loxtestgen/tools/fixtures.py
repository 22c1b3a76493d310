# loxtestgen/tools/fixtures.py
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional

ERROR_PATTERN = re.compile(r'(?i)error')
EXPECT_MARKER = '// expect: '
SEPARATOR = ': '


class InvalidFixtureError(Exception):
    """A file in the fixture tree that is not a fixture."""


@dataclass
class Fixture:
    name: str
    path: str
    source_lines: List[str] = field(default_factory=list)
    expected_values: List[str] = field(default_factory=list)
    expected_error: Optional[str] = None

    @property
    def source(self):
        return '\n'.join(self.source_lines)

    @property
    def mode(self):
        """Assertion mode used by the emitter: 'values', 'error' or 'none'."""
        if self.expected_values:
            return 'values'
        if self.expected_error:
            return 'error'
        return 'none'

    @property
    def is_ambiguous(self):
        return bool(self.expected_values) and bool(self.expected_error)


def fixture_name(path, extension):
    base = os.path.basename(path)
    if not base.endswith(extension) or base == extension:
        raise InvalidFixtureError(
            f"Invalid file input '{path}'. Only {extension} files should be present in the input directory."
        )
    return base[:-len(extension)]


def _after_separator(line):
    return line.split(SEPARATOR, 1)[1]


def parse_fixture(path, extension='.lox'):
    """
    Reads a fixture line by line.

    Every line goes into the source buffer. The first line mentioning
    "error" (any case) with a ': ' separator gives the expected error; every
    '// expect: ' line adds an expected printed value, in file order.
    """
    fixture = Fixture(name=fixture_name(path, extension), path=path)

    with open(path, 'r', encoding='utf-8') as f:
        for raw_line in f:
            line = raw_line.rstrip('\n')
            fixture.source_lines.append(line)

            # unexpected_character.lox carries a second error comment for the Java implementation.
            # An empty message does not count, a later error line can still fill it.
            if not fixture.expected_error and ERROR_PATTERN.search(line) and SEPARATOR in line:
                fixture.expected_error = _after_separator(line)

            if EXPECT_MARKER in line:
                fixture.expected_values.append(_after_separator(line))

    return fixture
