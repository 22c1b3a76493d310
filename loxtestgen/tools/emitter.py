# loxtestgen/tools/emitter.py
"""
Rust test-suite emission.

RustTestWriter owns the output stream for one run; every write goes
through it, so nothing here touches a global file handle. The layout
follows what `cargo test` expects from the VM crate: a `#[cfg(test)]`
module, one nested module per fixture directory and one `#[test]`
function per fixture returning `VMResult`.
"""
import io
import re
from .fixtures import InvalidFixtureError

INDENT = '    '
DEFAULT_USES = ('super::*', 'crate::value::Value')

RUST_KEYWORDS = {
    'abstract', 'as', 'async', 'await', 'become', 'box', 'break', 'const', 'continue',
    'do', 'dyn', 'else', 'enum', 'extern', 'false', 'final', 'fn', 'for', 'gen', 'if',
    'impl', 'in', 'let', 'loop', 'macro', 'match', 'mod', 'move', 'mut', 'override',
    'priv', 'pub', 'ref', 'return', 'static', 'struct', 'trait', 'true', 'try', 'type',
    'typeof', 'unsafe', 'unsized', 'use', 'virtual', 'where', 'while', 'yield',
}
# Path keywords cannot be written as raw identifiers.
NON_RAW_KEYWORDS = {'self', 'Self', 'super', 'crate'}

_NON_IDENT_CHARS = re.compile(r'[^0-9A-Za-z_]')


def rust_identifier(name):
    ident = _NON_IDENT_CHARS.sub('_', name) or '_'
    if ident == '_':
        # A lone underscore is a pattern, not an identifier.
        ident = '__'
    if ident[0].isdigit():
        ident = '_' + ident
    if ident in NON_RAW_KEYWORDS:
        return ident + '_'
    if ident in RUST_KEYWORDS:
        return 'r#' + ident
    return ident


def rust_string_literal(value):
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def raw_string_hashes(text):
    """Smallest run of '#' that lets `text` sit inside r#..."#..# untouched."""
    hashes = '#'
    while '"' + hashes in text:
        hashes += '#'
    return hashes


class RustTestWriter:
    def __init__(self, stream, uses=DEFAULT_USES):
        self.stream = stream
        self.uses = list(uses)

    def write_line(self, text, level):
        self.stream.write(f"{INDENT * level}{text}\n")

    def write_blank(self):
        self.stream.write("\n")

    def write_preamble(self):
        self.write_line("#[cfg(test)]", 0)
        self.write_line("mod tests {", 0)
        for path in self.uses:
            self.write_line(f"use {path};", 1)

    def write_closing(self):
        self.write_line("}", 0)

    def write_test(self, fixture, level):
        self.write_blank()
        self.write_line("#[test]", level)
        self.write_line(f"fn {rust_identifier(fixture.name)}() -> VMResult {{", level)

        hashes = raw_string_hashes(fixture.source)
        self.write_line(f'let source = r{hashes}"', level + 1)
        for line in fixture.source_lines:
            self.write_line(line, 0)
        self.write_line(f'"{hashes}', 0)
        self.write_line(".to_string();", level + 1)
        self.write_line("let mut vm = VM::init();", level + 1)

        if fixture.expected_values:
            self.write_line("vm.interpret(source)?;", level + 1)
            # printed_values is a stack: the last printed value pops first.
            for value in reversed(fixture.expected_values):
                self.write_line("assert_eq!(", level + 1)
                self.write_line(f"{rust_string_literal(value)}.to_string(),", level + 2)
                self.write_line("vm.printed_values.pop().unwrap().to_string()", level + 2)
                self.write_line(");", level + 1)
        elif fixture.expected_error:
            self.write_line("vm.interpret(source);", level + 1)
            self.write_line("assert_eq!(", level + 1)
            self.write_line(f"{rust_string_literal(fixture.expected_error)},", level + 2)
            self.write_line("vm.latest_error_message", level + 2)
            self.write_line(");", level + 1)

        self.write_line("Ok(())", level + 1)
        self.write_line("}", level)

    def write_module(self, name, fixtures, level):
        self.write_blank()
        self.write_line(f"mod {rust_identifier(name)} {{", level)
        self.write_line("use super::*;", level + 1)
        taken = {}
        for fixture in fixtures:
            _claim(taken, rust_identifier(fixture.name), fixture.path)
            self.write_test(fixture, level + 1)
        self.write_line("}", level)


def _claim(taken, ident, origin):
    """Registers `ident` in one Rust scope; two sources mapping to the same name are fatal."""
    if ident in taken:
        raise InvalidFixtureError(
            f"'{origin}' and '{taken[ident]}' both become the Rust name '{ident}'. Rename one of them."
        )
    taken[ident] = origin


def write_suite(writer, scan_result, load_fixture):
    """
    Emits the whole suite for a ScanResult.

    `load_fixture` turns a path into a Fixture; any error it raises stops the
    emission where it happened.
    """
    writer.write_preamble()
    tests = {}
    for path in scan_result.loose_files:
        fixture = load_fixture(path)
        _claim(tests, rust_identifier(fixture.name), path)
        writer.write_test(fixture, 1)
    modules = {}
    for name, paths in scan_result.modules:
        _claim(modules, rust_identifier(name), name)
        writer.write_module(name, (load_fixture(path) for path in paths), 1)
    writer.write_closing()


def render_suite(scan_result, load_fixture, uses=DEFAULT_USES):
    buffer = io.StringIO()
    write_suite(RustTestWriter(buffer, uses=uses), scan_result, load_fixture)
    return buffer.getvalue()
