# loxtestgen/commands/scan.py
import os
import sys
import click
from colorama import Fore, Style
from ..shared_tools import (
    ExecutionLogger,
    ConfigError,
    InvalidFixtureError,
    _get_project_config,
    build_directory_filter,
    parse_fixture,
    scan
)

MODE_LABELS = {
    'values': (Fore.GREEN, "expect"),
    'error': (Fore.YELLOW, "error"),
    'none': (Fore.WHITE + Style.DIM, "none"),
}


def _describe(fixture):
    color, label = MODE_LABELS[fixture.mode]
    if fixture.mode == 'values':
        detail = f"{len(fixture.expected_values)} value(s)"
    elif fixture.mode == 'error':
        detail = repr(fixture.expected_error)
    else:
        detail = "construction only"
    return f"{color}[{label:^6}]{Style.RESET_ALL} {fixture.name} {Style.DIM}({detail}){Style.RESET_ALL}"


@click.command('scan')
@click.option('--root', 'fixture_root', type=click.Path(), default=None, help="Fixture directory (overrides fixture_root).")
@click.pass_context
def scan_cmd(ctx, fixture_root):
    """Lists the modules and tests that 'generate' would emit, without writing anything."""
    with ExecutionLogger('scan', '.', ctx.params) as logger:
        try:
            config = _get_project_config('.')
            fixture_root = os.path.abspath(fixture_root) if fixture_root else config['fixture_root']
            result = scan(fixture_root, build_directory_filter(config))
            extension = config['extension']

            groups = [('tests', result.loose_files)] + [(f"tests::{name}", files) for name, files in result.modules]
            ambiguous = 0
            for title, paths in groups:
                click.echo(Fore.CYAN + Style.BRIGHT + f"\n--- mod {title} ({len(paths)}) ---")
                for path in paths:
                    fixture = parse_fixture(path, extension)
                    click.echo("  " + _describe(fixture))
                    if fixture.is_ambiguous:
                        ambiguous += 1
                        click.echo(Fore.YELLOW + "     > [WARNING] expect and error annotations; the error is ignored.")
                        logger.add_finding('WARNING', f"'{fixture.name}' has expect and error annotations.", category='AMBIGUOUS-FIXTURE', file=path)
        except (ConfigError, InvalidFixtureError, OSError) as e:
            logger.add_finding('CRITICAL', str(e), category='SCAN')
            click.echo(Fore.RED + f"[ERROR] {e}")
            sys.exit(1)

        if result.skipped_dirs:
            click.echo(Fore.WHITE + Style.DIM + f"\nExcluded directories: {', '.join(result.skipped_dirs)}")
        click.echo(Fore.CYAN + f"\nTotal: {result.fixture_count} fixtures in {len(result.modules)} module(s), {ambiguous} ambiguous.")
