# loxtestgen/commands/generate.py
import os
import sys
import click
from colorama import Fore, Style
from ..shared_tools import (
    ExecutionLogger,
    ConfigError,
    InvalidFixtureError,
    RustTestWriter,
    _get_project_config,
    build_directory_filter,
    parse_fixture,
    render_suite,
    scan,
    write_suite
)


class FixtureLoader:
    """Parses fixtures for the emitter and keeps per-mode statistics of the run."""

    def __init__(self, extension, logger=None):
        self.extension = extension
        self.logger = logger
        self.stats = {'values': 0, 'error': 0, 'none': 0}

    def __call__(self, path):
        fixture = parse_fixture(path, self.extension)
        self.stats[fixture.mode] += 1
        if fixture.is_ambiguous and self.logger:
            self.logger.add_finding(
                'WARNING', f"'{fixture.name}' has expect and error annotations; only the expected values are asserted.",
                category='AMBIGUOUS-FIXTURE', file=path
            )
        return fixture

    @property
    def total(self):
        return sum(self.stats.values())


def _write_output(output_file, scan_result, loader, uses):
    """Writes the suite next to the target and swaps it in only once it is complete."""
    tmp_path = f"{output_file}.tmp"
    try:
        with open(tmp_path, 'w', encoding='utf-8', newline='\n') as f:
            write_suite(RustTestWriter(f, uses=uses), scan_result, loader)
        os.replace(tmp_path, output_file)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def _is_up_to_date(output_file, content):
    if not os.path.isfile(output_file):
        return False
    with open(output_file, 'r', encoding='utf-8', newline='') as f:
        return f.read() == content


@click.command('generate')
@click.option('--root', 'fixture_root', type=click.Path(), default=None, help="Fixture directory (overrides fixture_root).")
@click.option('--output', 'output_file', type=click.Path(dir_okay=False), default=None, help="Generated Rust file (overrides output_file).")
@click.option('--check', is_flag=True, help="Does not write; exits 1 if the output file is missing or stale.")
@click.pass_context
def generate(ctx, fixture_root, output_file, check):
    """Regenerates the Rust test suite from the .lox fixtures."""
    with ExecutionLogger('generate', '.', ctx.params) as logger:
        try:
            config = _get_project_config('.')
            fixture_root = os.path.abspath(fixture_root) if fixture_root else config['fixture_root']
            output_file = os.path.abspath(output_file) if output_file else config['output_file']

            directory_filter = build_directory_filter(config)
            result = scan(fixture_root, directory_filter)
            loader = FixtureLoader(config['extension'], logger)

            if check:
                content = render_suite(result, loader, uses=config['uses'])
                if not _is_up_to_date(output_file, content):
                    logger.add_finding('ERROR', f"'{output_file}' is out of date.", category='STALE-OUTPUT', file=output_file)
                    click.echo(Fore.RED + f"[STALE] '{output_file}' does not match the fixtures. Run 'loxtestgen generate'.")
                    sys.exit(1)
                click.echo(Fore.GREEN + f"[OK] '{output_file}' is up to date ({loader.total} tests).")
                return

            _write_output(output_file, result, loader, config['uses'])
        except ConfigError as e:
            logger.add_finding('CRITICAL', str(e), category='CONFIG')
            click.echo(Fore.RED + f"[ERROR] {e}")
            sys.exit(1)
        except InvalidFixtureError as e:
            logger.add_finding('CRITICAL', str(e), category='INVALID-FIXTURE')
            click.echo(Fore.RED + f"[ERROR] {e}")
            sys.exit(1)
        except OSError as e:
            logger.add_finding('CRITICAL', str(e), category='IO', file=getattr(e, 'filename', None))
            click.echo(Fore.RED + f"[ERROR] {e}")
            sys.exit(1)

        click.echo(Fore.GREEN + Style.BRIGHT + f"[OK] {loader.total} tests written to '{output_file}'.")
        click.echo(Fore.WHITE + f"   > Modules: {len(result.modules)} (skipped: {', '.join(result.skipped_dirs) or '-'})")
        click.echo(Fore.WHITE + f"   > Asserting output: {loader.stats['values']} | Asserting error: {loader.stats['error']} | No assertions: {loader.stats['none']}")
        logger.add_finding('INFO', f"{loader.total} tests generated.", category='GENERATE', file=output_file)
