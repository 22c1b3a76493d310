# loxtestgen/cli.py
"""
Main entry point (command router).
Commands are only imported when invoked.
"""
import sys
import click
from importlib import import_module
from colorama import init as colorama_init, Fore, Style
from loxtestgen import __version__

colorama_init(autoreset=True)


class LazyGroup(click.Group):
    """Dispatcher that imports a command module only when the command runs."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 'command': 'module:attribute'
        self._lazy_map = {
            'generate': 'loxtestgen.commands.generate:generate',
            'history': 'loxtestgen.commands.history:history',
            'scan': 'loxtestgen.commands.scan:scan_cmd',
        }

    def list_commands(self, ctx):
        return sorted(self._lazy_map.keys())

    def get_command(self, ctx, name):
        if name not in self._lazy_map:
            return None
        module_path, attr_name = self._lazy_map[name].split(':')
        return getattr(import_module(module_path), attr_name)


@click.group(cls=LazyGroup, invoke_without_command=True)
@click.version_option(__version__, prog_name='loxtestgen')
@click.pass_context
def cli(ctx):
    """Generates the Rust VM test suite from the .lox fixture tree."""
    if ctx.invoked_subcommand is None:
        # A bare invocation runs the whole pipeline.
        ctx.invoke(ctx.command.get_command(ctx, 'generate'))


def main():
    try:
        cli()
    except KeyboardInterrupt:
        click.echo(f"{Fore.YELLOW}\n[!] Interrupted.")
        sys.exit(130)
    except Exception as e:
        click.echo(Fore.RED + Style.BRIGHT + "\n--- UNEXPECTED FATAL ERROR ---")
        click.echo(Fore.WHITE + f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
