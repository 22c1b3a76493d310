# loxtestgen/commands/history.py
import json
import sqlite3
import click
from colorama import Fore, Style
from ..shared_tools import _recent_events

STATUS_COLORS = {'completed': Fore.GREEN, 'failed': Fore.RED}
SEVERITY_COLORS = {'CRITICAL': Fore.RED, 'ERROR': Fore.RED, 'WARNING': Fore.YELLOW, 'INFO': Fore.CYAN}


def _format_timestamp(timestamp):
    # 2026-10-18T12:03:44.123456Z -> 2026-10-18 12:03:44
    return timestamp.replace('T', ' ').split('.')[0].rstrip('Z')


@click.command('history')
@click.option('--limit', '-n', default=10, help="Number of runs to show.")
@click.option('--command', '-c', 'command_name', default=None, help="Only runs of this command (generate, scan...).")
@click.option('--findings/--no-findings', default=True, help="Shows the findings recorded for each run.")
def history(limit, command_name, findings):
    """Shows the most recent loxtestgen runs recorded in the history database."""
    try:
        events = _recent_events(limit=limit, command=command_name)
    except sqlite3.Error as e:
        click.echo(Fore.RED + f"[ERROR] Could not read the history database: {e}")
        return

    if not events:
        click.echo(Fore.YELLOW + "No runs recorded yet.")
        return

    click.echo(Style.BRIGHT + f"\n--- Last {len(events)} run(s) ---")
    # Oldest first, like a log.
    for event in reversed(events):
        color = STATUS_COLORS.get(event['status'], Fore.WHITE)
        click.echo(
            f"{color}[{event['status'].upper()}]{Style.RESET_ALL} "
            f"{_format_timestamp(event['timestamp'])}  {event['command']:<9} "
            f"{Style.DIM}{event['execution_time_ms']:.0f}ms  {event['project_path']}{Style.RESET_ALL}"
        )
        arguments = json.loads(event.get('arguments') or '{}')
        if arguments:
            options = ' '.join(f"{name}={value}" for name, value in arguments.items())
            click.echo(f"    {Style.DIM}args: {options}{Style.RESET_ALL}")
        if not findings:
            continue
        for finding in event['findings']:
            sev_color = SEVERITY_COLORS.get(finding['severity'], Fore.WHITE)
            location = f" ({finding['file']})" if finding['file'] else ""
            click.echo(f"    {sev_color}{finding['severity']}{Style.RESET_ALL} {finding['message']}{Style.DIM}{location}{Style.RESET_ALL}")
