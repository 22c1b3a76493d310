# loxtestgen/tools/logger.py
import os
import time
from datetime import datetime
from colorama import Fore, Style
import click
from .db_utils import _log_execution


class ExecutionLogger:
    def __init__(self, command_name, path, arguments, quiet=False):
        self.command_name = command_name
        self.path = path
        self.arguments = arguments
        self.quiet = quiet
        self.start_time = time.monotonic()
        self.results = {
            'summary': {'critical': 0, 'errors': 0, 'warnings': 0, 'info': 0},
            'findings': []
        }

        self.start_dt = datetime.now().strftime("%H:%M:%S")
        if not self.quiet:
            click.echo(Fore.CYAN + Style.DIM + f"[{self.start_dt}] Running {command_name}..." + Style.RESET_ALL)

    def add_finding(self, severity, message, category='UNCATEGORIZED', file=None, details=None):
        severity = severity.upper()
        category = category.upper()

        finding = {
            'severity': severity, 'category': category, 'message': message,
            'file': os.path.relpath(file, self.path) if file and os.path.isabs(file) else file,
            'details': details,
        }

        self.results['findings'].append(finding)
        if severity == 'CRITICAL': self.results['summary']['critical'] += 1
        elif severity == 'ERROR': self.results['summary']['errors'] += 1
        elif severity == 'WARNING': self.results['summary']['warnings'] += 1
        elif severity == 'INFO': self.results['summary']['info'] += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        execution_time_ms = (time.monotonic() - self.start_time) * 1000
        if exc_type and not isinstance(exc_val, SystemExit):
            self.add_finding('CRITICAL', 'loxtestgen hit an internal error.', category='INTERNAL-ERROR', details=f"{exc_type.__name__}: {exc_val}")

        _log_execution(self.command_name, self.path, self.results, self.arguments, execution_time_ms)

        if not self.quiet:
            duration = time.monotonic() - self.start_time
            color = Fore.GREEN if duration < 1.0 else (Fore.YELLOW if duration < 3.0 else Fore.RED)
            click.echo(f"{color}{Style.DIM}[{self.command_name}] Total time: {duration:.3f}s{Style.RESET_ALL}")
