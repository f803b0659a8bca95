## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from .types import Options


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


class ConsoleLog:
    """Diagnostic sink that prints human-readable messages to the terminal."""

    def __init__(self, file=None):
        self.file = file

    def error(self, message: str, *args) -> None:
        text = message.format(*args) if args else message
        print(f'\033[30;43m ERROR. \033[0m {text}', file=self.file or sys.stderr)


def report_errors(options: Options, log) -> int:
    for error in options.errors:
        log.error(str(error))
    return len(options.errors)


def format_options(options: Options) -> str:
    rows = [
        ('script', str(options.script)),
        ('verbosity', str(options.verbosity)),
        ('showdescription', options.show_description),
        ('dryrun', options.perform_dry_run),
        ('help', options.show_help),
        ('version', options.show_version),
        ('debug', options.perform_debug),
        ('mono', options.mono),
        ('bootstrap', options.bootstrap),
    ]
    lines = [f"{key}\t\033[97m{str(value).lower() if isinstance(value, bool) else value}\033[0m" for key, value in rows]
    if len(options.arguments) > 0:
        lines.append(f"\n\033[97m\033[48;5;30m ARGUMENTS. \033[0m")
        lines.extend(f"{name}\t\033[97m{value!r}\033[0m" for name, value in options.arguments.items())
    return '\n'.join(lines)
