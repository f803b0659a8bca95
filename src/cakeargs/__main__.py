## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cakeargs — Command-line argument interpreter for the build script launcher.
#

import sys
from dataclasses import dataclass

import click

from .errors import CakeArgsError, CakeBooleanError
from .parser import ArgumentParser
from .diagnostics import ConsoleLog, report_errors, format_options, write_without_ansi

from . import api


USAGE = """Usage: cakeargs [script] [--verbosity=value] [--showdescription] [--dryrun] [..]

Example: cakeargs
Example: cakeargs build.cake --verbosity=quiet
Example: cakeargs build.cake --showdescription

Options:
    --verbosity=value    Specifies the amount of information to be displayed.
                         ({Quiet|Minimal|Normal|Verbose|Diagnostic})
    --debug              Performs a debug.
    --showdescription    Shows description about tasks.
    --dryrun             Performs a dry run.
    --version            Displays version information.
    --help               Displays usage information.
    --mono               Uses the Mono compiler rather than the Roslyn script engine.
    --bootstrap          Download/install modules defined by #module directives.
"""


@dataclass(frozen=True)
class LauncherConfig:
    plain: bool


def _fatal_error(message: str, detail: str, exc_type: str | None = None) -> None:
    header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
    print(f'\033[30;43m {message} \033[0m {header}', file=sys.stderr)


def run(config: LauncherConfig, tokens: list[str]) -> int:
    if config.plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer

    try:
        options = ArgumentParser().parse(tokens)
    except CakeBooleanError as exc:
        _fatal_error("INVALID ARGUMENT.", f"Option `\033[97m{exc.argument}\033[0m` expects a boolean: {exc}", type(exc).__name__)
        return 1
    except CakeArgsError as exc:
        _fatal_error("INVALID ARGUMENT.", str(exc), type(exc).__name__)
        return 1

    if options.has_error:
        report_errors(options, ConsoleLog())
        print(USAGE)
        return 1
    if options.show_help:
        print(USAGE)
        return 0
    if options.show_version:
        print(f"cakeargs {api.__version__}")
        return 0

    print(format_options(options))
    return 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True, 'help_option_names': []})
@click.option('--plain', is_flag=True, envvar='CAKEARGS_PLAIN', help='Strip ANSI color codes and redirect stderr to stdout.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, plain: bool, tokens: tuple[str, ...]) -> None:
    config = LauncherConfig(plain=plain)
    ctx.exit(run(config, list(tokens)))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='cakeargs')


if __name__ == "__main__":
    main()
