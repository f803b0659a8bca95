## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cakeargs — Command-line argument interpreter for the build script launcher.
#

from enum import Enum, auto
from typing import Iterable

import lark

from .types import Options, Verbosity, FilePath, DEFAULT_SCRIPT
from .errors import CakeInputError, CakeUsageError, CakeDuplicateArgumentError, CakeMultipleScriptsError, \
                    CakeVerbosityError, CakeBooleanError, CakeOptionSyntaxError
from .verbosity import VerbosityParser


# Only tokens already classified as options reach this grammar, so DASHES always matches.
GRAMMAR = r"""start: DASHES NAME? (SEPARATOR VALUE?)?

DASHES: /--?/
NAME: /[^=]+/s
SEPARATOR: "="
VALUE: /.+/s
"""

_OPTION_PARSER = lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='contextual')

QUOTES = ('"', "'")


class OptionKind(Enum):
    VERBOSITY = auto()
    SHOW_DESCRIPTION = auto()
    DRY_RUN = auto()
    HELP = auto()
    VERSION = auto()
    DEBUG = auto()
    MONO = auto()
    BOOTSTRAP = auto()
    PASSTHROUGH = auto()


OPTION_KIND_MAP: dict[str, OptionKind] = {
    'v': OptionKind.VERBOSITY, 'verbosity': OptionKind.VERBOSITY,
    's': OptionKind.SHOW_DESCRIPTION, 'showdescription': OptionKind.SHOW_DESCRIPTION,
    'dryrun': OptionKind.DRY_RUN, 'noop': OptionKind.DRY_RUN, 'whatif': OptionKind.DRY_RUN,
    'help': OptionKind.HELP, '?': OptionKind.HELP,
    'version': OptionKind.VERSION, 'ver': OptionKind.VERSION,
    'debug': OptionKind.DEBUG, 'd': OptionKind.DEBUG,
    'mono': OptionKind.MONO,
    'bootstrap': OptionKind.BOOTSTRAP,
}

BOOLEAN_OPTION_FIELDS: dict[OptionKind, str] = {
    OptionKind.SHOW_DESCRIPTION: 'show_description',
    OptionKind.DRY_RUN: 'perform_dry_run',
    OptionKind.HELP: 'show_help',
    OptionKind.VERSION: 'show_version',
    OptionKind.DEBUG: 'perform_debug',
    OptionKind.MONO: 'mono',
    OptionKind.BOOTSTRAP: 'bootstrap',
}


class ParserState(Enum):
    LEADING = auto()    # First token only: either the script path or an option.
    OPTIONS = auto()    # Every token after the first must be an option.


def unquote(text: str) -> str:
    """Strip a single matching pair of surrounding quotes, if present."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTES:
        return text[1:-1]
    return text


def is_option(argument: str) -> bool:
    if not argument or argument.isspace():
        return False
    return argument.startswith('-')


def option_kind(name: str) -> OptionKind:
    return OPTION_KIND_MAP.get(name.lower(), OptionKind.PASSTHROUGH)


def split_option(argument: str) -> tuple[str, str]:
    """Split `--name=value` or `-name` into its name and (unquoted) value."""
    try:
        tree = _OPTION_PARSER.parse(argument)
    except lark.exceptions.UnexpectedInput as exc:
        raise CakeOptionSyntaxError(str(exc), argument=argument, column=getattr(exc, 'column', None)) from None

    tokens = {tok.type: tok.value for tok in tree.children if isinstance(tok, lark.Token)}
    return tokens.get('NAME', ''), unquote(tokens.get('VALUE', ''))


def parse_boolean(value: str, argument: str | None = None) -> bool:
    if not value or value.isspace(): return True
    if (lowered := value.lower()) == 'true': return True
    if lowered == 'false': return False
    raise CakeBooleanError(f"Argument value `{value}` is not a valid boolean value.", argument=argument, value=value)


class ArgumentParser:
    """Turns raw process arguments into launcher `Options`.

    Usage errors are recorded on the returned options (`has_error`, `errors`) rather than raised;
    only an invalid boolean literal aborts the parse with `CakeBooleanError`. When a `log` sink
    is given, each usage error is also reported to it as soon as it's recorded.
    """

    def __init__(self, verbosity_parser: VerbosityParser | None = None, log=None):
        self.verbosity_parser = verbosity_parser or VerbosityParser()
        self.log = log

    def parse(self, args: Iterable[str]) -> Options:
        if args is None or isinstance(args, (str, bytes)):
            raise CakeInputError("Expected a sequence of argument strings.")

        arguments = list(args)
        if len(arguments) == 0:
            return Options(script=DEFAULT_SCRIPT)

        options = Options()
        state = ParserState.LEADING

        for argument in arguments:
            if not isinstance(argument, str):
                raise CakeInputError(f"Expected argument string, got `{type(argument).__name__}`.")
            value = unquote(argument)

            if state is ParserState.LEADING:
                state = ParserState.OPTIONS
                if not is_option(value):
                    options.script = FilePath(value)
                    continue
                if not self._parse_option(value, options):
                    return options
                options.script = DEFAULT_SCRIPT
            elif is_option(value):
                if not self._parse_option(value, options):
                    return options
            else:
                self._record(options, CakeMultipleScriptsError("More than one build script specified.", argument=value))
                return options

        return options

    def _record(self, options: Options, error: CakeUsageError) -> None:
        options.has_error = True
        options.errors.append(error)
        if self.log is not None:
            self.log.error(str(error))

    def _parse_option(self, argument: str, options: Options) -> bool:
        name, value = split_option(argument)
        kind = option_kind(name)

        if kind is OptionKind.VERBOSITY:
            verbosity, ok = self.verbosity_parser.try_parse(value)
            if not ok:
                # Not fatal: fall back to the default level and keep going.
                verbosity = Verbosity.NORMAL
                self._record(options, CakeVerbosityError(f"The value '{value}' is not a valid verbosity.",
                                                         argument=name, value=value))
            options.verbosity = verbosity
        elif kind is not OptionKind.PASSTHROUGH:
            setattr(options, BOOLEAN_OPTION_FIELDS[kind], parse_boolean(value, argument=name))

        if name in options.arguments:
            self._record(options, CakeDuplicateArgumentError(f"Multiple arguments with the same name ({name}).", argument=name))
            return False

        options.arguments.add(name, value)
        return True
