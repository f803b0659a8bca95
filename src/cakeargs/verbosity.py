## cakeargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Verbosity
from .errors import CakeVerbosityError


VERBOSITY_NAME_MAP: dict[str, Verbosity] = {
    'q': Verbosity.QUIET, 'quiet': Verbosity.QUIET,
    'm': Verbosity.MINIMAL, 'minimal': Verbosity.MINIMAL,
    'n': Verbosity.NORMAL, 'normal': Verbosity.NORMAL,
    'v': Verbosity.VERBOSE, 'verbose': Verbosity.VERBOSE,
    'd': Verbosity.DIAGNOSTIC, 'diagnostic': Verbosity.DIAGNOSTIC,
}


class VerbosityParser:
    """Resolves the text of a `--verbosity` option to a level."""

    def __init__(self, names: dict[str, Verbosity] | None = None):
        self.names = {k.lower(): v for k, v in (names or VERBOSITY_NAME_MAP).items()}

    def try_parse(self, text: str | None) -> tuple[Verbosity | None, bool]:
        level = self.names.get((text or '').strip().lower())
        return level, level is not None

    def parse(self, text: str | None) -> Verbosity:
        level, ok = self.try_parse(text)
        if not ok:
            raise CakeVerbosityError(f"The value '{text}' is not a valid verbosity.", argument='verbosity', value=text)
        return level
