## cakeargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Options, Verbosity, FilePath, DEFAULT_SCRIPT
from .errors import *
from .parser import ArgumentParser
from .verbosity import VerbosityParser

__version__ = '0.1.0'

_PARSER = ArgumentParser()

def __getattr__(name):
    return getattr(_PARSER, name)
