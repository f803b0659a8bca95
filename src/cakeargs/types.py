## cakeargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import IntEnum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


class Verbosity(IntEnum):
    QUIET = 0
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DIAGNOSTIC = 4

    def __str__(self):
        return self.name.capitalize()


@dataclass(frozen=True)
class FilePath:
    """Opaque path value; nothing here touches the filesystem."""
    path: str

    def __str__(self):
        return self.path

    def __eq__(self, other):
        if isinstance(other, FilePath): return self.path == other.path
        if isinstance(other, str): return self.path == other
        return NotImplemented

    def __hash__(self):
        return hash(self.path)


DEFAULT_SCRIPT = FilePath('./build.cake')


class Arguments(Mapping):
    """Option names to raw values, with names compared case-insensitively."""

    def __init__(self):
        self._items: dict[str, tuple[str, str]] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def add(self, name: str, value: str) -> None:
        if (key := self._key(name)) in self._items:
            raise KeyError(name)
        self._items[key] = (name, value)

    def __getitem__(self, name: str) -> str:
        return self._items[self._key(name)][1]

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self._key(name) in self._items

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self):
        return "Arguments(" + repr(dict(self.items())) + ")"


@dataclass
class Options:
    script: FilePath | None = None
    verbosity: Verbosity = Verbosity.NORMAL
    show_description: bool = False
    perform_dry_run: bool = False
    show_help: bool = False
    show_version: bool = False
    perform_debug: bool = False
    mono: bool = False
    bootstrap: bool = False
    arguments: Arguments = field(default_factory=Arguments)
    has_error: bool = False
    # Structured usage errors, in the order they were detected.
    errors: list = field(default_factory=list)
