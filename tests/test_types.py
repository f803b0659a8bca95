## cakeargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from cakeargs.types import Arguments, FilePath, Options, Verbosity, DEFAULT_SCRIPT


def test_file_path_compares_with_strings_and_paths():
    path = FilePath("build.cake")
    assert path == "build.cake"
    assert path == FilePath("build.cake")
    assert path != FilePath("other.cake")
    assert str(path) == "build.cake"
    assert len({path, FilePath("build.cake")}) == 1


def test_default_script():
    assert DEFAULT_SCRIPT == "./build.cake"


def test_verbosity_levels_are_ordered():
    assert Verbosity.QUIET < Verbosity.MINIMAL < Verbosity.NORMAL < Verbosity.VERBOSE < Verbosity.DIAGNOSTIC
    assert str(Verbosity.DIAGNOSTIC) == "Diagnostic"


def test_arguments_lookup_ignores_case():
    args = Arguments()
    args.add("Target", "Pack")
    assert args["target"] == "Pack"
    assert args["TARGET"] == "Pack"
    assert "tArGeT" in args
    assert args.get("missing") is None
    assert 42 not in args
    with pytest.raises(KeyError):
        args["missing"]


def test_arguments_keep_first_spelling_and_order():
    args = Arguments()
    args.add("Zeta", "1")
    args.add("alpha", "")
    assert list(args) == ["Zeta", "alpha"]
    assert dict(args) == {"Zeta": "1", "alpha": ""}
    assert len(args) == 2


def test_arguments_reject_duplicates():
    args = Arguments()
    args.add("debug", "")
    with pytest.raises(KeyError):
        args.add("DEBUG", "true")
    assert args["debug"] == ""


def test_options_do_not_share_collections():
    first, second = Options(), Options()
    first.arguments.add("mono", "")
    first.errors.append("boom")
    assert len(second.arguments) == 0
    assert second.errors == []
    assert first.script is None
