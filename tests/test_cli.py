## cakeargs — CLI integration tests

import os, sys
import subprocess
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def run_cli(*cli_args: str, env: dict | None = None, plain: bool = True) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "cakeargs"] + (["--plain"] if plain else [])
    args.extend(cli_args)
    merged_env = os.environ.copy()
    merged_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(repo_root() / "src"), merged_env.get("PYTHONPATH")]))
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def test_cli_without_arguments_shows_defaults():
    result = run_cli()
    assert result.returncode == 0
    assert "script\t./build.cake" in result.stdout
    assert "verbosity\tNormal" in result.stdout


def test_cli_passes_options_through():
    result = run_cli("build.cake", "--verbosity=diagnostic", "-debug", "--target=Pack")
    assert result.returncode == 0
    out = result.stdout
    assert "script\tbuild.cake" in out
    assert "verbosity\tDiagnostic" in out
    assert "debug\ttrue" in out
    assert "target\t'Pack'" in out


def test_cli_usage_error_reports_and_fails():
    result = run_cli("a.cake", "b.cake")
    assert result.returncode == 1
    out = result.stdout
    assert "ERROR." in out
    assert "More than one build script specified." in out
    assert "Usage: cakeargs" in out


def test_cli_duplicate_argument():
    result = run_cli("--mono", "--MONO")
    assert result.returncode == 1
    assert "Multiple arguments with the same name (MONO)." in result.stdout


def test_cli_invalid_boolean_is_reported():
    result = run_cli("--dryrun=notabool")
    assert result.returncode == 1
    out = result.stdout
    assert "INVALID ARGUMENT." in out
    assert "CakeBooleanError" in out
    assert "Usage: cakeargs" not in out


def test_cli_help_reaches_the_parser():
    result = run_cli("--help")
    assert result.returncode == 0
    assert "Usage: cakeargs" in result.stdout
    assert "--showdescription" in result.stdout


def test_cli_question_mark_help():
    result = run_cli("-?")
    assert result.returncode == 0
    assert "Usage: cakeargs" in result.stdout


def test_cli_version():
    result = run_cli("build.cake", "--ver")
    assert result.returncode == 0
    assert result.stdout.strip() == "cakeargs 0.1.0"


def test_cli_plain_from_environment():
    result = run_cli("--debug", plain=False, env={"CAKEARGS_PLAIN": "1"})
    assert result.returncode == 0
    assert "\033[" not in result.stdout
    assert "debug\ttrue" in result.stdout


def test_cli_colors_without_plain():
    result = run_cli("--debug", plain=False, env={"CAKEARGS_PLAIN": ""})
    assert result.returncode == 0
    assert "\033[97m" in result.stdout
