"""Options for script scanning."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_default_script() -> Option:
    """Run the default set of scripts."""
    return _append("-sC")


def with_scripts(*scripts: str) -> Option:
    """Run the given scripts, script directories or categories."""
    return _append(f"--script={','.join(scripts)}")


def with_script_arguments(arguments: Mapping[str, str]) -> Option:
    """Pass arguments to scripts; a key with an empty value is used as a flag."""
    parts = [key if value == "" else f"{key}={value}" for key, value in arguments.items()]
    arg_list = ",".join(parts).lstrip(",")
    return _append(f"--script-args={arg_list}")


def with_script_arguments_file(input_file_path: str) -> Option:
    """Read script arguments from a file."""
    return _append(f"--script-args-file={input_file_path}")


def with_script_trace() -> Option:
    """Show all data sent and received by scripts."""
    return _append("--script-trace")


def with_script_update_db() -> Option:
    """Update the script database."""
    return _append("--script-updatedb")


def with_script_timeout(timeout: timedelta | float) -> Option:
    """Set the script timeout; a number is taken as seconds."""
    if not isinstance(timeout, timedelta):
        timeout = timedelta(seconds=timeout)
    microseconds = timeout // timedelta(microseconds=1)
    milliseconds = abs(microseconds) // 1000
    if microseconds < 0:
        milliseconds = -milliseconds
    return _append("--script-timeout", f"{milliseconds}ms")