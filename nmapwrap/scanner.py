"""The scanner: holds nmap arguments and runs the nmap binary."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable

from .errors import MallocFailedError, NmapNotInstalledError, RequiresRootError
from .iflist import InterfaceList, parse_interfaces

Option = Callable[["Scanner"], None]


class Scanner:
    """A configured nmap invocation.

    Options are callables that modify the scanner, usually by appending to
    ``args``. If no binary path is set by an option, nmap is looked up in PATH.
    """

    def __init__(self, *options: Option) -> None:
        self.args: list[str] = []
        self.binary_path = ""
        self.add_options(*options)

        if not self.binary_path:
            found = shutil.which("nmap")
            if found is None:
                raise NmapNotInstalledError()
            self.binary_path = found

    def add_options(self, *options: Option) -> Scanner:
        """Apply more options after the scanner was created."""
        for option in options:
            option(self)
        return self

    def interface_list(self) -> InterfaceList:
        """Run nmap with ``--iflist`` and return the parsed interfaces and routes.

        Raises ``subprocess.CalledProcessError`` if nmap exits with an error.
        """
        completed = subprocess.run(
            [self.binary_path, *self.args, "--iflist"],
            capture_output=True,
            check=True,
        )
        return parse_interfaces(completed.stdout)


def check_stderr(stderr: bytes | str) -> list[str]:
    """Split nmap's stderr into warnings, raising on known critical messages.

    A raised error carries the warnings collected up to that point.
    """
    if isinstance(stderr, (bytes, bytearray)):
        stderr = stderr.decode("utf-8", errors="replace")
    if not stderr:
        return []

    warnings: list[str] = []
    for line in stderr.strip("\n ").split("\n"):
        warning = line.strip(" ")
        warnings.append(warning)
        if "Malloc Failed!" in warning:
            raise MallocFailedError(warnings=warnings)
        if "requires root privileges." in warning:
            raise RequiresRootError(warnings=warnings)
    return warnings


def with_custom_arguments(*args: str) -> Option:
    """Append raw arguments to the nmap command line."""

    def apply(scanner: Scanner) -> None:
        scanner.args.extend(args)

    return apply


def with_binary_path(binary_path: str) -> Option:
    """Use the nmap binary at the given path instead of looking it up."""

    def apply(scanner: Scanner) -> None:
        scanner.binary_path = binary_path

    return apply