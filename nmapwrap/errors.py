"""Exceptions raised when running or interpreting nmap."""

from __future__ import annotations

from collections.abc import Iterable


class NmapError(Exception):
    """Base class for every error reported by the scanner.

    ``warnings`` holds the non-critical messages collected before the error.
    """

    default_message = "nmap error"

    def __init__(self, message: str | None = None, warnings: Iterable[str] = ()) -> None:
        self.message = self.default_message if message is None else message
        self.warnings = list(warnings)
        super().__init__(self.message)


class NmapNotInstalledError(NmapError):
    """The nmap binary could not be found in PATH and no path was given."""

    default_message = "nmap binary was not found"


class ScanTimeoutError(NmapError):
    """The scan did not finish before its deadline."""

    default_message = "nmap scan timed out"


class ScanInterruptError(NmapError):
    """The scan was interrupted (signal or cancellation) before it finished."""

    default_message = "nmap scan interrupted"


class MallocFailedError(NmapError):
    """nmap ran out of memory, which may happen on large target networks."""

    default_message = "malloc failed, probably out of space"


class ParseOutputError(NmapError):
    """nmap's output could not be parsed."""

    default_message = "unable to parse nmap output, see warnings for details"


class RequiresRootError(NmapError):
    """A requested feature, such as OS detection, requires root privileges."""

    default_message = "this feature requires root privileges"


class ResolveNameError(NmapError):
    """nmap could not resolve a name."""

    default_message = "nmap could not resolve a name"