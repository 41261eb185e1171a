"""Input sources for the CLI: piped stdin or the system clipboard."""

from __future__ import annotations

import platform
import re
import subprocess
import sys
from typing import List, Optional, Sequence, TextIO

from .logging import get_logger

logger = get_logger("inputs")

CLIPBOARD_TIMEOUT = 3.0

_TEL_URI_PATTERN = re.compile(r"tel:(.*)")


class InputError(RuntimeError):
    """Raised when no input can be read from stdin or the clipboard."""


def strip_tel_scheme(text: str) -> str:
    """Return the number from a ``tel:`` URI, or ``text`` unchanged.

    The scheme is matched case-sensitively after trimming, so ``TEL:123`` is
    left alone.
    """
    match = _TEL_URI_PATTERN.fullmatch(text.strip())
    if match:
        return match.group(1)
    return text


def read_input(stream: Optional[TextIO] = None) -> str:
    """Read piped input when present, otherwise the clipboard."""
    source = stream if stream is not None else sys.stdin
    if source is not None and not source.isatty():
        logger.debug("Reading input from stdin")
        return source.read()
    logger.debug("Reading input from clipboard")
    return read_clipboard()


def clipboard_commands(system: Optional[str] = None) -> List[List[str]]:
    """Return the clipboard read commands to try for ``system``, in order."""
    system = system or platform.system()
    if system == "Darwin":
        return [["pbpaste"]]
    if system == "Windows":
        return [["powershell", "-NoProfile", "-Command", "Get-Clipboard"]]
    return [
        ["wl-paste", "--no-newline"],
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ]


def read_clipboard(commands: Optional[Sequence[Sequence[str]]] = None) -> str:
    """Return the clipboard text using the first available clipboard tool."""
    candidates = commands if commands is not None else clipboard_commands()
    failures: List[str] = []
    for command in candidates:
        try:
            result = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                timeout=CLIPBOARD_TIMEOUT,
                check=False,
            )
        except FileNotFoundError:
            failures.append(f"{command[0]}: not installed")
            continue
        except subprocess.TimeoutExpired:
            failures.append(f"{command[0]}: timed out")
            continue
        if result.returncode == 0:
            return result.stdout
        failures.append(f"{command[0]}: exit status {result.returncode}")

    raise InputError("Unable to read the clipboard (" + "; ".join(failures) + ")")


__all__ = [
    "InputError",
    "clipboard_commands",
    "read_clipboard",
    "read_input",
    "strip_tel_scheme",
]
