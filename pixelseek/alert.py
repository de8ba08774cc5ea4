"""Blocking alert dialogs shown through an xmessage-style program."""

from __future__ import annotations

import subprocess
from typing import Optional

_MESSAGE_PROGRAMS = ("gmessage", "gxmessage", "kmessage", "xmessage")
_DEFAULT_STATUS = 2
_CANCEL_STATUS = 3
# Exit status that means the program could not be run at all.
_NOT_RUN_STATUS = 42


class AlertError(Exception):
    """Raised when an alert could not be displayed."""


class _ProgramNotRun(Exception):
    pass


def _run_task(argv: list[str]) -> int:
    """Run ``argv`` to completion and return its exit status."""
    try:
        completed = subprocess.run(argv, check=False)
    except (FileNotFoundError, PermissionError) as exc:
        raise _ProgramNotRun(argv[0]) from exc
    except OSError as exc:
        raise AlertError(f"could not start {argv[0]}: {exc}") from exc
    if completed.returncode < 0 or completed.returncode == _NOT_RUN_STATUS:
        raise _ProgramNotRun(argv[0])
    return completed.returncode


class _MessageLauncher:
    """Runs the first available message program, remembering which worked."""

    def __init__(self) -> None:
        self.preferred: Optional[str] = None

    def run(self, args: list[str]) -> int:
        if self.preferred is not None:
            try:
                return _run_task([self.preferred, *args])
            except _ProgramNotRun:
                raise AlertError("xmessage or equivalent not found") from None
        for program in _MESSAGE_PROGRAMS:
            try:
                status = _run_task([program, *args])
            except _ProgramNotRun:
                continue
            self.preferred = program
            return status
        raise AlertError("xmessage or equivalent not found")


_launcher = _MessageLauncher()


def show_alert(
    title: str,
    msg: str,
    default_button: Optional[str] = None,
    cancel_button: Optional[str] = None,
) -> bool:
    """Show an alert and block until the user answers.

    Returns True if the default button was pressed and False otherwise.
    Raises AlertError if no dialog could be shown.
    """
    if default_button is None:
        default_button = "OK"
    buttons = f"{default_button}:{_DEFAULT_STATUS}"
    if cancel_button is not None:
        buttons += f",{cancel_button}:{_CANCEL_STATUS}"
    args = [
        msg,
        "-title", title,
        "-center",
        "-buttons", buttons,
        "-default", default_button,
    ]
    return _launcher.run(args) == _DEFAULT_STATUS