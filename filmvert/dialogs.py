"""File and folder pickers backed by the zenity desktop dialog."""

from __future__ import annotations

import subprocess

_FILE_TITLE = "--title=Select File(s)"
_FOLDER_TITLE = "--title=Select Folder(s)"


def split_selection(output: str, delimiter: str) -> list[str]:
    """Split dialog output on ``delimiter``.

    One trailing newline is removed from each piece, and empty pieces are
    dropped.
    """
    pieces = output.split(delimiter)
    selection = []
    for piece in pieces:
        if piece.endswith("\n"):
            piece = piece[:-1]
        if piece:
            selection.append(piece)
    return selection


def parse_dialog_output(output: str, allow_multiple: bool) -> list[str]:
    """Turn the raw text printed by the dialog into a list of paths."""
    if not output:
        return []
    if allow_multiple:
        return split_selection(output, "|")
    if output.endswith("\n"):
        output = output[:-1]
    return [output]


def _run_zenity(arguments: list[str]) -> str:
    """Run zenity and return what it printed, or an empty string if it cannot start."""
    try:
        completed = subprocess.run(
            arguments,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError:
        return ""
    return completed.stdout or ""


def show_file_open_dialog(
    allow_multiple: bool = True, can_choose_directories: bool = False
) -> list[str]:
    """Ask the user for one or more files; return the chosen paths."""
    arguments = ["zenity", "--file-selection", _FILE_TITLE]
    if allow_multiple:
        arguments.append("--multiple")
    if can_choose_directories:
        arguments.append("--directory")
    return parse_dialog_output(_run_zenity(arguments), allow_multiple)


def show_folder_selection_dialog(allow_multiple: bool = True) -> list[str]:
    """Ask the user for one or more folders; return the chosen paths."""
    arguments = ["zenity", "--file-selection", "--directory", _FOLDER_TITLE]
    if allow_multiple:
        arguments.append("--multiple")
    return parse_dialog_output(_run_zenity(arguments), allow_multiple)