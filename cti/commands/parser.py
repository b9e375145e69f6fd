from __future__ import annotations


def parse_command(text: str) -> tuple[str, list[str]]:
    """Split a raw line into a command name and its arguments.

    Any run of whitespace is a single separator, so a blank line yields
    ``("", [])``.
    """
    parts = text.split()
    if not parts:
        return ("", [])
    return (parts[0], parts[1:])
