from __future__ import annotations

from cti.commands.command import Command
from cti.commands.exceptions import CommandFailure


def _requirement(num: int, bound: str | None) -> str:
    if num == 0:
        return "no argument"
    phrase = "1 argument" if num == 1 else f"{num} arguments"
    if bound:
        phrase += f" {bound}"
    return phrase


def _fail(command: Command, num: int, bound: str | None, detail: str | None) -> CommandFailure:
    message = f"Command '{command.name}' requires {_requirement(num, bound)}"
    if detail is not None:
        message += f": {detail}"
    return CommandFailure(message)


def check_num_arguments_equal(command: Command, num: int, detail: str | None = None) -> None:
    """Raise CommandFailure unless the command has exactly ``num`` arguments."""
    if command.num_arguments != num:
        raise _fail(command, num, None, detail)


def check_num_arguments_at_least(command: Command, num: int, detail: str | None = None) -> None:
    """Raise CommandFailure if the command has fewer than ``num`` arguments."""
    if command.num_arguments < num:
        raise _fail(command, num, "at least", detail)


def check_num_arguments_at_most(command: Command, num: int, detail: str | None = None) -> None:
    """Raise CommandFailure if the command has more than ``num`` arguments."""
    if command.num_arguments > num:
        raise _fail(command, num, "at most", detail)
