from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from cti.commands.command import Command
from cti.commands.registry import CommandRegistry
from cti.commands.validators import check_num_arguments_at_least, check_num_arguments_equal

logger = logging.getLogger(__name__)


def cmd_echo(command: Command) -> None:
    check_num_arguments_at_least(command, 1)
    command.write(" ".join(command.arguments))


def cmd_list_commands(command: Command, registry: CommandRegistry) -> None:
    check_num_arguments_equal(command, 0)
    command.write("\n")
    for name in registry.names():
        command.write(name, "\n")


def cmd_help(command: Command, registry: CommandRegistry) -> None:
    """One ``name : help`` line per command, names padded to a common column."""
    check_num_arguments_equal(command, 0)
    specs = registry.list_commands()
    width = max((len(spec.name) for spec in specs), default=0) + 2
    for spec in specs:
        command.write("\n", spec.name.ljust(width), " : ", spec.help)


def cmd_quit(command: Command, on_quit: Callable[[], None]) -> None:
    check_num_arguments_equal(command, 0)
    on_quit()
    logger.debug("Quit requested")


def register_builtins(registry: CommandRegistry, on_quit: Callable[[], None]) -> None:
    registry.register("echo", cmd_echo, "Echo test")
    registry.register(
        "list_commands",
        partial(cmd_list_commands, registry=registry),
        "List registered commands",
    )
    registry.register("help", partial(cmd_help, registry=registry), "Show help")
    registry.register("quit", partial(cmd_quit, on_quit=on_quit), "Quit the application")
