from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cti.commands.command import Command

logger = logging.getLogger(__name__)

Handler = Callable[[Command], None]

DEFAULT_HELP = "No help"


@dataclass
class CommandSpec:
    name: str
    handler: Handler  # function(command: Command) -> None, writes into command
    help: str = DEFAULT_HELP


class CommandRegistry:
    """Command lookup keyed on the lowercased name.

    Listing keeps the display name exactly as it was registered.
    """

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def is_registered(self, name: str) -> bool:
        return self._key(name) in self._commands

    def register(self, name: str, handler: Handler, help: str = DEFAULT_HELP) -> None:
        key = self._key(name)
        if key in self._commands:
            logger.debug("Replacing command: %s", self._commands[key].name)
        self._commands[key] = CommandSpec(name=name, handler=handler, help=help)

    def remove(self, name: str) -> bool:
        return self._commands.pop(self._key(name), None) is not None

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(self._key(name))

    def lookup(self, name: str) -> Handler | None:
        spec = self.get(name)
        return spec.handler if spec else None

    def list_commands(self) -> list[CommandSpec]:
        return list(self._commands.values())

    def names(self) -> list[str]:
        return [spec.name for spec in self._commands.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        return len(self._commands)
