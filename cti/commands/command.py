from __future__ import annotations

from io import StringIO

from cti.commands.parser import parse_command


class Command:
    """One parsed request line plus the response being built for it.

    Usage::

        command = Command("echo hello world")
        assert command.name == "echo"
        command.write("hello", " ", "world")
        assert command.response == "hello world"

        # Re-using the object replaces everything, response included
        command.parse("quit")
        assert command.response == ""
    """

    def __init__(self, raw: str = "") -> None:
        self._raw = ""
        self._name = ""
        self._arguments: list[str] = []
        self._response = StringIO()
        self.parse(raw)

    def parse(self, raw: str) -> None:
        name, arguments = parse_command(raw)
        self._raw = raw
        self._name = name
        self._arguments = arguments
        self.clear()

    def clear(self) -> None:
        """Drop the response text, keeping name and arguments."""
        self._response = StringIO()

    def write(self, *values: object) -> Command:
        for value in values:
            self._response.write(str(value))
        return self

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def name(self) -> str:
        return self._name

    @property
    def arguments(self) -> tuple[str, ...]:
        return tuple(self._arguments)

    @property
    def num_arguments(self) -> int:
        return len(self._arguments)

    def argument(self, index: int) -> str:
        if not 0 <= index < len(self._arguments):
            raise IndexError(
                f"argument index {index} out of range for '{self._name}' "
                f"({len(self._arguments)} arguments)"
            )
        return self._arguments[index]

    @property
    def response(self) -> str:
        return self._response.getvalue()

    def __repr__(self) -> str:
        return f"Command(raw={self._raw!r})"
